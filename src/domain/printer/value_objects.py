# src/domain/printer/value_objects.py
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from src.domain.core.exceptions import ValidationError


class PrinterMode(str, Enum):
    """Printer output modes."""
    GRAYSCALE = "grayscale"
    COLOR = "color"
    DRAFT = "draft"

    @classmethod
    def parse(cls, value) -> "PrinterMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Invalid printer mode: {value}")


@dataclass(frozen=True)
class PrintJob:
    """Record of one printed document."""
    job_id: int
    title: str
    mode: PrinterMode
    printed_at: datetime

    def __str__(self) -> str:
        return f"Job {self.job_id}: '{self.title}' in {self.mode.value} mode"
