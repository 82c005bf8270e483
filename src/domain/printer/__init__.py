"""Printer bounded context - one shared printer per process."""

from src.domain.printer.aggregate import Printer
from src.domain.printer.value_objects import PrintJob, PrinterMode

__all__ = ["Printer", "PrintJob", "PrinterMode"]
