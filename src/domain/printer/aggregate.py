"""Printer - the shared resource handed out through a singleton accessor."""
import threading
from datetime import datetime, timezone
from typing import Any, List, Union

from src.domain.core.exceptions import ValidationError
from src.domain.printer.value_objects import PrintJob, PrinterMode


class Printer:
    """
    Printer with a mode and a job history.

    A single instance is shared by everyone in the process, so every state
    change goes through the instance lock and is visible to all holders as
    soon as the call returns.
    """

    def __init__(self, mode: Union[PrinterMode, str] = PrinterMode.GRAYSCALE):
        self._lock = threading.Lock()
        self._mode = PrinterMode.parse(mode)
        self._jobs: List[PrintJob] = []

    @property
    def mode(self) -> PrinterMode:
        with self._lock:
            return self._mode

    def set_mode(self, mode: Union[PrinterMode, str]) -> None:
        parsed = PrinterMode.parse(mode)
        with self._lock:
            self._mode = parsed

    def print_document(self, document: Any) -> PrintJob:
        """
        Print a document (anything with a ``title``, or a plain string).

        Returns:
            The recorded print job
        """
        title = document if isinstance(document, str) else getattr(document, "title", None)
        if not title:
            raise ValidationError("Only documents with a title can be printed")

        with self._lock:
            job = PrintJob(
                job_id=len(self._jobs) + 1,
                title=title,
                mode=self._mode,
                printed_at=datetime.now(timezone.utc),
            )
            self._jobs.append(job)
        return job

    @property
    def jobs(self) -> List[PrintJob]:
        with self._lock:
            return list(self._jobs)

    @property
    def job_count(self) -> int:
        with self._lock:
            return len(self._jobs)

    def __repr__(self) -> str:
        return f"Printer(mode={self.mode.value}, jobs={self.job_count})"
