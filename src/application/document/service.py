"""Document service: drafts documents from prototypes and prints them."""
from typing import Any

from src.domain.document.aggregate import Document
from src.domain.printer.aggregate import Printer
from src.domain.printer.value_objects import PrintJob
from src.infrastructure.logging.logger import get_logger
from src.infrastructure.patterns.singleton_access import SingletonAccessor
from src.infrastructure.registry.prototype_registry import PrototypeRegistry


class DocumentService:
    """Creates documents by cloning registered prototypes and sends them to the shared printer."""

    def __init__(self, prototypes: PrototypeRegistry[Document], printer: SingletonAccessor[Printer]):
        self._prototypes = prototypes
        self._printer = printer
        self.logger = get_logger(__name__)

    def draft(self, prototype_name: Any, **updates: Any) -> Document:
        """
        Start a new document from a prototype.

        Raises:
            UnknownTypeError: If the prototype is not registered
        """
        return self._prototypes.clone(prototype_name, **updates)

    def print(self, document: Document) -> PrintJob:
        job = self._printer.get_instance().print_document(document)
        self.logger.info("Printed document", title=job.title, mode=job.mode.value, job_id=job.job_id)
        return job
