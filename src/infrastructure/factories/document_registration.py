"""Document Registration Module.

Loads the built-in document prototypes into a prototype registry.
"""
from src.domain.document.aggregate import Document
from src.domain.document.templates import DEFAULT_PROTOTYPES
from src.infrastructure.logging.logger import get_logger
from src.infrastructure.registry.prototype_registry import PrototypeRegistry


def register_document_prototypes(registry: PrototypeRegistry[Document]) -> None:
    """Register every built-in document prototype."""
    logger = get_logger(__name__)
    for name, make_prototype in DEFAULT_PROTOTYPES.items():
        registry.register(name, make_prototype())
    logger.info("Registered %d document prototypes", len(DEFAULT_PROTOTYPES))
