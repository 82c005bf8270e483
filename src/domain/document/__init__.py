"""Document bounded context - prototypes duplicated by deep copy."""

from src.domain.document.aggregate import Document
from src.domain.document.templates import DEFAULT_PROTOTYPES

__all__ = ["Document", "DEFAULT_PROTOTYPES"]
