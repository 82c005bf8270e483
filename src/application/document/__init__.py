"""Document application services."""

from src.application.document.service import DocumentService

__all__ = ["DocumentService"]
