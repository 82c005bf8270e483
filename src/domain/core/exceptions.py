# src/domain/core/exceptions.py
from typing import Any, Iterable, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class IncompleteProductError(DomainException):
    """Raised when a builder is asked for a product whose required fields are unset."""
    def __init__(self, product_type: str, missing_fields: Iterable[str]):
        self.product_type = product_type
        self.missing_fields = list(missing_fields)
        super().__init__(
            f"Cannot build {product_type}: missing required fields "
            f"{', '.join(self.missing_fields)}"
        )


class UnknownTypeError(DomainException):
    """Raised when a tag has no registration."""
    def __init__(self, tag: Any, available: Optional[Iterable[str]] = None):
        self.tag = tag
        self.available = sorted(available or [])
        message = f"Unknown type '{tag}'"
        if self.available:
            message += f". Registered types: {', '.join(self.available)}"
        super().__init__(message)


class DuplicateRegistrationError(DomainException):
    """Raised when a tag is registered twice."""
    def __init__(self, tag: Any):
        super().__init__(f"Type '{tag}' is already registered")
        self.tag = tag


class UnknownBuildStepError(ValidationError):
    """Raised when a build spec names a step the builder does not support."""
    def __init__(self, step: str, supported: Iterable[str]):
        self.step = step
        self.supported = list(supported)
        super().__init__(
            f"Unsupported build step '{step}'. Supported steps: {', '.join(self.supported)}",
            {"step": step, "supported": self.supported},
        )


class InvalidCloneSourceError(DomainException):
    """Raised when an object is not in a valid state to be cloned."""
    def __init__(self, source_type: str, reason: str):
        super().__init__(f"Cannot clone {source_type}: {reason}")
        self.source_type = source_type
        self.reason = reason
