"""Base domain layer - shared kernel for all product contexts."""

from src.domain.base.builder import Builder, BuildSpec, BuildStep
from src.domain.base.product import Product
from src.domain.base.prototype import PrototypeModel
from src.domain.core.exceptions import (
    ConfigurationError,
    DomainException,
    DuplicateRegistrationError,
    IncompleteProductError,
    InvalidCloneSourceError,
    UnknownBuildStepError,
    UnknownTypeError,
    ValidationError,
)

__all__ = [
    # Products
    "Product",
    "PrototypeModel",
    # Builder contract
    "Builder",
    "BuildSpec",
    "BuildStep",
    # Exceptions
    "DomainException",
    "ValidationError",
    "ConfigurationError",
    "IncompleteProductError",
    "UnknownTypeError",
    "DuplicateRegistrationError",
    "UnknownBuildStepError",
    "InvalidCloneSourceError",
]
