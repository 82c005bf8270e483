"""
Domain Layer - products and the shared kernel

This domain layer is organized by bounded contexts:
- base/: Shared kernel with the product, builder and prototype base classes
- meal/: Meals assembled by builders
- burger/: Burgers created by tag through a factory
- printer/: The shared printer resource
- document/: Documents duplicated from prototypes

Each bounded context contains:
- aggregate.py: The product itself
- value_objects.py: Context-specific value objects and enums
"""

from .base import (
    Builder,
    BuildSpec,
    BuildStep,
    ConfigurationError,
    DomainException,
    DuplicateRegistrationError,
    IncompleteProductError,
    InvalidCloneSourceError,
    Product,
    PrototypeModel,
    UnknownBuildStepError,
    UnknownTypeError,
    ValidationError,
)

__all__ = [
    "Builder",
    "BuildSpec",
    "BuildStep",
    "Product",
    "PrototypeModel",
    "DomainException",
    "ValidationError",
    "ConfigurationError",
    "IncompleteProductError",
    "UnknownTypeError",
    "DuplicateRegistrationError",
    "UnknownBuildStepError",
    "InvalidCloneSourceError",
]
