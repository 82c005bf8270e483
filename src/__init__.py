"""Creational Patterns Kit - Root Package.

This package provides a small, consistent toolkit for the four classic
creational design patterns and demonstrates each one on a concrete product.

Key Components:
    - domain: Products (meal, burger, printer, document) and domain errors
    - infrastructure: Registries, builder/director, singleton and prototype support
    - config: Typed configuration schemas and the configuration manager
    - bootstrap: Startup wiring of the application context

Architecture:
    Products live in the domain layer and know nothing about how they are
    registered or dispatched. Registration tables are populated once at
    startup by the bootstrap module and handed to callers through an
    explicit application context.

Usage:
    from src.bootstrap import Application

    context = Application().initialize()
    burger = context.burger_factory.create("VEGAN")
"""

from ._package import PACKAGE_NAME, __version__

__author__ = "Creational Patterns Kit Contributors"
__package_name__ = PACKAGE_NAME
