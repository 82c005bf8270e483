"""Package metadata and naming constants."""

PACKAGE_NAME = "creational-patterns-kit"
PACKAGE_NAME_SHORT = "cpk"
__version__ = "0.1.0"
VERSION = __version__  # Alias for compatibility
DESCRIPTION = "Builder, Factory, Singleton and Prototype patterns as a reusable toolkit"

# Derived values
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
ENV_PREFIX = PACKAGE_NAME_SHORT.upper() + "_"
