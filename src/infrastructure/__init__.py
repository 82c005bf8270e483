"""Infrastructure layer: registries, pattern support, logging and error context."""
