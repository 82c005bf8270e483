"""Application services built on the application context."""
