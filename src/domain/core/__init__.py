"""Core domain definitions shared by every bounded context."""
