"""Error handling infrastructure package."""

from src.infrastructure.error.context import ExceptionContext, log_failure

__all__: list[str] = [
    "ExceptionContext",
    "log_failure",
]
