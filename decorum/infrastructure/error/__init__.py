"""Error handling infrastructure package."""

from decorum.infrastructure.error.context import ExceptionContext
from decorum.infrastructure.error.error_middleware import ErrorMiddleware, with_error_handling
from decorum.infrastructure.error.exception_handler import (
    ErrorCategory,
    ErrorResponse,
    ExceptionHandler,
    get_exception_handler,
)

__all__ = [
    "ExceptionContext",
    "ExceptionHandler",
    "ErrorResponse",
    "ErrorCategory",
    "ErrorMiddleware",
    "with_error_handling",
    "get_exception_handler",
]
