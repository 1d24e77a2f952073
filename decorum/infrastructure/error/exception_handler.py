"""Exception handler - maps exceptions to error responses."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from decorum.domain.base.exceptions import (
    ConfigurationError,
    DomainException,
    UnknownAttributeError,
    UnknownVariantError,
    ValidationError,
)
from decorum.infrastructure.error.context import ExceptionContext
from decorum.infrastructure.logging.logger import get_logger


class ErrorCategory(str, Enum):
    """Broad error categories."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFIGURATION = "configuration"
    DOMAIN = "domain"
    INTERNAL = "internal"


@dataclass
class ErrorResponse:
    """Error payload returned to callers."""

    error_code: str
    message: str
    category: ErrorCategory
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }


class ExceptionHandler:
    """Converts exceptions into ErrorResponse objects and logs them."""

    def __init__(self) -> None:
        self._logger = get_logger(__name__)

    @staticmethod
    def categorize(error: Exception) -> ErrorCategory:
        if isinstance(error, ValidationError):
            return ErrorCategory.VALIDATION
        if isinstance(error, (UnknownAttributeError, UnknownVariantError)):
            return ErrorCategory.NOT_FOUND
        if isinstance(error, ConfigurationError):
            return ErrorCategory.CONFIGURATION
        if isinstance(error, DomainException):
            return ErrorCategory.DOMAIN
        return ErrorCategory.INTERNAL

    def handle(self, error: Exception, context: Optional[ExceptionContext] = None) -> ErrorResponse:
        """
        Build an error response for an exception.

        Args:
            error: The exception to handle
            context: Optional context describing where it happened

        Returns:
            ErrorResponse describing the error
        """
        category = self.categorize(error)
        if isinstance(error, DomainException):
            response = ErrorResponse(error.error_code, error.message, category, dict(error.details))
        else:
            response = ErrorResponse("INTERNAL_ERROR", str(error), category)

        log_context = context.to_dict() if context else {}
        if category is ErrorCategory.INTERNAL:
            self._logger.error("Unexpected error", error=str(error), exc_info=error, **log_context)
        else:
            self._logger.warning(
                "Domain error",
                error_code=response.error_code,
                error=response.message,
                **log_context,
            )
        return response


_exception_handler: Optional[ExceptionHandler] = None


def get_exception_handler() -> ExceptionHandler:
    """Get the shared exception handler instance."""
    global _exception_handler
    if _exception_handler is None:
        _exception_handler = ExceptionHandler()
    return _exception_handler
