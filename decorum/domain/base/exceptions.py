"""Domain exceptions shared by every bounded context."""
from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for reporting."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainException):
    """Raised when domain validation fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "VALIDATION_ERROR", details)


class UnknownAttributeError(DomainException):
    """Raised when a requested attribute is not part of a subject's schema."""

    def __init__(self, name: str, kind: Optional[str] = None):
        where = f" on {kind}" if kind else ""
        super().__init__(
            f"Unknown attribute '{name}'{where}",
            "UNKNOWN_ATTRIBUTE",
            {"attribute": name, "kind": kind},
        )
        self.name = name
        self.kind = kind


# Short alias used in the glossary
UnknownAttribute = UnknownAttributeError


class SubjectValidationError(ValidationError):
    """Raised when subject values do not match the subject schema."""

    def __init__(self, kind: str, errors: Dict[str, str]):
        super().__init__(f"Subject validation failed for {kind}", {"kind": kind, "errors": errors})
        self.kind = kind
        self.errors = errors


class TransformTypeError(ValidationError):
    """Raised when a transform receives a value of the wrong kind."""

    def __init__(self, transform: str, expected: str, value: Any):
        super().__init__(
            f"{transform} expects a {expected} value, got {type(value).__name__}",
            {"transform": transform, "expected": expected, "value": repr(value)},
        )
        self.transform = transform
        self.expected = expected


class UnknownVariantError(DomainException):
    """Raised when a decorator or subject name is not registered."""

    def __init__(self, name: str, registry: str):
        super().__init__(
            f"No {registry} registered under '{name}'",
            "UNKNOWN_VARIANT",
            {"name": name, "registry": registry},
        )
        self.name = name
        self.registry = registry


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message, "CONFIGURATION_ERROR", {"missing_fields": missing_fields or []})
        self.missing_fields = missing_fields or []
