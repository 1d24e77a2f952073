"""Subject bounded context - schemas and fixed-value base subjects."""

from .base_subject import BaseSubject, create_subject
from .subject_schema import SubjectSchema

__all__ = ["BaseSubject", "SubjectSchema", "create_subject"]
