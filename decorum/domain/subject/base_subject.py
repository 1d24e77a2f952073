"""Base subject - the terminal, fixed-value node of every composition chain."""
from collections.abc import Mapping
from typing import Any, FrozenSet

from pydantic import ValidationInfo, field_validator, model_validator

from decorum.domain.base.exceptions import SubjectValidationError, UnknownAttributeError
from decorum.domain.base.ports import AttributeProvider
from decorum.domain.base.value_objects import AttributeSet, AttributeValue, ValueObject
from decorum.domain.subject.subject_schema import SubjectSchema


class BaseSubject(ValueObject, AttributeProvider):
    """Attribute provider holding a complete set of starting values.

    Values are validated against the schema once, at construction, and never
    change afterwards.
    """

    subject_schema: SubjectSchema
    values: AttributeSet

    @field_validator("values", mode="before")
    @classmethod
    def coerce_values(cls, v: Any, info: ValidationInfo) -> AttributeSet:
        if isinstance(v, AttributeSet):
            return v
        schema = info.data.get("subject_schema")
        kind = schema.kind if schema is not None else "unknown"
        if not isinstance(v, Mapping):
            raise SubjectValidationError(kind, {"values": "must be a mapping"})
        try:
            return AttributeSet(v)
        except ValueError as e:
            raise SubjectValidationError(kind, {"values": str(e)}) from e

    @model_validator(mode="after")
    def check_against_schema(self) -> "BaseSubject":
        errors = self.subject_schema.validate_values(self.values)
        if errors:
            raise SubjectValidationError(self.subject_schema.kind, errors)
        return self

    def get_attribute(self, name: str) -> AttributeValue:
        if name not in self.values:
            raise UnknownAttributeError(name, self.subject_schema.kind)
        return self.values[name]

    @property
    def attribute_names(self) -> FrozenSet[str]:
        return self.subject_schema.names

    @property
    def kind(self) -> str:
        return self.subject_schema.kind


def create_subject(schema: SubjectSchema, **values: AttributeValue) -> BaseSubject:
    """Create a base subject after validating values against its schema."""
    return BaseSubject(subject_schema=schema, values=values)
