"""CLI command handlers - thin adapters from parsed arguments to the service."""
import argparse
from typing import Any, Dict, List, Optional

from decorum.application.decorators import get_subject_schema
from decorum.application.service import CompositionService
from decorum.config.manager import ConfigurationManager
from decorum.domain.base.exceptions import ValidationError
from decorum.domain.base.value_objects import AttributeKind, AttributeValue
from decorum.domain.subject import SubjectSchema


def parse_assignments(
    assignments: Optional[List[str]],
    schema: Optional[SubjectSchema] = None,
) -> Dict[str, AttributeValue]:
    """
    Parse NAME=VALUE pairs from the command line.

    With a schema, text attributes keep the raw string and numeric ones are
    converted. Without one (or for names outside the schema), values that
    read as integers or floats become numbers and everything else stays text.

    Raises:
        ValidationError: If an assignment has no '=' or an empty name
    """
    values: Dict[str, AttributeValue] = {}
    for assignment in assignments or []:
        name, sep, raw = assignment.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValidationError(
                f"Invalid attribute assignment '{assignment}', expected NAME=VALUE",
                {"assignment": assignment},
            )
        kind = schema.attributes.get(name) if schema is not None else None
        values[name] = raw if kind is AttributeKind.TEXT else _parse_value(raw)
    return values


def _parse_value(raw: str) -> AttributeValue:
    for convert in (int, float):
        try:
            return convert(raw)
        except ValueError:
            continue
    return raw


class CommandHandlers:
    """Routes (resource, action) pairs to service calls."""

    def __init__(self, service: CompositionService, config_manager: ConfigurationManager):
        self._service = service
        self._config_manager = config_manager

    def subjects_list(self, args: argparse.Namespace) -> Dict[str, Any]:
        return {"subjects": self._service.list_subjects()}

    def decorators_list(self, args: argparse.Namespace) -> Dict[str, Any]:
        decorators = self._service.list_decorators()
        kind = getattr(args, "kind", None)
        if kind:
            decorators = [d for d in decorators if d["kind"] == kind]
        return {"decorators": decorators}

    @staticmethod
    def _starting_values(args: argparse.Namespace) -> Dict[str, AttributeValue]:
        return parse_assignments(args.set, get_subject_schema(args.kind))

    def chain_build(self, args: argparse.Namespace) -> Dict[str, Any]:
        chain = self._service.build_chain(args.kind, self._starting_values(args), args.decorators or [])
        return self._service.describe(chain)

    def chain_show(self, args: argparse.Namespace) -> Dict[str, Any]:
        chain = self._service.build_named_chain(args.name)
        result = self._service.describe(chain)
        result["name"] = args.name
        result["description"] = self._config_manager.get_chain(args.name).description
        return result

    def chain_check(self, args: argparse.Namespace) -> Dict[str, Any]:
        return self._service.check_order(args.kind, self._starting_values(args), args.decorators or [])

    def config_show(self, args: argparse.Namespace) -> Dict[str, Any]:
        return self._config_manager.app_config.model_dump(mode="json")

    def handlers(self) -> Dict[tuple, Any]:
        return {
            ("subjects", "list"): self.subjects_list,
            ("decorators", "list"): self.decorators_list,
            ("chain", "build"): self.chain_build,
            ("chain", "show"): self.chain_show,
            ("chain", "check"): self.chain_check,
            ("config", "show"): self.config_show,
        }
