"""Where a handled error happened: the operation, its layer and the CLI command."""
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Command arguments worth carrying into error logs
_COMMAND_FIELDS = ("kind", "name", "decorators")


class ExceptionContext:
    """Context attached to an error before it is logged and reported."""

    def __init__(
        self,
        operation: str,
        layer: str = "application",
        resource: Optional[str] = None,
        action: Optional[str] = None,
        **details: Any,
    ):
        self.operation = operation
        self.layer = layer
        self.resource = resource
        self.action = action
        self.details = details
        self.occurred_at = datetime.now(timezone.utc)

    @classmethod
    def for_command(cls, operation: str, args: Any = None) -> "ExceptionContext":
        """
        Build a context from parsed CLI arguments.

        Args:
            operation: Name of the failing handler
            args: argparse namespace; anything without resource/action is ignored

        Returns:
            Interface-layer context naming the command and its subject kind,
            chain name or decorators when present
        """
        details = {
            field: getattr(args, field)
            for field in _COMMAND_FIELDS
            if getattr(args, field, None)
        }
        return cls(
            operation,
            layer="interface",
            resource=getattr(args, "resource", None),
            action=getattr(args, "action", None),
            **details,
        )

    @property
    def command(self) -> Optional[str]:
        """'<resource> <action>' when both are known, e.g. 'chain build'."""
        if self.resource and self.action:
            return f"{self.resource} {self.action}"
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Flatten for structured logging; unknown command parts are omitted."""
        data: Dict[str, Any] = {
            "operation": self.operation,
            "layer": self.layer,
            "occurred_at": self.occurred_at.isoformat(),
        }
        if self.command:
            data["command"] = self.command
        data.update(self.details)
        return data
