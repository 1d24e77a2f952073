"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps
- Rich tables for chains, order checks, decorators and subjects
- List formatting for detailed views
"""
import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "decorators" in data and isinstance(data["decorators"], list) and "forward" not in data:
        return format_decorators_table(data["decorators"])
    elif isinstance(data, dict) and "subjects" in data:
        return format_subjects_table(data["subjects"])
    elif isinstance(data, dict) and "forward" in data:
        return format_order_check_table(data)
    elif isinstance(data, dict) and "attributes" in data:
        return format_chain_table(data)
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "decorators" in data and isinstance(data["decorators"], list) and "forward" not in data:
        return format_decorators_list(data["decorators"])
    elif isinstance(data, dict) and "subjects" in data:
        return format_subjects_list(data["subjects"])
    elif isinstance(data, dict) and "attributes" in data:
        return format_chain_list(data)
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def _render(table: Table) -> str:
    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_chain_table(chain: Dict[str, Any]) -> str:
    """Format a described chain as an attribute table."""
    layers = " -> ".join(chain.get("layers") or []) or "(none)"
    table = Table(
        title=f"{chain.get('kind', 'N/A')}: {layers}",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Attribute", style="cyan")
    table.add_column("Value", style="green", justify="right")
    for name, value in sorted(chain["attributes"].items()):
        table.add_row(name, _format_value(value))
    return _render(table)


def format_order_check_table(check: Dict[str, Any]) -> str:
    """Format an order check as forward/reversed comparison."""
    status = "consistent" if check.get("consistent") else "order-dependent"
    table = Table(
        title=f"{check.get('kind', 'N/A')}: {', '.join(check.get('decorators', []))} ({status})",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Attribute", style="cyan")
    table.add_column("Forward", style="green", justify="right")
    table.add_column("Reversed", style="green", justify="right")
    table.add_column("Differs", style="red")
    differing = set(check.get("differing_attributes", []))
    for name in sorted(check["forward"]):
        table.add_row(
            name,
            _format_value(check["forward"][name]),
            _format_value(check["reversed"][name]),
            "yes" if name in differing else "",
        )
    return _render(table)


def format_decorators_table(decorators: List[Dict]) -> str:
    """Format registered decorators as a table."""
    if not decorators:
        return "No decorators found."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Name", style="cyan")
    table.add_column("Kind", style="blue")
    table.add_column("Transforms", style="yellow")
    for decorator in decorators:
        transforms = ", ".join(f"{name} {desc}" for name, desc in decorator.get("transforms", {}).items())
        table.add_row(decorator.get("name", "N/A"), decorator.get("kind") or "-", transforms)
    return _render(table)


def format_subjects_table(subjects: List[Dict]) -> str:
    """Format registered subject kinds as a table."""
    if not subjects:
        return "No subjects found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Kind", style="cyan")
    table.add_column("Attributes", style="green")
    for subject in subjects:
        attributes = ", ".join(f"{name} ({kind})" for name, kind in subject.get("attributes", {}).items())
        table.add_row(subject.get("kind", "N/A"), attributes)
    return _render(table)


def format_chain_list(chain: Dict[str, Any]) -> str:
    """Format a described chain as a detailed list."""
    lines = [
        f"Kind: {chain.get('kind', 'N/A')}",
        f"Layers: {', '.join(chain.get('layers') or []) or '(none)'}",
        f"Order independent: {chain.get('order_independent', 'N/A')}",
        "Attributes:",
    ]
    for name, value in sorted(chain["attributes"].items()):
        lines.append(f"  {name}: {_format_value(value)}")
    return "\n".join(lines)


def format_decorators_list(decorators: List[Dict]) -> str:
    """Format registered decorators as a detailed list."""
    if not decorators:
        return "No decorators found."

    lines = []
    for decorator in decorators:
        lines.append(f"Decorator: {decorator.get('name', 'N/A')}")
        lines.append(f"  Kind: {decorator.get('kind') or '-'}")
        for name, desc in decorator.get("transforms", {}).items():
            lines.append(f"  {name}: {desc}")
        lines.append("")
    return "\n".join(lines).rstrip()


def format_subjects_list(subjects: List[Dict]) -> str:
    """Format registered subject kinds as a detailed list."""
    if not subjects:
        return "No subjects found."

    lines = []
    for subject in subjects:
        lines.append(f"Subject: {subject.get('kind', 'N/A')}")
        for name, kind in subject.get("attributes", {}).items():
            lines.append(f"  {name}: {kind}")
        lines.append("")
    return "\n".join(lines).rstrip()


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)
