"""
CLI-specific formatting functions for human-readable output.

Results are plain dicts. JSON and YAML dump them as-is; table and list
formats look for the first list of records in the result and render it.
"""

import json
from typing import Any, List, Optional, Tuple

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
    return json.dumps(data, indent=2, default=str)


def _records(data: Any) -> Optional[Tuple[str, List[Any]]]:
    """Find the first list-valued entry of a result dict."""
    if not isinstance(data, dict):
        return None
    for key, value in data.items():
        if isinstance(value, list):
            return key, value
    return None


def format_table_output(data: Any) -> str:
    """Format data as a table using Rich."""
    found = _records(data)
    if found is None:
        return json.dumps(data, indent=2, default=str)

    title, rows = found
    if not rows:
        return f"No {title} found."

    table = Table(title=title, show_header=True, header_style="bold magenta")
    if all(isinstance(row, dict) for row in rows):
        columns = list(rows[0].keys())
        for column in columns:
            table.add_column(column.replace("_", " ").title(), style="cyan")
        for row in rows:
            table.add_row(*(str(row.get(column, "")) for column in columns))
    else:
        table.add_column(title.replace("_", " ").title(), style="green")
        for row in rows:
            table.add_row(str(row))

    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if not isinstance(data, dict):
        return str(data)

    lines = []
    for key, value in data.items():
        if isinstance(value, list):
            lines.append(f"{key}:")
            for item in value:
                if isinstance(item, dict):
                    lines.append("  - " + ", ".join(f"{k}: {v}" for k, v in item.items()))
                else:
                    lines.append(f"  - {item}")
        else:
            lines.append(f"{key}: {value}")
    return "\n".join(lines)

