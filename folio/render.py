"""Output rendering and formatting utilities.

This module renders command results as tables, JSON, or YAML.
"""

import sys
import json
import os
from typing import Any, Dict, List, Optional, Union

import yaml
from rich.console import Console
from rich.table import Table
from rich import box

from .exceptions import ValidationError


class OutputFormatter:
    """Main output formatter that handles multiple output formats."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize output formatter.

        Args:
            console: Rich console instance. If None, creates a new one.
        """
        self.console = console or Console()

    def determine_format(self, format_override: Optional[str] = None) -> str:
        """Determine the output format to use.

        Precedence: explicit override, FOLIO_OUTPUT_FORMAT, then table for
        an interactive terminal and JSON for piped output.
        """
        if format_override:
            return format_override.lower()

        env_format = os.environ.get("FOLIO_OUTPUT_FORMAT")
        if env_format:
            return env_format.lower()

        return "table" if sys.stdout.isatty() else "json"

    def render(self, data: Any, format: Optional[str] = None, **kwargs: Any) -> None:
        """Render data in the specified format.

        Raises:
            ValidationError: If the format is unknown
        """
        format_name = self.determine_format(format)

        if format_name == "table":
            self.render_table(data, **kwargs)
        elif format_name == "json":
            self.render_json(data, **kwargs)
        elif format_name == "yaml":
            self.render_yaml(data, **kwargs)
        else:
            raise ValidationError(f"Unknown output format: {format_name}")

    def render_table(
        self,
        data: Union[List[Dict[str, Any]], Dict[str, Any]],
        columns: Optional[List[str]] = None,
        title: Optional[str] = None,
        show_header: bool = True,
        **kwargs: Any,
    ) -> None:
        """Render data as a table using Rich.

        Args:
            data: Rows to render, or a single mapping
            columns: Column names to display, defaults to every key in order of appearance
            title: Table title
            show_header: Whether to show column headers
        """
        if not data:
            self.console.print("[dim]No data to display[/dim]")
            return

        rows = [data] if isinstance(data, dict) else data

        if not columns:
            columns = []
            for row in rows:
                for key in row:
                    if key not in columns:
                        columns.append(key)

        table = Table(title=title, show_header=show_header, box=box.ROUNDED)
        for col in columns:
            table.add_column(col.replace("_", " ").title(), overflow="fold")

        for row in rows:
            table.add_row(*[self._cell(row.get(col)) for col in columns])

        self.console.print(table)

    def render_json(self, data: Any, indent: int = 2, **kwargs: Any) -> None:
        """Render data as JSON.

        Raises:
            ValidationError: If the data cannot be serialized
        """
        try:
            print(json.dumps(data, indent=indent, ensure_ascii=False, default=str))
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Failed to serialize data to JSON: {e}")

    def render_yaml(self, data: Any, **kwargs: Any) -> None:
        """Render data as YAML.

        Raises:
            ValidationError: If the data cannot be serialized
        """
        try:
            print(yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False), end="")
        except yaml.YAMLError as e:
            raise ValidationError(f"Failed to serialize data to YAML: {e}")

    @staticmethod
    def _cell(value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, bool):
            return "✓" if value else "✗"
        return str(value)
