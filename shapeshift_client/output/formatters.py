"""Output formatters for exchange records.

Provides two output formats:
- JSON: Machine-readable, complete data
- Table: Human-readable CLI output
"""

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from io import StringIO
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

logger = logging.getLogger(__name__)


def _as_list(records: BaseModel | Sequence[BaseModel]) -> list[BaseModel]:
    if isinstance(records, BaseModel):
        return [records]
    return list(records)


class OutputFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def format(self, records: BaseModel | Sequence[BaseModel]) -> str:
        """Format one record or a list of records as a string."""
        pass

    def format_to_file(self, records: BaseModel | Sequence[BaseModel], filepath: str) -> None:
        """Write formatted records to a file."""
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.format(records))
        logger.info(f"Wrote {len(_as_list(records))} records to {filepath}")


class JSONFormatter(OutputFormatter):
    """Formats records as JSON."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format(self, records: BaseModel | Sequence[BaseModel]) -> str:
        if isinstance(records, BaseModel):
            data: Any = records.model_dump(mode="json")
        else:
            data = [record.model_dump(mode="json") for record in records]
        return json.dumps(data, indent=self.indent)


class TableFormatter(OutputFormatter):
    """Formats records as a rich table, one row per record."""

    def __init__(self, title: str | None = None, width: int = 120):
        """
        Initialize table formatter.

        Args:
            title: Optional table title
            width: Maximum table width
        """
        self.title = title
        self.width = width

    @staticmethod
    def _cell(value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, float):
            return f"{value:.8g}"
        return str(value)

    def format(self, records: BaseModel | Sequence[BaseModel]) -> str:
        rows = _as_list(records)
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self.width)

        if not rows:
            console.print("[yellow]No records[/]")
            return output.getvalue()

        columns = list(type(rows[0]).model_fields)
        # Hide the error column unless some record carries one
        if "error" in columns and not any(getattr(r, "error", None) for r in rows):
            columns.remove("error")

        table = Table(title=self.title)
        for column in columns:
            style = "red" if column == "error" else "cyan" if column == columns[0] else None
            table.add_column(column, style=style)
        for record in rows:
            table.add_row(*(self._cell(getattr(record, column)) for column in columns))

        console.print(table)
        return output.getvalue()
