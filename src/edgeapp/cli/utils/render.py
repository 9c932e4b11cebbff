"""Rendering of API models as JSON, YAML or tables for command output."""

import io
import json
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Type

import yaml
from pydantic import BaseModel
from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text

from edgeapp.cli.exceptions import UnsupportedFormatError

# Minimum console width for tables; wider content widens the console so no cell wraps
TABLE_MIN_WIDTH = 4096


class ListFormat(str, Enum):
    """Output formats for a collection of items."""

    JSON = "json"
    YAML = "yaml"
    TABLE = "table"
    ITEM_TABLE = "item-table"


class ItemFormat(str, Enum):
    """Output formats for a single item."""

    JSON = "json"
    YAML = "yaml"
    TABLE = "table"


def item_format_for(list_format: ListFormat) -> ItemFormat:
    """Map a list format onto the equivalent single-item format.

    Raises:
        UnsupportedFormatError: For 'item-table', which only applies to lists
    """
    if list_format == ListFormat.JSON:
        return ItemFormat.JSON
    if list_format == ListFormat.YAML:
        return ItemFormat.YAML
    if list_format == ListFormat.TABLE:
        return ItemFormat.TABLE
    raise UnsupportedFormatError(
        f"The '{list_format.value}' format is not available for single values."
    )


def render_item(item: BaseModel, fmt: ItemFormat) -> str:
    """Render one model as a JSON object, a YAML mapping or a field/value table."""
    data = _to_dict(item)
    if fmt == ItemFormat.JSON:
        return json.dumps(data, indent=2)
    if fmt == ItemFormat.YAML:
        return _dump_yaml(data)
    return _item_table_to_text(data)


def render_list(
    items: Sequence[BaseModel],
    fmt: ListFormat,
    model: Optional[Type[BaseModel]] = None,
) -> str:
    """Render models as a JSON array, a YAML sequence, one table, or one table per item.

    Args:
        items: The models to render, in output order
        fmt: The list format
        model: Model class used for the table columns (defaults to the first item's class)
    """
    data = [_to_dict(item) for item in items]
    if fmt == ListFormat.JSON:
        return json.dumps(data, indent=2)
    if fmt == ListFormat.YAML:
        return _dump_yaml(data)
    if fmt == ListFormat.ITEM_TABLE:
        return "\n\n".join(_item_table_to_text(row) for row in data)

    model = model or (type(items[0]) if items else None)
    fields = list(model.model_fields) if model else []
    titles = [_column_title(field) for field in fields]
    rows = [[_cell(row.get(field)) for field in fields] for row in data]
    table = Table()
    for title in titles:
        table.add_column(title, overflow="fold")
    for row in rows:
        table.add_row(*(Text(cell) for cell in row))
    return _table_to_text(table, _content_width([titles, *rows]))


# Characters that could break out of a KEY="VALUE" line or trigger shell expansion
_SANITIZE_TABLE = {code: f"\\x{code:02x}" for code in (*range(0x20), 0x7F)}
_SANITIZE_TABLE.update(
    {
        ord("\\"): "\\\\",
        ord('"'): '\\"',
        ord("$"): "\\$",
        ord("`"): "\\`",
        ord("\n"): "\\n",
        ord("\r"): "\\r",
        ord("\t"): "\\t",
    }
)


def sanitize_value(value: str) -> str:
    """Escape a value for use inside double quotes in a KEY="VALUE" line.

    The result contains no raw control characters and no unescaped quote,
    backslash, dollar sign or backtick.
    """
    return value.translate(_SANITIZE_TABLE)


def _to_dict(item: BaseModel) -> Dict[str, Any]:
    return item.model_dump(mode="json")


def _dump_yaml(data: Any) -> str:
    return yaml.safe_dump(
        data, sort_keys=False, default_flow_style=False, allow_unicode=True
    ).rstrip("\n")


def _column_title(field: str) -> str:
    return field.replace("_", " ").title()


def _cell(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _item_table_to_text(row: Dict[str, Any]) -> str:
    cells = [[_column_title(field), _cell(value)] for field, value in row.items()]
    table = Table()
    table.add_column("Field", no_wrap=True)
    table.add_column("Value", overflow="fold")
    for title, value in cells:
        table.add_row(title, Text(value))
    return _table_to_text(table, _content_width([["Field", "Value"], *cells]))


def _content_width(rows: List[List[str]]) -> int:
    """Width of a bordered table whose cells never wrap."""
    if not rows:
        return 0
    columns = zip(*rows)
    # One padding space each side plus one border per column, and the closing border
    return sum(max(cell_len(cell) for cell in column) + 3 for column in columns) + 1


def _table_to_text(table: Table, content_width: int) -> str:
    buffer = io.StringIO()
    Console(
        file=buffer,
        width=max(TABLE_MIN_WIDTH, content_width),
        color_system=None,
        highlight=False,
    ).print(table)
    lines: List[str] = [line.rstrip() for line in buffer.getvalue().splitlines()]
    return "\n".join(lines)
