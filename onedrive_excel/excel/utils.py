"""Utility functions for workbook operations."""

from typing import Any

from ..errors import StatusCodeError


def rows_to_objects(headers: list[str], rows: list[list[Any]]) -> list[dict[str, Any]]:
    """Convert rows to dicts keyed by header name. Short rows get empty strings."""
    return [row_to_object(headers, row) for row in rows]


def row_to_object(headers: list[str], row: list[Any]) -> dict[str, Any]:
    result = {}
    for idx, name in enumerate(headers):
        result[name] = row[idx] if idx < len(row) else ""
    return result


def check_row_index(index: Any) -> int:
    """Validate a 0-based row index."""
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        raise StatusCodeError(f"Invalid row index: {index}", 400)
    return index


def odata_literal(value: str) -> str:
    """Quote a string for use inside an OData key, e.g. columns('<name>')."""
    return "'" + value.replace("'", "''") + "'"
