"""Data models for workbook operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class NamedItem:
    """Named item (defined name) of a workbook or worksheet."""

    name: str
    value: str
    comment: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> NamedItem:
        return cls(
            name=data.get("name", ""),
            value=data.get("value", ""),
            comment=data.get("comment") or "",
        )
