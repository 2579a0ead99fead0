"""Table facade: headers, rows and columns."""

from __future__ import annotations

import logging
from typing import Any

from ..client import OneDriveClientProtocol
from .utils import check_row_index, odata_literal, row_to_object, rows_to_objects

logger = logging.getLogger(__name__)


class Table:
    """Handle for a table addressed as `<prefix>/<name>`."""

    def __init__(
        self,
        client: OneDriveClientProtocol,
        prefix: str,
        name: str,
        log: logging.Logger | None = None,
    ):
        self._client = client
        self._prefix = prefix
        self._name = name
        self._log = log or logger

    @property
    def name(self) -> str:
        return self._name

    @property
    def uri(self) -> str:
        return f"{self._prefix}/{self._name}"

    @property
    def log(self) -> logging.Logger:
        return self._log

    async def rename(self, new_name: str) -> None:
        await self._client.do_fetch(
            self.uri,
            method="PATCH",
            body={"name": new_name},
            headers={"content-type": "application/json"},
        )
        self._name = new_name

    async def delete(self) -> None:
        await self._client.do_fetch(self.uri, method="DELETE")

    async def get_header_names(self) -> list[str]:
        self.log.debug("get header names from %s/headerRowRange", self.uri)
        result = await self._client.do_fetch(f"{self.uri}/headerRowRange")
        return result["values"][0]

    async def get_rows(self) -> list[list[Any]]:
        self.log.debug("get rows from %s/rows", self.uri)
        result = await self._client.do_fetch(f"{self.uri}/rows")
        return [v["values"][0] for v in result.get("value", [])]

    async def get_rows_as_objects(self) -> list[dict[str, Any]]:
        headers = await self.get_header_names()
        rows = await self.get_rows()
        return rows_to_objects(headers, rows)

    async def get_row(self, index: int) -> list[Any]:
        index = check_row_index(index)
        result = await self._client.do_fetch(f"{self.uri}/rows/itemAt(index={index})")
        return result["values"][0]

    async def get_row_as_object(self, index: int) -> dict[str, Any]:
        headers = await self.get_header_names()
        row = await self.get_row(index)
        return row_to_object(headers, row)

    async def add_row(self, values: list[Any]) -> None:
        await self.add_rows([values])

    async def add_rows(self, rows: list[list[Any]]) -> None:
        await self._client.do_fetch(
            f"{self.uri}/rows/add",
            method="POST",
            body={"values": rows},
            headers={"content-type": "application/json"},
        )

    async def replace_row(self, index: int, values: list[Any]) -> None:
        index = check_row_index(index)
        await self._client.do_fetch(
            f"{self.uri}/rows/itemAt(index={index})",
            method="PATCH",
            body={"values": [values]},
            headers={"content-type": "application/json"},
        )

    async def delete_row(self, index: int) -> None:
        index = check_row_index(index)
        await self._client.do_fetch(f"{self.uri}/rows/itemAt(index={index})", method="DELETE")

    async def get_row_count(self) -> int:
        result = await self._client.do_fetch(f"{self.uri}/dataBodyRange?$select=rowCount")
        return result["rowCount"]

    async def get_column(self, name: str) -> list[Any]:
        """Get the values of a column, without the header cell."""
        result = await self._client.do_fetch(f"{self.uri}/columns({odata_literal(name)})")
        return [row[0] for row in result["values"][1:]]

    async def add_column(self, name: str) -> None:
        await self._client.do_fetch(
            f"{self.uri}/columns",
            method="POST",
            body={"name": name},
            headers={"content-type": "application/json"},
        )

    async def delete_column(self, name: str) -> None:
        await self._client.do_fetch(f"{self.uri}/columns({odata_literal(name)})", method="DELETE")
