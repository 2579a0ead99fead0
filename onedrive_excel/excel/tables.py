"""Table listing and creation shared by workbooks and worksheets."""

from __future__ import annotations

import logging

from ..client import OneDriveClientProtocol
from ..errors import StatusCodeError
from .table import Table


class TableContainerMixin:
    """Mixin for resources that own a `tables` collection."""

    _client: OneDriveClientProtocol
    uri: str
    log: logging.Logger

    async def get_table_names(self) -> list[str]:
        self.log.debug("get table names from %s/tables", self.uri)
        result = await self._client.do_fetch(f"{self.uri}/tables")
        return [v["name"] for v in result.get("value", [])]

    def table(self, name: str) -> Table:
        return Table(self._client, f"{self.uri}/tables", name, self.log)

    async def add_table(self, address: str, has_headers: bool, name: str | None = None) -> Table:
        """
        Create a table over a range address.

        When a name is given it must not be taken yet (409 otherwise). The existence
        check and the creation are separate calls, so concurrent callers can race.
        """
        if name:
            names = await self.get_table_names()
            if name in names:
                raise StatusCodeError(f"Table name already exists: {name}", 409)

        result = await self._client.do_fetch(
            f"{self.uri}/tables/add",
            method="POST",
            body={"address": address, "hasHeaders": has_headers},
        )
        table = self.table(result["name"])
        if name and name != table.name:
            await table.rename(name)
        return table
