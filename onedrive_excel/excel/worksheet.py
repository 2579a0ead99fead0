"""Worksheet facade."""

from __future__ import annotations

import logging
from typing import Any

from ..client import OneDriveClientProtocol
from .named_items import NamedItemContainer
from .range import Range
from .tables import TableContainerMixin
from .utils import odata_literal


class Worksheet(NamedItemContainer, TableContainerMixin):
    """Handle for a worksheet addressed as `<prefix>/<name>`."""

    def __init__(
        self,
        client: OneDriveClientProtocol,
        prefix: str,
        name: str,
        log: logging.Logger | None = None,
    ):
        super().__init__(client, log)
        self._prefix = prefix
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def uri(self) -> str:
        return f"{self._prefix}/{self._name}"

    async def get_data(self) -> dict[str, Any]:
        return await self._client.do_fetch(self.uri)

    async def rename(self, new_name: str) -> None:
        await self._client.do_fetch(
            self.uri,
            method="PATCH",
            body={"name": new_name},
            headers={"content-type": "application/json"},
        )
        self._name = new_name

    def range(self, address: str) -> Range:
        return Range(self._client, f"{self.uri}/range(address={odata_literal(address)})", self.log)

    def used_range(self, values_only: bool = False) -> Range:
        suffix = "(valuesOnly=true)" if values_only else ""
        return Range(self._client, f"{self.uri}/usedRange{suffix}", self.log)
