"""Range facade."""

from __future__ import annotations

import logging
from typing import Any

from ..client import OneDriveClientProtocol
from .utils import rows_to_objects

logger = logging.getLogger(__name__)


class Range:
    def __init__(self, client: OneDriveClientProtocol, uri: str, log: logging.Logger | None = None):
        self._client = client
        self._uri = uri
        self._log = log or logger

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def log(self) -> logging.Logger:
        return self._log

    async def get_data(self) -> dict[str, Any]:
        self.log.debug("get range data from %s", self._uri)
        return await self._client.do_fetch(self._uri)

    async def get_address(self) -> str:
        result = await self.get_data()
        return result["address"]

    async def get_values(self) -> list[list[Any]]:
        result = await self.get_data()
        return result["values"]

    async def get_values_as_objects(self) -> list[dict[str, Any]]:
        """First row is used as keys for the remaining rows."""
        values = await self.get_values()
        if not values:
            return []
        return rows_to_objects(values[0], values[1:])

    async def update(self, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._client.do_fetch(
            self._uri,
            method="PATCH",
            body=payload,
            headers={"content-type": "application/json"},
        )

    async def delete(self, shift: str = "Up") -> None:
        await self._client.do_fetch(
            f"{self._uri}/delete",
            method="POST",
            body={"shift": shift},
            headers={"content-type": "application/json"},
        )

    async def insert(self, shift: str = "Down") -> dict[str, Any]:
        return await self._client.do_fetch(
            f"{self._uri}/insert",
            method="POST",
            body={"shift": shift},
            headers={"content-type": "application/json"},
        )
