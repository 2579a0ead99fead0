"""Workbook facade: worksheets, tables and the editing session."""

from __future__ import annotations

import logging
from typing import Any

from ..client import OneDriveClientProtocol
from ..errors import StatusCodeError
from .named_items import NamedItemContainer
from .tables import TableContainerMixin
from .worksheet import Worksheet


class Workbook(NamedItemContainer, TableContainerMixin):
    """
    Handle for a remote workbook.

    The session id lives on the client, so every handle sharing a client
    also shares the session.
    """

    def __init__(self, client: OneDriveClientProtocol, uri: str, log: logging.Logger | None = None):
        super().__init__(client, log)
        self._uri = uri

    @property
    def uri(self) -> str:
        return self._uri

    async def get_data(self) -> Any:
        result = await self._client.do_fetch(self._uri)
        return result.get("value")

    async def get_worksheet_names(self) -> list[str]:
        self.log.debug("get worksheet names from %s/worksheets", self._uri)
        result = await self._client.do_fetch(f"{self._uri}/worksheets")
        return [v["name"] for v in result.get("value", [])]

    def worksheet(self, name: str) -> Worksheet:
        return Worksheet(self._client, f"{self._uri}/worksheets", name, self.log)

    async def create_session(self) -> str:
        """Create a session, or return the one already held by the client."""
        session_id = self._client.workbook_session_id
        if session_id:
            return session_id

        result = await self._client.do_fetch(f"{self._uri}/createSession", method="POST")
        self._client.set_workbook_session_id(result["id"])
        return result["id"]

    async def close_session(self) -> None:
        if not self._client.workbook_session_id:
            raise StatusCodeError("Please create a session first!", 400)

        await self._client.do_fetch(f"{self._uri}/closeSession", method="POST")
        self._client.set_workbook_session_id(None)

    async def refresh_session(self) -> None:
        if not self._client.workbook_session_id:
            raise StatusCodeError("Please create a session first!", 400)

        await self._client.do_fetch(f"{self._uri}/refreshSession", method="POST")

    def set_session_id(self, session_id: str | None) -> None:
        self._client.set_workbook_session_id(session_id)

    async def create_worksheet(self, name: str) -> Worksheet:
        await self._client.do_fetch(
            f"{self._uri}/worksheets",
            method="POST",
            body={"name": name},
            headers={"content-type": "application/json"},
        )
        return self.worksheet(name)

    async def delete_worksheet(self, name: str) -> None:
        await self._client.do_fetch(
            f"{self._uri}/worksheets/{name}",
            method="DELETE",
            headers={"content-type": "application/json"},
        )
