"""Named item operations shared by workbooks and worksheets."""

from __future__ import annotations

import logging

from ..client import OneDriveClientProtocol
from .models import NamedItem

logger = logging.getLogger(__name__)


class NamedItemContainer:
    """Base class for resources that own a `names` collection."""

    def __init__(self, client: OneDriveClientProtocol, log: logging.Logger | None = None):
        self._client = client
        self._log = log or logger

    @property
    def uri(self) -> str:
        raise NotImplementedError

    @property
    def log(self) -> logging.Logger:
        return self._log

    async def get_named_items(self) -> list[NamedItem]:
        self.log.debug("get named items from %s/names", self.uri)
        result = await self._client.do_fetch(f"{self.uri}/names")
        return [NamedItem.from_api(v) for v in result.get("value", [])]

    async def get_named_item(self, name: str) -> NamedItem | None:
        for item in await self.get_named_items():
            if item.name == name:
                return item
        return None

    async def add_named_item(self, name: str, formula: str, comment: str = "") -> None:
        await self._client.do_fetch(
            f"{self.uri}/names/add",
            method="POST",
            body={"name": name, "reference": formula, "comment": comment},
            headers={"content-type": "application/json"},
        )

    async def delete_named_item(self, name: str) -> None:
        await self._client.do_fetch(f"{self.uri}/names/{name}", method="DELETE")
