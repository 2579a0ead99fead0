"""Microsoft Graph async HTTP client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

import httpx

from .errors import StatusCodeError

if TYPE_CHECKING:
    from .excel.workbook import Workbook

logger = logging.getLogger(__name__)

GRAPH_API_URL = "https://graph.microsoft.com/v1.0"

# Header used by Graph to bind requests to a workbook session
SESSION_HEADER = "workbook-session-id"

DEFAULT_TIMEOUT = 30.0


class OneDriveClientProtocol(Protocol):
    @property
    def workbook_session_id(self) -> str | None: ...

    def set_workbook_session_id(self, session_id: str | None) -> None: ...

    async def do_fetch(
        self,
        uri: str,
        raw: bool = False,
        method: str = "GET",
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any: ...


class OneDriveClient:
    """Async client for the Graph REST API with workbook session support."""

    def __init__(
        self,
        access_token: str,
        base_url: str = GRAPH_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self._timeout = httpx.Timeout(timeout, connect=min(timeout, 10.0))
        # Only set in tests (httpx.MockTransport)
        self._transport = transport

        self._workbook_session_id: str | None = None

    @property
    def workbook_session_id(self) -> str | None:
        return self._workbook_session_id

    def set_workbook_session_id(self, session_id: str | None) -> None:
        self._workbook_session_id = session_id

    def _url(self, uri: str) -> str:
        if uri.startswith(("http://", "https://")):
            return uri
        return f"{self.base_url}/{uri.lstrip('/')}"

    async def do_fetch(
        self,
        uri: str,
        raw: bool = False,
        method: str = "GET",
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Make authenticated API request.

        Args:
            uri: Path relative to the Graph base URL, or an absolute URL
            raw: Return the response text instead of decoded JSON
            method: HTTP verb
            body: JSON-serializable request body
            headers: Extra request headers

        Returns:
            Decoded JSON body ({} when the response has no body), or text when raw
        """
        url = self._url(uri)
        request_headers = {"Authorization": f"Bearer {self.access_token}"}
        if self._workbook_session_id:
            request_headers[SESSION_HEADER] = self._workbook_session_id
        if headers:
            request_headers.update(headers)

        logger.debug("%s %s", method, url)

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.request(
                method,
                url,
                json=body,
                headers=request_headers,
            )
            try:
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.error("Graph API error %s %s: %d", method, url, response.status_code)
                raise StatusCodeError(response.text or str(e), response.status_code) from e

            if raw:
                return response.text
            if not response.content:
                return {}
            return response.json()

    def workbook(self, uri: str, log: logging.Logger | None = None) -> Workbook:
        """Get a workbook handle for a drive item URI (e.g. /me/drive/items/<id>/workbook)."""
        from .excel.workbook import Workbook

        return Workbook(self, uri, log)


# Singleton instance (initialized on first use)
_onedrive_client: OneDriveClient | None = None


def get_onedrive_client() -> OneDriveClient:
    """Get or create the client singleton from settings."""
    global _onedrive_client

    if _onedrive_client is not None:
        return _onedrive_client

    from .config import get_settings

    settings = get_settings()
    _onedrive_client = OneDriveClient(
        access_token=settings.graph_access_token,
        base_url=settings.graph_base_url,
        timeout=settings.request_timeout,
    )
    logger.info("OneDrive client initialized (base_url=%s)", settings.graph_base_url)
    return _onedrive_client
