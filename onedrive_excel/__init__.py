"""Async client for the Microsoft Graph Excel workbook API."""

from .client import OneDriveClient, OneDriveClientProtocol, get_onedrive_client
from .errors import StatusCodeError
from .excel import NamedItem, NamedItemContainer, Range, Table, Workbook, Worksheet

__all__ = [
    "OneDriveClient",
    "OneDriveClientProtocol",
    "get_onedrive_client",
    "StatusCodeError",
    "Workbook",
    "Worksheet",
    "Table",
    "Range",
    "NamedItem",
    "NamedItemContainer",
]
