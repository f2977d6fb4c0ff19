"""Public interface for the Zotero adapter."""

from __future__ import annotations

from .client import (
    ZoteroAPIError,
    ZoteroDecodeError,
    ZoteroFetcher,
    ZoteroStatusError,
    ZoteroTransportError,
)
from .schema import ItemData, ItemPayload, ItemsResponse
from .translator import ItemPayloadInput, parse_catalog_record

__all__ = [
    "ItemData",
    "ItemPayload",
    "ItemPayloadInput",
    "ItemsResponse",
    "ZoteroAPIError",
    "ZoteroDecodeError",
    "ZoteroFetcher",
    "ZoteroStatusError",
    "ZoteroTransportError",
    "parse_catalog_record",
]
