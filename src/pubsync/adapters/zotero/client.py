"""HTTP client for the Zotero Web API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from pubsync.adapters.http_resilience import ResilientClient
from pubsync.config.zotero import ZOTERO_MAX_LIMIT, ZoteroConfig, get_zotero_config
from pubsync.domain.ports.fetching import CatalogFetcher, CatalogFetchResult

from .schema import ItemsResponse
from .translator import parse_catalog_record

if TYPE_CHECKING:
    from collections.abc import Callable

    from pubsync.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


class ZoteroAPIError(RuntimeError):
    """Base class for failures talking to the Zotero API."""


class ZoteroTransportError(ZoteroAPIError):
    """Raised when the Zotero API cannot be reached or the request times out."""


class ZoteroStatusError(ZoteroAPIError):
    """Raised when the Zotero API answers with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Zotero API returned error status: {status_code}\nResponse: {body}")
        self.status_code = status_code
        self.body = body


class ZoteroDecodeError(ZoteroAPIError):
    """Raised when a Zotero response body is not the expected JSON item array."""


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class ZoteroFetcher:
    config: ZoteroConfig = field(default_factory=get_zotero_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def __call__(self, *, limit: int | None = None) -> CatalogFetchResult:
        effective_limit = limit if limit is not None else self.config.fetch_limit
        if effective_limit > ZOTERO_MAX_LIMIT:
            log.warning(
                "Requested %s items but Zotero returns at most %s per request; "
                "results beyond that are not fetched",
                effective_limit,
                ZOTERO_MAX_LIMIT,
            )
            effective_limit = ZOTERO_MAX_LIMIT
        return asyncio.run(self._fetch_records_async(limit=effective_limit))

    async def _fetch_records_async(self, *, limit: int) -> CatalogFetchResult:
        log.info(
            "Fetching publications from Zotero API: group=%s, collection=%s, limit=%s",
            self.config.group_id,
            self.config.collection_id,
            limit,
        )
        async with self.client_factory(self.config.resilience) as client:
            response = await self._request_items(client=client, limit=limit)

        items = self._decode_items(response)
        records = [parse_catalog_record(item) for item in items.root]
        log.info("Fetched %s items from Zotero", len(records))
        return CatalogFetchResult(records=records, limit=limit)

    async def _request_items(self, *, client: ResilientClient, limit: int) -> httpx.Response:
        path = self.config.items_path()
        try:
            response = await client.get(path, params={"limit": str(limit)})
        except httpx.RequestError as exc:
            raise ZoteroTransportError(f"Failed to connect to Zotero API: {exc}") from exc

        if response.status_code != httpx.codes.OK:
            log.error("Zotero API error %s for %s", response.status_code, path)
            raise ZoteroStatusError(response.status_code, response.text)
        return response

    @staticmethod
    def _decode_items(response: httpx.Response) -> ItemsResponse:
        try:
            payload = response.json()
        except ValueError as exc:
            raise ZoteroDecodeError(f"Failed to parse JSON response: {exc}") from exc

        if not isinstance(payload, list):
            raise ZoteroDecodeError("Unexpected Zotero response payload: expected a list of items")

        try:
            return ItemsResponse.model_validate(payload)
        except ValidationError as exc:
            raise ZoteroDecodeError(f"Unexpected Zotero item payload: {exc}") from exc


if TYPE_CHECKING:
    _fetcher_check: CatalogFetcher = ZoteroFetcher()
