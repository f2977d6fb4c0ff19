"""Translate Zotero payloads into catalog records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias

from pubsync.domain.types import CatalogRecord

from .schema import ItemPayload

ItemPayloadInput: TypeAlias = ItemPayload | Mapping[str, object]


def parse_catalog_record(payload: ItemPayloadInput) -> CatalogRecord:
    item = payload if isinstance(payload, ItemPayload) else ItemPayload.model_validate(payload)
    data = item.data
    return CatalogRecord(
        key=item.key,
        title=data.title,
        report_number=data.report_number,
        url=data.url,
        item_type=data.item_type,
        date=data.date,
    )
