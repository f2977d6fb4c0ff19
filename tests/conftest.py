from __future__ import annotations

import csv
from typing import TYPE_CHECKING

import pytest

from pubsync.domain.types import CatalogRecord

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

ItemPayload = dict[str, object]


def _item_payload(
    key: str,
    *,
    report_number: str | None = None,
    url: str | None = "https://example.org/pub.pdf",
    title: str = "Untitled",
    item_type: str = "report",
    date: str = "2024",
) -> ItemPayload:
    data: dict[str, object] = {
        "key": key,
        "version": 7,
        "itemType": item_type,
        "title": title,
        "date": date,
        "creators": [],
        "tags": [],
    }
    if report_number is not None:
        data["reportNumber"] = report_number
    if url is not None:
        data["url"] = url
    return {
        "key": key,
        "version": 7,
        "library": {"type": "group", "id": 6220639, "name": "dss-literature"},
        "meta": {"numChildren": 0},
        "data": data,
    }


@pytest.fixture
def make_item_payload() -> Callable[..., ItemPayload]:
    return _item_payload


@pytest.fixture
def zotero_items() -> list[ItemPayload]:
    return [
        _item_payload(
            "AAAA1111",
            report_number="pnw 615",
            url="https://pubs.example.org/pnw615.pdf",
            title="Pacific Northwest Insect Management Handbook",
        ),
        _item_payload(
            "BBBB2222",
            report_number="AGNET",
            url="",
            title="AgWeatherNet",
            item_type="webpage",
        ),
        _item_payload(
            "CCCC3333",
            report_number="FS123",
            url="https://pubs.example.org/fs123.pdf",
            title="Orchard Sanitation Fact Sheet",
        ),
    ]


@pytest.fixture
def make_record() -> Callable[..., CatalogRecord]:
    def factory(
        key: str,
        report_number: str = "",
        url: str = "https://example.org/pub.pdf",
        **kwargs: str,
    ) -> CatalogRecord:
        return CatalogRecord(key=key, report_number=report_number, url=url, **kwargs)

    return factory


@pytest.fixture
def write_reference_list(tmp_path: Path) -> Callable[[Iterable[str]], Path]:
    def writer(identifiers: Iterable[str], *, column: str = "reportNumber") -> Path:
        path = tmp_path / "pubs_resources.csv"
        with path.open("w", encoding="utf-8", newline="") as handle:
            csv_writer = csv.writer(handle)
            csv_writer.writerow(["resource", column])
            for index, identifier in enumerate(identifiers):
                csv_writer.writerow([f"resource-{index}", identifier])
        return path

    return writer
