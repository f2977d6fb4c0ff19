from __future__ import annotations

import csv
from typing import TYPE_CHECKING

import pytest

from pubsync.adapters.tabular import (
    EXPORT_COLUMNS,
    ExportWriteError,
    load_reference_identifiers,
    read_catalog_rows,
    write_catalog_records,
)
from pubsync.config import ConfigurationError, MissingInputFileError
from pubsync.domain.types import CatalogRecord

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path


def test_load_reference_identifiers_dedupes_and_drops_sentinels(
    write_reference_list: Callable[[Iterable[str]], Path],
) -> None:
    path = write_reference_list(["PNW 615", "EMPTY", "", "AGNET", "PNW 615", "empty"])

    identifiers = load_reference_identifiers(path)

    assert identifiers == ("PNW 615", "AGNET", "empty")


def test_load_reference_identifiers_keeps_raw_forms(
    write_reference_list: Callable[[Iterable[str]], Path],
) -> None:
    path = write_reference_list(["pnw 615", "PNW-615"])

    assert load_reference_identifiers(path) == ("pnw 615", "PNW-615")


def test_load_reference_identifiers_tolerates_bom(tmp_path: Path) -> None:
    path = tmp_path / "with_bom.csv"
    path.write_text("reportNumber,label\nFS123,Fact sheet\n", encoding="utf-8-sig")

    assert load_reference_identifiers(path) == ("FS123",)


def test_missing_input_file_is_a_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(MissingInputFileError) as excinfo:
        load_reference_identifiers(tmp_path / "absent.csv")

    assert isinstance(excinfo.value, ConfigurationError)
    assert "absent.csv" in str(excinfo.value)


def test_missing_identifier_column_is_rejected(
    write_reference_list: Callable[..., Path],
) -> None:
    path = write_reference_list(["PNW 615"], column="report")

    with pytest.raises(ConfigurationError):
        load_reference_identifiers(path)


def test_write_then_read_round_trip(tmp_path: Path) -> None:
    records = [
        CatalogRecord(
            key="AAAA1111",
            title='Handbook, "2024" edition',
            report_number="PNW 615",
            url="https://pubs.example.org/pnw615.pdf",
            item_type="report",
            date="2024",
            thumbnail="pnw_615.png",
        ),
        CatalogRecord(key="CCCC3333", report_number="FS123", url="https://x.org/fs", thumbnail=""),
    ]
    path = tmp_path / "publications.csv"

    write_catalog_records(records, path)
    rows = read_catalog_rows(path)

    with path.open(encoding="utf-8", newline="") as handle:
        header = next(csv.reader(handle))
    assert tuple(header) == EXPORT_COLUMNS
    assert [(row["key"], row["reportNumber"], row["url"], row["thumbnail"]) for row in rows] == [
        (record.key, record.report_number, record.url, record.thumbnail) for record in records
    ]
    assert rows[0]["title"] == 'Handbook, "2024" edition'


def test_write_empty_export_has_header_only(tmp_path: Path) -> None:
    path = tmp_path / "publications.csv"

    write_catalog_records([], path)

    assert path.read_text(encoding="utf-8").splitlines() == [",".join(EXPORT_COLUMNS)]


def test_write_overwrites_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "publications.csv"
    path.write_text("stale content\n", encoding="utf-8")

    write_catalog_records([CatalogRecord(key="K1", url="https://x.org")], path)

    rows = read_catalog_rows(path)
    assert [row["key"] for row in rows] == ["K1"]
    assert not (tmp_path / ".publications.csv.tmp").exists()


def test_write_failure_surfaces_cause(tmp_path: Path) -> None:
    path = tmp_path / "missing-dir" / "publications.csv"

    with pytest.raises(ExportWriteError) as excinfo:
        write_catalog_records([CatalogRecord(key="K1")], path)

    assert isinstance(excinfo.value.__cause__, OSError)
    assert excinfo.value.path == path
    assert not path.exists()
