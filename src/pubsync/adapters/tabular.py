"""CSV adapters for the reference list and the publications export."""

from __future__ import annotations

import csv
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Final

from pubsync.config.errors import ConfigurationError, MissingInputFileError
from pubsync.config.paths import DEFAULT_IDENTIFIER_COLUMN, DEFAULT_SENTINEL

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pubsync.domain.types import CatalogRecord, ReferenceIdentifier

log = getLogger(__name__)

EXPORT_COLUMNS: Final[tuple[str, ...]] = (
    "key",
    "title",
    "reportNumber",
    "url",
    "itemType",
    "date",
    "thumbnail",
)


class ExportWriteError(RuntimeError):
    """Raised when the publications export cannot be written."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to write CSV file {path}: {cause}")
        self.path = path


def load_reference_identifiers(
    path: Path,
    *,
    column: str = DEFAULT_IDENTIFIER_COLUMN,
    sentinel: str = DEFAULT_SENTINEL,
) -> tuple[ReferenceIdentifier, ...]:
    """Return the unique identifiers listed in ``column``, in first-seen order.

    The sentinel value and empty cells are skipped. Values are returned as
    written; matching normalizes them later.
    """

    if not path.is_file():
        raise MissingInputFileError(f"Input file not found: {path}")

    seen: dict[ReferenceIdentifier, None] = {}
    with path.open(encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        if reader.fieldnames is None or column not in reader.fieldnames:
            raise ConfigurationError(f"Input file {path} has no {column!r} column")
        for row in reader:
            value = row.get(column)
            if not value or value == sentinel:
                continue
            seen.setdefault(value, None)

    return tuple(seen)


def _row_for(record: CatalogRecord) -> dict[str, str]:
    return {
        "key": record.key,
        "title": record.title,
        "reportNumber": record.report_number,
        "url": record.url,
        "itemType": record.item_type,
        "date": record.date,
        "thumbnail": record.thumbnail,
    }


def write_catalog_records(records: Iterable[CatalogRecord], path: Path) -> Path:
    """Write ``records`` to ``path``, replacing any existing file.

    Rows go to a sibling temporary file first so a failed write never leaves a
    truncated export behind.
    """

    staging = path.with_name(f".{path.name}.tmp")
    try:
        with staging.open("w", encoding="utf-8", newline="") as handle:
            writer = csv.DictWriter(handle, fieldnames=EXPORT_COLUMNS)
            writer.writeheader()
            writer.writerows(_row_for(record) for record in records)
        staging.replace(path)
    except OSError as exc:
        staging.unlink(missing_ok=True)
        raise ExportWriteError(path, exc) from exc

    return path


def read_catalog_rows(path: Path) -> list[dict[str, str]]:
    """Read an export back as one mapping per row, keyed by column name."""

    with path.open(encoding="utf-8", newline="") as handle:
        return list(csv.DictReader(handle))
