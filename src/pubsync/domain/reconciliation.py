"""Reconcile fetched catalog records against the required identifiers.

The stages run in a fixed order and never perform I/O:

1. derive a thumbnail name for every record
2. drop records without a resolvable URL
3. keep records whose normalized report number is required
4. collect required identifiers that no kept record satisfies

Because the URL filter runs before the join, a required item that exists in
the library without a link is reported as missing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from .identifiers import derive_thumbnail, normalize_identifier

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .types import CatalogRecord, NormalizedKey, ReferenceIdentifier

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GapEntry:
    """A required key with no retained record, with every raw form that produced it."""

    key: NormalizedKey
    raw_forms: tuple[ReferenceIdentifier, ...]


@dataclass(slots=True)
class ReconciliationResult:
    """Outcome of a reconciliation pass."""

    records: list[CatalogRecord] = field(default_factory=list)
    fetched: int = 0
    dropped_without_url: int = 0
    gaps: list[GapEntry] = field(default_factory=list)

    @property
    def considered(self) -> int:
        return self.fetched - self.dropped_without_url

    @property
    def retained(self) -> int:
        return len(self.records)

    @property
    def dropped_unmatched(self) -> int:
        return self.considered - self.retained

    @property
    def missing_identifiers(self) -> list[ReferenceIdentifier]:
        return [raw for gap in self.gaps for raw in gap.raw_forms]


def attach_thumbnails(records: Iterable[CatalogRecord]) -> list[CatalogRecord]:
    return [record.with_thumbnail(derive_thumbnail(record.report_number)) for record in records]


def filter_linked(records: Iterable[CatalogRecord]) -> list[CatalogRecord]:
    return [record for record in records if record.has_url]


def group_by_key(
    identifiers: Iterable[ReferenceIdentifier],
) -> dict[NormalizedKey, tuple[ReferenceIdentifier, ...]]:
    """Map each normalized key to its raw forms, in first-seen order."""

    grouped: dict[NormalizedKey, list[ReferenceIdentifier]] = {}
    for identifier in identifiers:
        raw_forms = grouped.setdefault(normalize_identifier(identifier), [])
        if identifier not in raw_forms:
            raw_forms.append(identifier)
    return {key: tuple(raw_forms) for key, raw_forms in grouped.items()}


def join_required(
    records: Iterable[CatalogRecord],
    required_keys: set[NormalizedKey] | frozenset[NormalizedKey],
) -> list[CatalogRecord]:
    return [
        record for record in records if normalize_identifier(record.report_number) in required_keys
    ]


def find_gaps(
    records: Iterable[CatalogRecord],
    required: dict[NormalizedKey, tuple[ReferenceIdentifier, ...]],
) -> list[GapEntry]:
    matched = {normalize_identifier(record.report_number) for record in records}
    return [
        GapEntry(key=key, raw_forms=raw_forms)
        for key, raw_forms in required.items()
        if key not in matched
    ]


def reconcile(
    records: Sequence[CatalogRecord],
    references: Iterable[ReferenceIdentifier],
) -> ReconciliationResult:
    """Thumbnail, link-filter and join ``records`` against ``references``."""

    required = group_by_key(references)

    with_thumbnails = attach_thumbnails(records)
    linked = filter_linked(with_thumbnails)
    kept = join_required(linked, frozenset(required))
    gaps = find_gaps(kept, required)

    result = ReconciliationResult(
        records=kept,
        fetched=len(records),
        dropped_without_url=len(with_thumbnails) - len(linked),
        gaps=gaps,
    )
    log.debug(
        "Reconciled %s records: %s without URL, %s kept, %s required keys missing",
        result.fetched,
        result.dropped_without_url,
        result.retained,
        len(gaps),
    )
    return result
