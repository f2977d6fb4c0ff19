"""Domain records shared by the loader, fetcher, reconciler and exporter."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TypeAlias

# Raw identifier as found in the reference list (a report number or alternate id).
ReferenceIdentifier: TypeAlias = str
# Matching-only form of an identifier; never exported.
NormalizedKey: TypeAlias = str


@dataclass(frozen=True, slots=True)
class CatalogRecord:
    """One top-level item of the remote Zotero library.

    Absent text fields are represented as the empty string, so a record without
    a ``url`` is simply unlinked rather than malformed.
    """

    key: str
    title: str = ""
    report_number: str = ""
    url: str = ""
    item_type: str = ""
    date: str = ""
    thumbnail: str = ""

    @property
    def has_url(self) -> bool:
        return bool(self.url)

    def with_thumbnail(self, thumbnail: str) -> CatalogRecord:
        return replace(self, thumbnail=thumbnail)
