"""Ports for fetching catalog records from an external library."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pubsync.domain.types import CatalogRecord


@dataclass(slots=True)
class CatalogFetchResult:
    """Single page of catalog records fetched from an external library."""

    records: list[CatalogRecord] = field(default_factory=list)
    limit: int | None = None

    @property
    def possibly_truncated(self) -> bool:
        return self.limit is not None and len(self.records) >= self.limit


@runtime_checkable
class CatalogFetcher(Protocol):
    """Callable port for retrieving catalog records in one bounded request."""

    def __call__(self, *, limit: int | None = None) -> CatalogFetchResult: ...


__all__ = ["CatalogFetchResult", "CatalogFetcher"]
