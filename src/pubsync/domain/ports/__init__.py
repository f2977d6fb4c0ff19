"""Domain ports for external collaborators."""

from __future__ import annotations

from .fetching import CatalogFetcher, CatalogFetchResult

__all__ = ["CatalogFetchResult", "CatalogFetcher"]
