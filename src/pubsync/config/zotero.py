"""Zotero API configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import int_env_var, optional_env_var
from .errors import ConfigurationError
from .http_resilience import ResilienceConfig

ZOTERO_BASE_URL = "https://api.zotero.org"
ZOTERO_API_VERSION = "3"
ZOTERO_TIMEOUT_SECONDS = 30.0
# Zotero caps a single response at 100 items.
ZOTERO_MAX_LIMIT = 100
DEFAULT_ZOTERO_GROUP_ID = "6220639"


def _default_resilience_config() -> ResilienceConfig:
    return ResilienceConfig(
        name="zotero",
        base_url=ZOTERO_BASE_URL,
        timeout_seconds=ZOTERO_TIMEOUT_SECONDS,
        default_headers={"Zotero-API-Version": ZOTERO_API_VERSION},
    )


@dataclass(frozen=True, slots=True)
class ZoteroConfig:
    """Holds the Zotero group library coordinates and request bounds."""

    group_id: str = DEFAULT_ZOTERO_GROUP_ID
    collection_id: str | None = None
    fetch_limit: int = ZOTERO_MAX_LIMIT
    resilience: ResilienceConfig = field(default_factory=_default_resilience_config)

    def items_path(self) -> str:
        if self.collection_id:
            return f"/groups/{self.group_id}/collections/{self.collection_id}/items/top"
        return f"/groups/{self.group_id}/items/top"


def get_zotero_config(
    *,
    group_id: str | None = None,
    collection_id: str | None = None,
    fetch_limit: int | None = None,
    resilience: ResilienceConfig | None = None,
) -> ZoteroConfig:
    """Build the Zotero configuration from explicit overrides and the environment."""

    effective_limit = (
        fetch_limit
        if fetch_limit is not None
        else int_env_var("ZOTERO_FETCH_LIMIT", ZOTERO_MAX_LIMIT)
    )
    if effective_limit <= 0:
        raise ConfigurationError(f"Fetch limit must be positive, got {effective_limit}")

    return ZoteroConfig(
        group_id=group_id or optional_env_var("ZOTERO_GROUP_ID") or DEFAULT_ZOTERO_GROUP_ID,
        collection_id=collection_id or optional_env_var("ZOTERO_COLLECTION_ID"),
        fetch_limit=effective_limit,
        resilience=resilience or _default_resilience_config(),
    )
