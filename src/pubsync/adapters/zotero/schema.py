"""Pydantic models describing the Zotero Web API item payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator


def _none_to_blank(value: object) -> object:
    if value is None:
        return ""
    return value


class ZoteroBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ItemData(ZoteroBaseModel):
    """The editable ``data`` object of an item.

    Only report-like item types carry ``reportNumber``; other types use it for an
    alternate identifier or omit it entirely.
    """

    title: str = ""
    report_number: str = Field(default="", alias="reportNumber")
    url: str = ""
    item_type: str = Field(default="", alias="itemType")
    date: str = ""

    _normalize_blanks = field_validator(
        "title", "report_number", "url", "item_type", "date", mode="before"
    )(_none_to_blank)


class ItemPayload(ZoteroBaseModel):
    key: str
    data: ItemData = Field(default_factory=ItemData)


class ItemsResponse(RootModel[list[ItemPayload]]):
    """Body of ``GET /groups/{id}/items/top``: a JSON array of items."""
