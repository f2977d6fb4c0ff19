from __future__ import annotations

import pytest

from pubsync.domain.identifiers import derive_thumbnail, normalize_identifier


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("pnw 615", "PNW615"),
        ("PNW-615", "PNW615"),
        ("PNW615", "PNW615"),
        ("  fs/123.b ", "FS123B"),
        ("AGNET", "AGNET"),
        ("", ""),
        ("---", ""),
        ("Café 12", "CAF12"),
    ],
)
def test_normalize_identifier(raw: str, expected: str) -> None:
    assert normalize_identifier(raw) == expected


def test_normalize_identifier_treats_missing_as_empty() -> None:
    assert normalize_identifier(None) == ""


def test_normalize_identifier_ignores_case_and_punctuation() -> None:
    assert (
        normalize_identifier("PNW 615")
        == normalize_identifier("pnw-615")
        == normalize_identifier("PNW615")
    )


@pytest.mark.parametrize("raw", ["PNW 615", "pnw-615", "EB 1234e", "A\tb\nc", "ÄÖÜ 9", ""])
def test_normalize_identifier_is_idempotent(raw: str) -> None:
    once = normalize_identifier(raw)

    assert normalize_identifier(once) == once


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("PNW 615", "pnw_615.png"),
        ("AGNET", "agnet.png"),
        ("EB  2021\tE", "eb_2021_e.png"),
        ("FS-123", "fs-123.png"),
    ],
)
def test_derive_thumbnail(raw: str, expected: str) -> None:
    assert derive_thumbnail(raw) == expected


@pytest.mark.parametrize("raw", ["", None])
def test_derive_thumbnail_is_blank_without_identifier(raw: str | None) -> None:
    assert derive_thumbnail(raw) == ""
