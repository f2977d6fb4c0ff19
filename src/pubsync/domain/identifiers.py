"""Identifier transformations used for matching and asset naming.

Report numbers are kept in the Zotero library exactly as printed on the
publication, so the same item may appear as ``PNW 615``, ``pnw-615`` or
``PNW615``. Matching therefore works on a normalized key, while thumbnail file
names keep the readable, lower-cased form.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from .types import NormalizedKey

THUMBNAIL_EXTENSION: Final[str] = ".png"

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_identifier(identifier: str | None) -> NormalizedKey:
    """Return the matching key for ``identifier``.

    Upper-cases the value and strips everything outside ``[A-Za-z0-9]``.
    ``None`` maps to the empty string.
    """

    if identifier is None:
        return ""
    return _NON_ALNUM.sub("", identifier.upper())


def derive_thumbnail(identifier: str | None) -> str:
    """Return the thumbnail file name for a report number, e.g. ``pnw_615.png``."""

    if not identifier:
        return ""
    return _WHITESPACE_RUN.sub("_", identifier.lower()) + THUMBNAIL_EXTENSION
