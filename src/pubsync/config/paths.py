"""File locations for the reference list and the export."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var

DEFAULT_INPUT_FILE: Final[str] = "data/pubs_resources.csv"
DEFAULT_OUTPUT_FILE: Final[str] = "data/publications.csv"
DEFAULT_IDENTIFIER_COLUMN: Final[str] = "reportNumber"
DEFAULT_SENTINEL: Final[str] = "EMPTY"


@dataclass(frozen=True, slots=True)
class PathsConfig:
    input_file: Path
    output_file: Path

    def resolve_output_file(self) -> Path:
        return self.output_file.expanduser().resolve()


@dataclass(frozen=True, slots=True)
class ReferenceListConfig:
    """Describes how identifiers are read from the reference list."""

    column: str = DEFAULT_IDENTIFIER_COLUMN
    sentinel: str = DEFAULT_SENTINEL


def get_paths_config(
    *,
    input_file: str | Path | None = None,
    output_file: str | Path | None = None,
) -> PathsConfig:
    effective_input = input_file or optional_env_var("PUBSYNC_INPUT_FILE") or DEFAULT_INPUT_FILE
    effective_output = (
        output_file or optional_env_var("PUBSYNC_OUTPUT_FILE") or DEFAULT_OUTPUT_FILE
    )
    return PathsConfig(input_file=Path(effective_input), output_file=Path(effective_output))
