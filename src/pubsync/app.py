"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pubsync.adapters.tabular import load_reference_identifiers, write_catalog_records
from pubsync.adapters.zotero import ZoteroFetcher
from pubsync.config import ReferenceListConfig, get_paths_config
from pubsync.domain.reconciliation import reconcile

if TYPE_CHECKING:
    from pathlib import Path

    from pubsync.config import PathsConfig
    from pubsync.domain.ports.fetching import CatalogFetcher
    from pubsync.domain.reconciliation import ReconciliationResult

log = getLogger(__name__)

_SAMPLE_SIZE = 5


@dataclass(slots=True)
class SyncPublicationsResult:
    """Outcome of a publications sync run."""

    required: int
    reconciliation: ReconciliationResult
    output_file: Path


def sync_publications(
    *,
    paths: PathsConfig | None = None,
    reference_list: ReferenceListConfig | None = None,
    source: CatalogFetcher | None = None,
    limit: int | None = None,
) -> SyncPublicationsResult:
    """Load the reference list, fetch the library, reconcile and write the export."""

    effective_paths = paths or get_paths_config()
    effective_reference_list = reference_list or ReferenceListConfig()

    log.info("Reading reference list %s", effective_paths.input_file)
    required = load_reference_identifiers(
        effective_paths.input_file,
        column=effective_reference_list.column,
        sentinel=effective_reference_list.sentinel,
    )
    log.info(
        "Found %s unique report numbers needed (sample: %s)",
        len(required),
        ", ".join(required[:_SAMPLE_SIZE]),
    )

    effective_source = source or ZoteroFetcher()
    fetched = effective_source(limit=limit)
    if fetched.possibly_truncated:
        log.warning(
            "Zotero returned a full page of %s items; the library may hold more "
            "items than a single request returns",
            fetched.limit,
        )

    result = reconcile(fetched.records, required)
    if result.dropped_without_url:
        log.info("Filtered out %s items without URLs", result.dropped_without_url)
    _report_gaps(result)
    log.info(
        "Kept %s of %s publications (%s filtered out)",
        result.retained,
        result.considered,
        result.dropped_unmatched,
    )

    output_file = effective_paths.resolve_output_file()
    log.info("Writing CSV file %s", output_file)
    write_catalog_records(result.records, output_file)
    log.info("Wrote %s publications to %s", result.retained, output_file)

    return SyncPublicationsResult(
        required=len(required),
        reconciliation=result,
        output_file=output_file,
    )


def _report_gaps(result: ReconciliationResult) -> None:
    if not result.gaps:
        return
    lines = "\n".join(f"  - {', '.join(gap.raw_forms)}" for gap in result.gaps)
    log.warning(
        "The following report numbers from the reference list were NOT found in Zotero:\n"
        "%s\nYou may need to add these items to the Zotero library.",
        lines,
    )
