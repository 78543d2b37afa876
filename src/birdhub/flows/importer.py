"""
Prefect flow for importing an eBird life list into ``data.json``.

Run locally:
    python -m birdhub.flows.importer path/to/ebird_lifelist.csv

Run with Prefect dashboard:
    prefect server start &
    python -m birdhub.flows.importer path/to/ebird_lifelist.csv

The pipeline is linear and all-or-nothing: no task retries, and the previous
``data.json`` is only replaced once the new one is fully written.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from prefect import flow, task

from birdhub.datasources import ebird
from birdhub.schemas import Export, Observation
from birdhub.store import ExportStore

DATA_PATH = Path("data.json")


@task(name="load-lifelist")
def load_lifelist(source: Path | None = None, url: str | None = None) -> str:
    """Read the CSV export from a local file, or download it from ``url``."""
    if source is not None:
        return ebird.read_lifelist_csv(source)
    if url is not None:
        return ebird.fetch_lifelist_csv(url)
    msg = "No life list source given (need a CSV path or a URL)"
    raise ValueError(msg)


@task(name="parse-lifelist")
def parse_lifelist(text: str, detect_columns: bool = False) -> dict[str, Any]:
    """Parse CSV text into sorted observations plus drop counts."""
    stats = ebird.ParseStats()
    observations = ebird.parse_lifelist(text, detect_columns=detect_columns, stats=stats)
    return {
        "observations": observations,
        "rows": stats.rows,
        "short_rows": stats.short_rows,
        "bad_dates": stats.bad_dates,
    }


@task(name="load-profile")
def load_profile(output: Path) -> dict[str, Any]:
    """Recover the profile from the previous export (``{}`` if none)."""
    return ExportStore(output).read_profile()


@task(name="save-export")
def save_export(
    observations: list[Observation], profile: dict[str, Any], output: Path
) -> Export:
    """Stamp and atomically write the new export."""
    export = Export.build(observations, profile)
    ExportStore(output).write(export)
    return export


@flow(name="import-lifelist", log_prints=True)
def import_lifelist(
    source: Path | None = None,
    url: str | None = None,
    output: Path = DATA_PATH,
    detect_columns: bool = False,
    csv_text: str | None = None,
) -> dict[str, Any]:
    """
    Import a life list export and rewrite the export artifact.

    Exactly one of ``source``, ``url`` or ``csv_text`` supplies the CSV.
    """
    if csv_text is None:
        print(f"Loading life list from {source or url}...")
        csv_text = load_lifelist(source, url)

    print("Parsing CSV...")
    parsed = parse_lifelist(csv_text, detect_columns)
    observations: list[Observation] = parsed["observations"]
    print(f"Parsed {len(observations)} species from {parsed['rows']} rows")

    profile = load_profile(output)
    export = save_export(observations, profile, output)
    print(f"Saved to {output}")

    latest = export.latest
    return {
        "species": len(observations),
        "latest": latest.model_dump(by_alias=True) if latest else None,
        "dropped": parsed["short_rows"] + parsed["bad_dates"],
        "output": str(output),
    }


if __name__ == "__main__":
    csv_arg = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    result = import_lifelist(source=csv_arg)
    print(f"Flow complete: {result}")
