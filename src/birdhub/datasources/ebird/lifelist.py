"""eBird life list CSV parsing and loading.

The pipeline is: split lines → drop the header → tokenize each row → map the
named columns → normalize the date → sort by date. Rows that are too short or
carry an unreadable date are skipped, never raised; ``ParseStats`` counts them
for anyone who wants to know.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from birdhub.datasources.ebird.client import DEFAULT_SCHEMA, MONTHS, ColumnSchema
from birdhub.schemas import Observation
from birdhub.services.http import session

if TYPE_CHECKING:
    from pathlib import Path

# =============================================================================
# Data Model
# =============================================================================


@dataclass
class CandidateRecord:
    """A mapped row whose date has not been checked yet."""

    date_text: str
    sci_name: str
    common: str
    location: str
    region: str


@dataclass
class ParseStats:
    """Row counts from one parse. Diagnostic only."""

    rows: int = 0
    imported: int = 0
    short_rows: int = 0
    bad_dates: int = 0

    @property
    def dropped(self) -> int:
        return self.short_rows + self.bad_dates


# =============================================================================
# Parsing
# =============================================================================


def tokenize_row(line: str) -> list[str]:
    """Split one CSV line on commas, honouring double-quoted fields.

    A ``"`` toggles quoted mode and is not kept. Doubled quotes are not
    unescaped. Every field is whitespace-trimmed.
    """
    columns: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            columns.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    columns.append("".join(current).strip())
    return columns


def normalize_date(text: str) -> str | None:
    """Convert an eBird date like ``"5 Jan 2024"`` to ``"2024-01-05"``.

    Returns None unless the string has exactly three parts and a known month.
    """
    parts = text.split()
    if len(parts) != 3:
        return None

    day, month_name, year = parts
    month = MONTHS.get(month_name)
    if month is None:
        return None

    return f"{year}-{month}-{day.rjust(2, '0')}"


def map_row(columns: list[str], schema: ColumnSchema = DEFAULT_SCHEMA) -> CandidateRecord | None:
    """Pick the named fields out of a tokenized row. Returns None if too short."""
    if len(columns) < schema.min_columns:
        return None

    return CandidateRecord(
        date_text=columns[schema.date],
        sci_name=columns[schema.sci_name],
        common=columns[schema.common],
        location=columns[schema.location].replace('"', ""),
        region=columns[schema.region],
    )


def sequence_observations(
    candidates: list[CandidateRecord],
    stats: ParseStats | None = None,
) -> list[Observation]:
    """Drop candidates with unreadable dates and sort the rest by date.

    ISO ``YYYY-MM-DD`` strings sort lexically in date order; ``sorted`` is
    stable so same-day records keep their input order.
    """
    observations = []
    for candidate in candidates:
        iso_date = normalize_date(candidate.date_text)
        if iso_date is None:
            if stats is not None:
                stats.bad_dates += 1
            continue
        observations.append(
            Observation(
                date=iso_date,
                sci_name=candidate.sci_name,
                common=candidate.common,
                location=candidate.location,
                region=candidate.region,
            )
        )

    if stats is not None:
        stats.imported = len(observations)
    return sorted(observations, key=lambda obs: obs.date)


def parse_lifelist(
    text: str,
    schema: ColumnSchema | None = None,
    *,
    detect_columns: bool = False,
    stats: ParseStats | None = None,
) -> list[Observation]:
    """
    Parse a life list CSV export into date-ordered observations.

    Args:
        text: Full CSV text. The first line is always treated as the header.
        schema: Column positions. Defaults to the standard eBird layout.
        detect_columns: Build the schema from the header names instead.
        stats: Optional counters filled in while parsing.

    Returns:
        Observations sorted ascending by date.

    Raises:
        ValueError: If ``detect_columns`` is set and the header lacks a column.
    """
    header, *lines = text.split("\n")
    rows = [line.strip() for line in lines if line.strip()]
    if not rows:
        return []

    if schema is None and detect_columns:
        schema = ColumnSchema.from_header(tokenize_row(header))
    elif schema is None:
        schema = DEFAULT_SCHEMA

    candidates = []
    for line in rows:
        if stats is not None:
            stats.rows += 1
        candidate = map_row(tokenize_row(line), schema)
        if candidate is None:
            if stats is not None:
                stats.short_rows += 1
            continue
        candidates.append(candidate)

    return sequence_observations(candidates, stats)


# =============================================================================
# Loading
# =============================================================================


def read_lifelist_csv(path: Path) -> str:
    """Read a downloaded life list export (BOM tolerated)."""
    return path.read_text(encoding="utf-8-sig")


def fetch_lifelist_csv(url: str) -> str:
    """
    Download a life list export from an unauthenticated URL.

    Raises:
        requests.HTTPError: On a non-2xx response.
    """
    resp = session.get(url)
    resp.raise_for_status()
    return resp.content.decode("utf-8-sig")
