"""eBird life list data source.

Turns the life list CSV export into date-ordered ``Observation`` records.

Public API:
  - client: MONTHS, ColumnSchema, DEFAULT_SCHEMA
  - lifelist: tokenize_row, map_row, normalize_date, sequence_observations,
    parse_lifelist, ParseStats, read_lifelist_csv, fetch_lifelist_csv
"""

from birdhub.datasources.ebird.client import DEFAULT_SCHEMA, MONTHS, ColumnSchema
from birdhub.datasources.ebird.lifelist import (
    CandidateRecord,
    ParseStats,
    fetch_lifelist_csv,
    map_row,
    normalize_date,
    parse_lifelist,
    read_lifelist_csv,
    sequence_observations,
    tokenize_row,
)

__all__ = [
    "DEFAULT_SCHEMA",
    "MONTHS",
    "CandidateRecord",
    "ColumnSchema",
    "ParseStats",
    "fetch_lifelist_csv",
    "map_row",
    "normalize_date",
    "parse_lifelist",
    "read_lifelist_csv",
    "sequence_observations",
    "tokenize_row",
]
