"""eBird life list export constants and column layout.

The life list CSV (``My eBird → Life List → Download``) has the columns::

    Row #, Species Code, Taxonomic Order, Common Name, Scientific Name,
    Subspecies, Location, S/P, Date

Only five of them are kept. ``ColumnSchema`` names their positions so a change
in eBird's export can be handled by configuration instead of code edits.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

# Case-sensitive, as written in the export's ``Date`` column ("5 Jan 2024")
MONTHS = {
    "Jan": "01",
    "Feb": "02",
    "Mar": "03",
    "Apr": "04",
    "May": "05",
    "Jun": "06",
    "Jul": "07",
    "Aug": "08",
    "Sep": "09",
    "Oct": "10",
    "Nov": "11",
    "Dec": "12",
}

# Header names used by ColumnSchema.from_header()
HEADER_NAMES = {
    "common": "Common Name",
    "sci_name": "Scientific Name",
    "location": "Location",
    "region": "S/P",
    "date": "Date",
}


@dataclass(frozen=True)
class ColumnSchema:
    """Zero-based positions of the fields we read from each row."""

    common: int = 3
    sci_name: int = 4
    location: int = 6
    region: int = 7
    date: int = 8

    @property
    def min_columns(self) -> int:
        """Rows shorter than this can't supply every field."""
        return max(getattr(self, f.name) for f in fields(self)) + 1

    @classmethod
    def from_header(cls, header: list[str]) -> ColumnSchema:
        """Locate each field by its header name.

        Raises:
            ValueError: If a required column is missing from the header.
        """
        lookup = {name.strip().lstrip("\ufeff").lower(): i for i, name in enumerate(header)}
        positions: dict[str, int] = {}
        missing = []
        for field_name, column_name in HEADER_NAMES.items():
            index = lookup.get(column_name.lower())
            if index is None:
                missing.append(column_name)
            else:
                positions[field_name] = index
        if missing:
            msg = f"Life list header is missing columns: {missing}"
            raise ValueError(msg)
        return cls(**positions)


DEFAULT_SCHEMA = ColumnSchema()
