"""
Domain models for BirdHub.

Pydantic models for the ``data.json`` export artifact read by the profile page.
Field aliases are the exact JSON keys the page consumes (``sciName``,
``common``, ``lastSync``, ``exportedAt``); always dump with ``by_alias=True``.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Helpers
# =============================================================================


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO 8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    now = now or datetime.now(UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return now.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# =============================================================================
# Export artifact
# =============================================================================


class Observation(BaseModel):
    """First sighting of one species on one date."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    date: str = Field(..., description="ISO date, YYYY-MM-DD")
    sci_name: str = Field(..., alias="sciName")
    common: str
    location: str = ""
    region: str = ""


class Profile(BaseModel):
    """User identity and sync metadata.

    Everything except ``lastSync`` is owned by the user and carried through
    imports untouched.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    last_sync: str | None = Field(default=None, alias="lastSync")


class Export(BaseModel):
    """The whole ``data.json`` document."""

    model_config = ConfigDict(populate_by_name=True)

    profile: Profile = Field(default_factory=Profile)
    observations: list[Observation] = Field(default_factory=list)
    exported_at: str | None = Field(default=None, alias="exportedAt")

    @classmethod
    def build(
        cls,
        observations: list[Observation],
        profile: dict[str, Any] | None = None,
        now: datetime | None = None,
    ) -> Export:
        """Assemble a fresh export, stamping ``lastSync`` and ``exportedAt``."""
        stamp = utc_timestamp(now)
        merged = {**(profile or {}), "lastSync": stamp}
        return cls(
            profile=Profile.model_validate(merged),
            observations=observations,
            exported_at=stamp,
        )

    @property
    def latest(self) -> Observation | None:
        """Most recent observation (last in date order)."""
        return self.observations[-1] if self.observations else None

    def to_json_dict(self) -> dict[str, Any]:
        """JSON-ready dict using the page's key names."""
        return self.model_dump(mode="json", by_alias=True)
