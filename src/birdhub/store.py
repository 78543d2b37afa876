"""Persistence for the ``data.json`` export artifact.

The artifact is read once at the start of an import (to recover the user's
profile) and rewritten in full at the end. Reads are forgiving: a missing or
corrupt file means "no profile yet". Writes go to a temporary file in the same
directory and are moved over the target with ``os.replace``, so a failed
import leaves the previous artifact as it was.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path  # noqa: TC003 — used at runtime, not just annotations
from typing import Any

from birdhub.schemas import Export


class ExportStore:
    """Reads and atomically rewrites one export artifact."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def read_raw(self) -> dict[str, Any] | None:
        """Return the parsed JSON object, or None if missing or malformed."""
        if not self.path.exists():
            return None
        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            return None
        return data if isinstance(data, dict) else None

    def read_profile(self) -> dict[str, Any]:
        """Return the stored profile fields, or ``{}`` if there are none."""
        raw = self.read_raw() or {}
        profile = raw.get("profile")
        return profile if isinstance(profile, dict) else {}

    def read(self) -> Export | None:
        """Load the artifact as an ``Export``.

        Raises:
            pydantic.ValidationError: If the file is JSON but not an export.
        """
        raw = self.read_raw()
        if raw is None:
            return None
        return Export.model_validate(raw)

    def write(self, export: Export) -> Path:
        """Replace the artifact with ``export``.

        Returns:
            Path of the written file.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(export.to_json_dict(), f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        return self.path
