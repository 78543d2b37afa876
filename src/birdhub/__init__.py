"""BirdHub - personal birding profile built from an eBird life list.

Architecture::

    datasources/   eBird life list export (column layout, CSV parsing, download)
    store.py       The ``data.json`` export artifact (tolerant read, atomic rewrite)
    flows/         Prefect orchestration (import parses CSV and rewrites the artifact)
    services/      Shared utilities (HTTP client with retry)

Data flow: CSV text → datasources.ebird → schemas.Export → store → data.json

The static profile page reads ``data.json`` directly; it is not part of this package.
"""

__version__ = "0.1.0"

from birdhub.config import Settings
from birdhub.schemas import Export, Observation, Profile

__all__ = ["Export", "Observation", "Profile", "Settings", "__version__"]
