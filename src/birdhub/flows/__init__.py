"""
Prefect flows for the data pipeline.

Flows:
- importer: Parse an eBird life list CSV and rewrite data.json

Usage (local):
    python -m birdhub.flows.importer ebird_lifelist.csv

In GitHub Actions (after the export has been downloaded):
    pip install .
    birdhub import ebird_lifelist.csv
"""
