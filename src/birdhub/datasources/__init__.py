"""External data source integrations.

Each subdirectory is one data source::

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # URLs, constants, column layouts
    └── {feature}.py      # Parse/fetch functions (one per export or endpoint)

Currently only ``ebird/`` (life list CSV export). A new source should return
``birdhub.schemas.Observation`` lists so ``flows/importer.py`` can persist them
unchanged.
"""
