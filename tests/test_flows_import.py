"""
Tests for the import flow module.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from birdhub.flows import importer

if TYPE_CHECKING:
    from pathlib import Path

CSV_TEXT = """Row #,Species Code,Taxonomic Order,Common Name,Scientific Name,Subspecies,Location,S/P,Date
1,mallar3,381,Mallard,Anas platyrhynchos,,"Smith and Bybee Wetlands, Portland",US-OR,2 Mar 2024
2,bushti,22222,Bushtit,Psaltriparus minimus,,Backyard,US-OR,1 Jan 2024
3,stejay,20400,Steller's Jay,Cyanocitta stelleri,,"Forest Park",US-OR,5 Jan 2024
4,broken,1,Broken Row,Nothing
5,baddat,2,Bad Date,Avis incerta,,Somewhere,US-OR,sometime in May
"""


class TestLoadLifelist:
    """Test choosing where the CSV comes from."""

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "lifelist.csv"
        path.write_text(CSV_TEXT)
        assert importer.load_lifelist(source=path) == CSV_TEXT

    @patch("birdhub.flows.importer.ebird.fetch_lifelist_csv")
    def test_downloads_url(self, mock_fetch: Mock) -> None:
        mock_fetch.return_value = CSV_TEXT
        assert importer.load_lifelist(url="https://example.com/l.csv") == CSV_TEXT
        mock_fetch.assert_called_once_with("https://example.com/l.csv")

    def test_no_source(self) -> None:
        with pytest.raises(ValueError, match="No life list source"):
            importer.load_lifelist()


class TestParseLifelistTask:
    """Test the parse task's summary."""

    def test_counts(self) -> None:
        result = importer.parse_lifelist(CSV_TEXT)
        assert len(result["observations"]) == 3
        assert result["rows"] == 5
        assert result["short_rows"] == 1
        assert result["bad_dates"] == 1


class TestImportLifelistFlow:
    """Test the main import flow."""

    def test_creates_export(self, tmp_path: Path) -> None:
        output = tmp_path / "data.json"
        source = tmp_path / "lifelist.csv"
        source.write_text(CSV_TEXT)

        result = importer.import_lifelist(source=source, output=output)

        assert result["species"] == 3
        assert result["dropped"] == 2
        assert result["output"] == str(output)
        assert result["latest"]["common"] == "Mallard"
        assert result["latest"]["date"] == "2024-03-02"

        data = json.loads(output.read_text())
        assert [o["date"] for o in data["observations"]] == [
            "2024-01-01",
            "2024-01-05",
            "2024-03-02",
        ]
        assert data["observations"][-1] == {
            "date": "2024-03-02",
            "sciName": "Anas platyrhynchos",
            "common": "Mallard",
            "location": "Smith and Bybee Wetlands, Portland",
            "region": "US-OR",
        }
        assert data["profile"]["lastSync"] == data["exportedAt"]

    def test_preserves_existing_profile(self, tmp_path: Path) -> None:
        output = tmp_path / "data.json"
        output.write_text(
            json.dumps(
                {
                    "profile": {
                        "name": "Ada",
                        "location": "Portland, OR",
                        "lastSync": "2020-01-01T00:00:00.000Z",
                    },
                    "observations": [],
                    "exportedAt": "2020-01-01T00:00:00.000Z",
                }
            )
        )

        importer.import_lifelist(output=output, csv_text=CSV_TEXT)

        profile = json.loads(output.read_text())["profile"]
        assert profile["name"] == "Ada"
        assert profile["location"] == "Portland, OR"
        assert profile["lastSync"] != "2020-01-01T00:00:00.000Z"

    def test_corrupt_previous_export(self, tmp_path: Path) -> None:
        output = tmp_path / "data.json"
        output.write_text("<html>oops</html>")

        result = importer.import_lifelist(output=output, csv_text=CSV_TEXT)

        assert result["species"] == 3
        profile = json.loads(output.read_text())["profile"]
        assert set(profile) == {"lastSync"}

    def test_header_only_input(self, tmp_path: Path) -> None:
        output = tmp_path / "data.json"
        header = CSV_TEXT.splitlines()[0]

        result = importer.import_lifelist(output=output, csv_text=header)

        assert result["species"] == 0
        assert result["latest"] is None
        assert json.loads(output.read_text())["observations"] == []

    def test_missing_source_leaves_artifact(self, tmp_path: Path) -> None:
        output = tmp_path / "data.json"
        output.write_text('{"profile": {"name": "Ada"}}')

        with pytest.raises(FileNotFoundError):
            importer.import_lifelist(source=tmp_path / "missing.csv", output=output)

        assert output.read_text() == '{"profile": {"name": "Ada"}}'
