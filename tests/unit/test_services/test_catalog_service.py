"""Unit tests for CareerCatalogService."""

import csv
import json
import logging

import pytest

from naviksha.services.catalog_service import CareerCatalogService
from naviksha.utils.constants import CATALOG_CSV_COLUMNS
from naviksha.utils.exceptions import CatalogLoadError


@pytest.fixture
def catalog_csv(tmp_path):
    """career_mappings.csv export with one incomplete row."""
    path = tmp_path / "career_mappings.csv"
    rows = [
        {
            "career_id": "C001",
            "career_name": "Software Engineer",
            "bucket": "Engineering & Technology",
            "riasec_profile": "IRC",
            "primary_subjects": '["Mathematics", "Computer Science"]',
            "tags": '["tech", "new_age"]',
            "min_qualification": "B.Tech",
            "why_fit": "You enjoy solving logical problems",
        },
        {
            "career_id": "C002",
            "career_name": "",
            "bucket": "Unknown",
        },
        {
            "career_id": "C003",
            "career_name": "Surgeon",
            "bucket": "Medicine & Healthcare",
            "riasec_profile": "IRS",
            "primary_subjects": '["Biology"]',
            "tags": "",
            "min_qualification": "MBBS",
        },
        {
            "career_id": "C004",
            "career_name": "Civil Engineer",
            "bucket": "Engineering & Technology",
            "riasec_profile": "RIC",
            "primary_subjects": "Physics",
            "tags": '["hands_on"]',
            "min_qualification": "B.Tech",
        },
    ]
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=CATALOG_CSV_COLUMNS)
        writer.writeheader()
        writer.writerows(rows)
    return path


class TestLoadCsv:
    """Test loading the CSV export."""

    def test_loads_valid_rows(self, catalog_csv):
        """Test valid rows are loaded and the row without a name is skipped."""
        catalog = CareerCatalogService.load_csv(catalog_csv)

        assert len(catalog) == 3
        assert [career.career_name for career in catalog] == ["Software Engineer", "Surgeon", "Civil Engineer"]

    def test_list_columns_are_parsed(self, catalog_csv):
        """Test JSON and plain-text list cells."""
        catalog = CareerCatalogService.load_csv(catalog_csv)

        engineer = catalog.find_by_name("Software Engineer")
        assert engineer.subject_list == ["Mathematics", "Computer Science"]
        assert engineer.tag_list == ["tech", "new_age"]
        assert engineer.why_fit == "You enjoy solving logical problems"

        assert catalog.find_by_name("Surgeon").tag_list == []
        assert catalog.find_by_name("Civil Engineer").subject_list == ["Physics"]

    def test_list_buckets(self, catalog_csv):
        """Test buckets are listed once in catalog order."""
        catalog = CareerCatalogService.load_csv(catalog_csv)

        assert catalog.list_buckets() == ["Engineering & Technology", "Medicine & Healthcare"]

    def test_missing_file(self, tmp_path):
        """Test a missing file raises CatalogLoadError."""
        path = tmp_path / "missing.csv"

        with pytest.raises(CatalogLoadError) as exc_info:
            CareerCatalogService.load_csv(path)

        assert exc_info.value.source == str(path)
        assert exc_info.value.error_code == "CATALOG_LOAD_ERROR"


class TestLoadJson:
    """Test loading a JSON dump."""

    def test_loads_records(self, tmp_path, career_records):
        """Test camelCase records with mixed list encodings."""
        path = tmp_path / "careers.json"
        path.write_text(json.dumps(career_records), encoding="utf-8")

        catalog = CareerCatalogService.load_json(path)

        assert len(catalog) == len(career_records)
        assert catalog.find_by_name("Doctor").subject_list == ["Biology", "Chemistry"]

    def test_not_an_array(self, tmp_path):
        """Test a JSON object is rejected."""
        path = tmp_path / "careers.json"
        path.write_text('{"careers": []}', encoding="utf-8")

        with pytest.raises(CatalogLoadError):
            CareerCatalogService.load_json(path)

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON is rejected."""
        path = tmp_path / "careers.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(CatalogLoadError):
            CareerCatalogService.load_json(path)


class TestFromRecords:
    """Test building a catalog from raw records."""

    def test_skips_invalid_records(self):
        """Test records missing a required field are skipped."""
        catalog = CareerCatalogService.from_records([
            {"careerName": "Pilot", "bucket": "Aviation"},
            {"careerName": "No Bucket"},
        ])

        assert [career.career_name for career in catalog] == ["Pilot"]

    def test_find_by_name_returns_first(self):
        """Test duplicate names resolve to the first record."""
        catalog = CareerCatalogService.from_records([
            {"careerName": "Architect", "bucket": "Design"},
            {"careerName": "Architect", "bucket": "Engineering"},
        ])

        assert catalog.find_by_name("Architect").bucket == "Design"
        assert catalog.find_by_name("Astronaut") is None


class TestCsvColumns:
    """Test catalog exports with unexpected headers."""

    def test_missing_scoring_columns(self, tmp_path, caplog):
        """Test exports without optional scoring columns load with a warning."""
        path = tmp_path / "career_mappings.csv"
        path.write_text("career_name,bucket\nPilot,Aviation\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="naviksha.catalog"):
            catalog = CareerCatalogService.load_csv(path)

        assert catalog.find_by_name("Pilot").riasec_profile == ""
        assert "Catalog export is missing scoring columns" in caplog.text
