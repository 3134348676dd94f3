"""Career catalog service.

Loads the career catalog from the career_mappings.csv export (or a JSON
dump of the careers collection) into validated Career records.
"""

import csv
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from naviksha.schemas.career_schemas import Career
from naviksha.utils.constants import CATALOG_SCORING_COLUMNS
from naviksha.utils.exceptions import CatalogLoadError
from naviksha.utils.logger import get_catalog_logger

logger = get_catalog_logger()


class CareerCatalogService:
    """In-memory career catalog."""

    def __init__(self, careers: Optional[Iterable[Career]] = None):
        """Initialize career catalog.

        Args:
            careers: Initial catalog records
        """
        self.careers: List[Career] = list(careers or [])

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "CareerCatalogService":
        """Build a catalog from raw records, skipping invalid ones.

        Args:
            records: Raw career records

        Returns:
            CareerCatalogService: Catalog with every valid record
        """
        careers = []
        skipped = 0
        for index, record in enumerate(records):
            try:
                careers.append(Career.model_validate(_clean_record(record)))
            except PydanticValidationError as e:
                skipped += 1
                logger.warning(
                    f"Skipping invalid career record at position {index}",
                    extra={"record_index": index, "error_count": e.error_count()}
                )

        logger.info(
            "Career catalog loaded",
            extra={"career_count": len(careers), "skipped_records": skipped}
        )
        return cls(careers)

    @classmethod
    def load_csv(cls, path: Union[str, Path]) -> "CareerCatalogService":
        """Load a catalog from a career_mappings.csv export.

        Args:
            path: CSV file path

        Returns:
            CareerCatalogService: Loaded catalog

        Raises:
            CatalogLoadError: If the file cannot be read
        """
        path = Path(path)
        try:
            with path.open(newline="", encoding="utf-8-sig") as handle:
                reader = csv.DictReader(handle)
                records = list(reader)
                columns = [column.strip() for column in reader.fieldnames or []]
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            raise CatalogLoadError(
                f"Cannot read career catalog: {str(e)}", source=str(path), cause=e
            ) from e

        missing = [column for column in CATALOG_SCORING_COLUMNS if column not in columns]
        if missing:
            logger.warning(
                "Catalog export is missing scoring columns",
                extra={"source": str(path), "missing_columns": missing}
            )

        return cls.from_records(records)

    @classmethod
    def load_json(cls, path: Union[str, Path]) -> "CareerCatalogService":
        """Load a catalog from a JSON array of career records.

        Args:
            path: JSON file path

        Returns:
            CareerCatalogService: Loaded catalog

        Raises:
            CatalogLoadError: If the file cannot be read or is not a JSON array
        """
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as handle:
                records = json.load(handle)
        except (OSError, ValueError) as e:
            raise CatalogLoadError(
                f"Cannot read career catalog: {str(e)}", source=str(path), cause=e
            ) from e

        if not isinstance(records, list):
            raise CatalogLoadError("Career catalog must be a JSON array", source=str(path))

        return cls.from_records(record for record in records if isinstance(record, dict))

    def find_by_name(self, career_name: str) -> Optional[Career]:
        """First catalog career with the given name."""
        return next((career for career in self.careers if career.career_name == career_name), None)

    def list_buckets(self) -> List[str]:
        """Bucket names in catalog order, without duplicates."""
        return list(dict.fromkeys(career.bucket for career in self.careers))

    def __len__(self) -> int:
        return len(self.careers)

    def __iter__(self):
        return iter(self.careers)


def _clean_record(record: Mapping[str, Any]) -> Dict[str, Any]:
    # CSV exports use empty cells for missing optional values
    return {
        key.strip(): value
        for key, value in record.items()
        if key and value not in ("", None)
    }
