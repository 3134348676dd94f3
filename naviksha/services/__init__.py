"""Scoring, ranking, report and catalog services."""

from naviksha.services.career_service import (
    CareerRankingService,
    generate_match_reasons,
    get_confidence_level,
)
from naviksha.services.catalog_service import CareerCatalogService
from naviksha.services.report_service import ReportService
from naviksha.services.scoring_service import ScoringRules, ScoringService

__all__ = [
    "CareerCatalogService",
    "CareerRankingService",
    "ReportService",
    "ScoringRules",
    "ScoringService",
    "generate_match_reasons",
    "get_confidence_level",
]
