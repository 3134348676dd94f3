"""Shared pytest fixtures for the Naviksha test suite."""

import os

os.environ.setdefault("APP_ENV", "test")

import pytest

from naviksha.utils.logger import setup_logging

setup_logging(environment="test", log_level="DEBUG")

from naviksha.schemas.assessment_schemas import RiasecScores
from naviksha.schemas.career_schemas import Career, StudentProfile
from naviksha.services.career_service import CareerRankingService
from naviksha.services.scoring_service import ScoringService


@pytest.fixture
def scoring_service():
    """ScoringService with the production rule tables."""
    return ScoringService()


@pytest.fixture
def ranking_service(scoring_service):
    """CareerRankingService with default limits."""
    return CareerRankingService(scoring_service)


@pytest.fixture
def student_profile():
    """Student strong in R/I, good at science, from an IT family."""
    return StudentProfile(
        riasec_scores=RiasecScores(R=42, I=21),
        grades={"Physics": 90, "Mathematics": 80, "Biology": 60},
        parent_careers=["IT / Software"],
        family_preferences=["Highly encouraged"],
        study_duration_preference="No",
        work_style_preference="Remote / Flexible",
        international_study_preference="Yes",
    )


@pytest.fixture
def career_records():
    """Raw catalog records in the mixed list / JSON-string storage formats."""
    return [
        {
            "careerId": "C001",
            "careerName": "Software Engineer",
            "bucket": "Engineering & Technology",
            "riasec_profile": "RI",
            "primarySubjects": ["Physics", "Mathematics"],
            "tags": ["tech", "new_age"],
            "minQualification": "B.Tech",
        },
        {
            "careerId": "C002",
            "careerName": "Doctor",
            "bucket": "Medicine & Healthcare",
            "riasec_profile": "IS",
            "primarySubjects": '["Biology", "Chemistry"]',
            "tags": '["hands_on"]',
            "minQualification": "MBBS",
        },
        {
            "careerId": "C003",
            "careerName": "Graphic Designer",
            "bucket": "Creative Arts",
            "riasec_profile": "AE",
            "primarySubjects": [],
            "tags": ["new_age"],
            "minQualification": "B.Des",
        },
        {
            "careerId": "C004",
            "careerName": "Data Scientist",
            "bucket": "Engineering & Technology",
            "riasec_profile": "IC",
            "primarySubjects": ["Mathematics"],
            "tags": "tech",
            "minQualification": "B.Sc",
        },
    ]


@pytest.fixture
def careers(career_records):
    """Validated career catalog."""
    return [Career.model_validate(record) for record in career_records]
