"""Pydantic schemas for the Naviksha career match engine.

This module provides the assessment, catalog, scoring input and report
schemas shared by the services.
"""

from naviksha.schemas.assessment_schemas import (
    AnswerValue,
    Question,
    RiasecScores,
    TestAnswer,
)
from naviksha.schemas.base import BaseSchema, FrozenSchema
from naviksha.schemas.career_schemas import (
    Career,
    CareerBucket,
    CareerMatch,
    CareerReport,
    ScoringWeights,
    StudentContext,
    StudentProfile,
)

__all__ = [
    # Base
    "BaseSchema",
    "FrozenSchema",

    # Assessment
    "AnswerValue",
    "Question",
    "RiasecScores",
    "TestAnswer",

    # Careers
    "Career",
    "CareerBucket",
    "CareerMatch",
    "CareerReport",
    "ScoringWeights",
    "StudentContext",
    "StudentProfile",
]
