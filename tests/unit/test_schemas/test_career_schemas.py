"""Unit tests for career and recommendation schemas."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from naviksha.schemas.assessment_schemas import RiasecScores
from naviksha.schemas.career_schemas import (
    Career,
    CareerMatch,
    ScoringWeights,
    StudentContext,
    StudentProfile,
)


class TestCareer:
    """Test the catalog record."""

    def test_camel_case_record(self):
        """Test records using the catalog's camelCase names."""
        career = Career.model_validate({
            "careerId": "C010",
            "careerName": "Architect",
            "bucket": "Design & Architecture",
            "riasecProfile": "AR",
            "primarySubjects": '["Mathematics", "Art"]',
            "minQualification": "B.Arch",
            "baseParagraph": "Design buildings and spaces",
        })

        assert career.career_id == "C010"
        assert career.riasec_profile == "AR"
        assert career.subject_list == ["Mathematics", "Art"]
        assert career.tag_list == []
        assert career.base_paragraph == "Design buildings and spaces"

    def test_subjects_and_tags_parse_independently(self):
        """Test a malformed tags field does not affect subjects."""
        career = Career(
            career_name="Chef",
            bucket="Hospitality",
            primary_subjects='["Home Science"]',
            tags="[broken",
        )

        assert career.subject_list == ["Home Science"]
        assert career.tag_list == ["[broken"]

    def test_required_fields(self):
        """Test name and bucket are required."""
        with pytest.raises(PydanticValidationError):
            Career(career_name="Chef")


class TestScoringWeights:
    """Test the weight set."""

    def test_defaults(self):
        """Test default weights sum to one."""
        weights = ScoringWeights()

        assert (weights.riasec_weight, weights.subject_weight) == (0.4, 0.3)
        assert (weights.context_weight, weights.practical_weight) == (0.2, 0.1)
        assert weights.total == pytest.approx(1.0)

    def test_negative_weight_rejected(self):
        """Test weights must be non-negative."""
        with pytest.raises(PydanticValidationError):
            ScoringWeights(subject_weight=-0.1)

    def test_camel_case(self):
        """Test camelCase weight names."""
        assert ScoringWeights.model_validate({"riasecWeight": 1}).riasec_weight == 1


class TestStudentContext:
    """Test the EduStats context."""

    def test_blank_grades_dropped(self):
        """Test grades left blank are ignored."""
        context = StudentContext(grades={"Physics": 80, "Art": "", "Music": None})

        assert context.grades == {"Physics": 80}

    def test_profile_from_context(self):
        """Test combining a context with RIASEC scores."""
        context = StudentContext(grades={"Physics": 80}, work_style_preference="Remote / Flexible")

        profile = StudentProfile.from_context(RiasecScores(R=10), context)

        assert profile.riasec_scores.R == 10
        assert profile.grades == {"Physics": 80}
        assert profile.work_style_preference == "Remote / Flexible"


class TestCareerMatch:
    """Test the match record."""

    def test_score_range(self):
        """Test scores outside [0, 100] are rejected."""
        with pytest.raises(PydanticValidationError):
            CareerMatch(career_name="Chef", match_score=101, confidence="High")

    def test_confidence_serialized_as_text(self):
        """Test confidence tiers serialize to their display text."""
        match = CareerMatch(career_name="Chef", match_score=90, confidence="High")

        assert match.model_dump()["confidence"] == "High"
