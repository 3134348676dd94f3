"""Career catalog, scoring input and recommendation schemas.

This module defines the career catalog record, the student profile fed to
the ranking engine, the scoring weights, and the ranked match, bucket and
report structures consumed by report rendering.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, Field, field_validator

from naviksha.schemas.assessment_schemas import RiasecScores
from naviksha.schemas.base import BaseSchema, FrozenSchema
from naviksha.utils.constants import ConfidenceLevel, ScoringDefaults
from naviksha.utils.helpers import parse_string_list


class Career(BaseSchema):
    """Career catalog record.

    primary_subjects and tags may be stored as native lists or as
    JSON-encoded strings; use subject_list and tag_list to read them.
    """

    # Leading spaces in riasec_profile take up a harmonic position
    model_config = {**BaseSchema.model_config, "str_strip_whitespace": False}

    career_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("career_id", "careerId"),
        description="Catalog identifier",
    )
    career_name: str = Field(
        ...,
        validation_alias=AliasChoices("career_name", "careerName"),
        description="Career name, used to join matches back to the catalog",
    )
    bucket: str = Field(..., description="Career category")
    riasec_profile: str = Field(
        default="",
        validation_alias=AliasChoices("riasec_profile", "riasecProfile"),
        description="Trait codes ordered by importance, e.g. 'RIA'",
    )
    primary_subjects: Union[List[Any], str, None] = Field(
        default_factory=list,
        validation_alias=AliasChoices("primary_subjects", "primarySubjects"),
        description="Relevant school subjects, list or JSON-encoded list",
    )
    tags: Union[List[Any], str, None] = Field(
        default_factory=list,
        description="Catalog tags (new_age, tech, hands_on, ...), list or JSON-encoded list",
    )
    min_qualification: Optional[str] = Field(
        default="",
        validation_alias=AliasChoices("min_qualification", "minQualification"),
        description="Minimum qualification, e.g. 'MBBS'",
    )

    # Report content, not used for scoring
    top5_college_courses: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("top5_college_courses", "top5CollegeCourses")
    )
    base_paragraph: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("base_paragraph", "baseParagraph")
    )
    microprojects: Optional[str] = Field(default=None)
    why_fit: Optional[str] = Field(default=None, validation_alias=AliasChoices("why_fit", "whyFit"))

    @property
    def subject_list(self) -> List[Any]:
        """Primary subjects as a list."""
        return parse_string_list(self.primary_subjects)

    @property
    def tag_list(self) -> List[Any]:
        """Tags as a list."""
        return parse_string_list(self.tags)


class ScoringWeights(FrozenSchema):
    """Weights of the four component scores in the final match score."""

    riasec_weight: float = Field(
        default=ScoringDefaults.RIASEC_WEIGHT,
        ge=0.0,
        validation_alias=AliasChoices("riasec_weight", "riasecWeight"),
    )
    subject_weight: float = Field(
        default=ScoringDefaults.SUBJECT_WEIGHT,
        ge=0.0,
        validation_alias=AliasChoices("subject_weight", "subjectWeight"),
    )
    context_weight: float = Field(
        default=ScoringDefaults.CONTEXT_WEIGHT,
        ge=0.0,
        validation_alias=AliasChoices("context_weight", "contextWeight"),
    )
    practical_weight: float = Field(
        default=ScoringDefaults.PRACTICAL_WEIGHT,
        ge=0.0,
        validation_alias=AliasChoices("practical_weight", "practicalWeight"),
    )

    @property
    def total(self) -> float:
        """Sum of all four weights."""
        return self.riasec_weight + self.subject_weight + self.context_weight + self.practical_weight


class StudentContext(BaseSchema):
    """Academic and family context collected by the EduStats test."""

    # Parent careers are matched on their raw first word
    model_config = {**BaseSchema.model_config, "str_strip_whitespace": False}

    grades: Dict[str, float] = Field(
        default_factory=dict, description="Subject -> grade percentage"
    )
    parent_careers: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("parent_careers", "parentCareers"),
    )
    family_preferences: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("family_preferences", "familyPreferences"),
    )
    study_duration_preference: str = Field(
        default="",
        validation_alias=AliasChoices("study_duration_preference", "studyDurationPreference"),
        description="Accepts long study durations: 'Yes' or 'No'",
    )
    work_style_preference: str = Field(
        default="",
        validation_alias=AliasChoices("work_style_preference", "workStylePreference"),
    )
    international_study_preference: str = Field(
        default="",
        validation_alias=AliasChoices(
            "international_study_preference", "internationalStudyPreference", "internationalStudy"
        ),
    )

    @field_validator("grades", mode="before")
    @classmethod
    def drop_empty_grades(cls, value: Any) -> Any:
        """Ignore subjects whose grade was left blank."""
        if isinstance(value, dict):
            return {key: grade for key, grade in value.items() if grade is not None and grade != ""}
        return value


class StudentProfile(StudentContext):
    """Complete ranking input: RIASEC scores plus the EduStats context."""

    riasec_scores: RiasecScores = Field(
        default_factory=RiasecScores,
        validation_alias=AliasChoices("riasec_scores", "riasecScores"),
    )

    @classmethod
    def from_context(cls, riasec_scores: RiasecScores, context: StudentContext) -> "StudentProfile":
        """Combine personality scores with an academic context."""
        return cls(riasec_scores=riasec_scores, **context.model_dump())


class CareerMatch(BaseSchema):
    """Scored career recommendation."""

    career_name: str = Field(..., description="Career name")
    match_score: int = Field(..., ge=0, le=100, description="Final weighted match score")
    top_reasons: List[str] = Field(default_factory=list, description="Why this career matches")
    confidence: ConfidenceLevel = Field(..., description="High, Medium or Low")


class CareerBucket(BaseSchema):
    """Career category with its best matches."""

    bucket_name: str = Field(..., description="Bucket name")
    bucket_score: int = Field(..., ge=0, le=100, description="Rank-weighted bucket score")
    top_careers: List[CareerMatch] = Field(default_factory=list, description="Best matches, descending")


class CareerReport(BaseSchema):
    """Report payload handed to PDF, e-mail and UI rendering."""

    riasec_scores: RiasecScores = Field(..., description="Raw trait accumulators")
    riasec_percentages: Dict[str, int] = Field(..., description="Trait scores as 0-100 percentages")
    riasec_code: str = Field(..., description="Dominant trait code, e.g. 'RIA'")
    top_buckets: List[CareerBucket] = Field(default_factory=list, description="Best buckets, descending")
    career_matches: List[CareerMatch] = Field(default_factory=list, description="Every career, ranked")
    weights: ScoringWeights = Field(..., description="Weights used for this report")
