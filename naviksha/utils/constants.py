"""Constants and enums for the Naviksha career match engine.

This module defines the RIASEC dimensions, question types, catalog tags and
the rule tables the scoring engine reads. Tables are immutable (tuples and
read-only mappings) so that they can be shared safely between services.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


# ============================================================================
# CORE ENUMS
# ============================================================================

class RiasecDimension(str, Enum):
    """RIASEC personality dimensions."""

    REALISTIC = "R"
    INVESTIGATIVE = "I"
    ARTISTIC = "A"
    SOCIAL = "S"
    ENTERPRISING = "E"
    CONVENTIONAL = "C"

    @property
    def name_full(self) -> str:
        """Get full name of the dimension."""
        return RIASEC_DIMENSION_NAMES[self]

    @property
    def description(self) -> str:
        """Get description of the dimension."""
        return RIASEC_DIMENSION_DESCRIPTIONS[self]

    @classmethod
    def from_code(cls, code: str) -> "RiasecDimension":
        """Get dimension from single character code.

        Args:
            code: Single character code (R, I, A, S, E, C)

        Returns:
            RiasecDimension: Corresponding dimension

        Raises:
            ValueError: If code is invalid
        """
        code = code.upper()
        for dim in cls:
            if dim.value == code:
                return dim
        raise ValueError(f"Invalid RIASEC code: {code}")


class QuestionType(str, Enum):
    """Types of questions in the VIBEMatch and EduStats assessments."""

    LIKERT = "likert"  # 0-3 agreement scale, feeds RIASEC
    SINGLE = "single"  # Single choice selection
    MULTI = "multi"  # Multiple choice selection
    SUBJECTIVE = "subjective"  # Open-ended text
    NUMERIC_GRID = "numeric-grid"  # Subject -> grade percentage grid


class AnswerKind(str, Enum):
    """Shape of the value held by a test answer."""

    NUMERIC = "numeric"
    TEXT = "text"
    CHOICES = "choices"
    GRID = "grid"
    EMPTY = "empty"


class ConfidenceLevel(str, Enum):
    """Confidence tier attached to a career match."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class CareerTag(str, Enum):
    """Catalog tags the scoring rules react to."""

    NEW_AGE = "new_age"
    TECH = "tech"
    HANDS_ON = "hands_on"


# ============================================================================
# RIASEC TABLES
# ============================================================================

RIASEC_CODES: Tuple[str, ...] = ("R", "I", "A", "S", "E", "C")

RIASEC_DIMENSION_NAMES: Mapping[RiasecDimension, str] = MappingProxyType({
    RiasecDimension.REALISTIC: "Realistic",
    RiasecDimension.INVESTIGATIVE: "Investigative",
    RiasecDimension.ARTISTIC: "Artistic",
    RiasecDimension.SOCIAL: "Social",
    RiasecDimension.ENTERPRISING: "Enterprising",
    RiasecDimension.CONVENTIONAL: "Conventional",
})

RIASEC_DIMENSION_DESCRIPTIONS: Mapping[RiasecDimension, str] = MappingProxyType({
    RiasecDimension.REALISTIC: "Practical, hands-on problem solver",
    RiasecDimension.INVESTIGATIVE: "Analytical, research-oriented thinker",
    RiasecDimension.ARTISTIC: "Creative, innovative, expressive",
    RiasecDimension.SOCIAL: "Helpful, collaborative, people-focused",
    RiasecDimension.ENTERPRISING: "Leadership, persuasive, goal-driven",
    RiasecDimension.CONVENTIONAL: "Organized, detail-oriented, systematic",
})

# 14 Likert questions x 3 points
DEFAULT_RIASEC_MAX_SCORE: float = 42.0


# ============================================================================
# SCORING DEFAULTS
# ============================================================================

class ScoringDefaults:
    """Default scoring weights and score constants."""

    RIASEC_WEIGHT = 0.4
    SUBJECT_WEIGHT = 0.3
    CONTEXT_WEIGHT = 0.2
    PRACTICAL_WEIGHT = 0.1

    MIN_SCORE = 0
    MAX_SCORE = 100

    # Subject match fallbacks
    NEUTRAL_SUBJECT_SCORE = 50
    NO_OVERLAP_SUBJECT_SCORE = 30

    # Base value for context and practical fit
    BASE_FIT_SCORE = 50

    MAX_MATCH_REASONS = 3
    BUCKET_TOP_CAREERS = 5
    REPORT_TOP_BUCKETS = 5
    RIASEC_CODE_LENGTH = 3


# (minimum average grade, subject match score), checked top-down
SUBJECT_SCORE_STEPS: Tuple[Tuple[float, int], ...] = (
    (85, 95),
    (75, 80),
    (65, 65),
    (50, 50),
)

# (minimum final score, confidence), checked top-down
CONFIDENCE_THRESHOLDS: Tuple[Tuple[int, ConfidenceLevel], ...] = (
    (80, ConfidenceLevel.HIGH),
    (60, ConfidenceLevel.MEDIUM),
)


# ============================================================================
# RULE TABLES
# ============================================================================

LONG_DURATION_QUALIFICATIONS: Tuple[str, ...] = ("MBBS", "B.Arch", "LLB")

TRADITIONAL_BUCKET_KEYWORDS: Tuple[str, ...] = ("Engineering", "Medicine", "Finance")


class PreferenceOptions:
    """Answer option strings the context and practical rules compare against."""

    YES = "Yes"
    NO = "No"

    IT_PARENT_CAREER = "IT / Software"
    HIGHLY_ENCOURAGED = "Highly encouraged"
    NOT_PREFERRED = "Not preferred"

    REMOTE_FLEXIBLE = "Remote / Flexible"
    FIELD_ON_SITE = "Field work / On-site"


class ContextAdjustments:
    """Point adjustments applied by the context fit rules."""

    PARENT_KEYWORD_BONUS = 10
    NEW_AGE_ENCOURAGED_BONUS = 15
    NEW_AGE_REJECTED_PENALTY = -20
    TRADITIONAL_BONUS = 10


class PracticalAdjustments:
    """Point adjustments applied by the practical fit rules."""

    LONG_DURATION_ACCEPTED = 20
    LONG_DURATION_REJECTED = -25
    REMOTE_TECH_BONUS = 15
    FIELD_HANDS_ON_BONUS = 15
    INTERNATIONAL_NEW_AGE_BONUS = 10


class ReasonThresholds:
    """Component score thresholds that produce a match reason."""

    RIASEC = 70
    SUBJECT = 75
    CONTEXT = 70
    PRACTICAL = 70


class MatchReasons:
    """Human-readable match reason templates."""

    RIASEC = "Strong personality fit ({score}%) - your interests align well with this career"
    SUBJECT = "Excellent academic performance in relevant subjects"
    CONTEXT = "Good fit with your family background and expectations"
    PRACTICAL = "Matches your practical preferences for study duration and work style"
    NEW_AGE = "Emerging field with growing opportunities"
    HANDS_ON = "Involves practical, hands-on work you seem to enjoy"


# ============================================================================
# CATALOG
# ============================================================================

# Columns of the career_mappings.csv catalog export read by scoring
CATALOG_SCORING_COLUMNS: Tuple[str, ...] = (
    "career_id",
    "career_name",
    "bucket",
    "riasec_profile",
    "primary_subjects",
    "tags",
    "min_qualification",
)

CATALOG_CSV_COLUMNS: Tuple[str, ...] = CATALOG_SCORING_COLUMNS + (
    "top5_college_courses",
    "base_paragraph",
    "microprojects",
    "why_fit",
)
