"""Assessment schemas for the VIBEMatch and EduStats tests.

This module defines the question metadata, the polymorphic answer record
produced by the assessment UI, and the six-trait RIASEC score vector.
"""

from datetime import datetime
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from pydantic import AliasChoices, Field

from naviksha.schemas.base import BaseSchema, FrozenSchema
from naviksha.utils.constants import RIASEC_CODES, AnswerKind, QuestionType
from naviksha.utils.helpers import is_number

# bool first so that True/False are not coerced into Likert numbers
AnswerValue = Union[bool, int, float, str, List[Any], Dict[str, Any]]


class Question(BaseSchema):
    """Question metadata, owned by the question bank."""

    id: str = Field(..., description="Question identifier")
    type: QuestionType = Field(default=QuestionType.LIKERT, description="Question type")
    text: Optional[str] = Field(default=None, description="Question text")
    required: bool = Field(default=False, description="Whether an answer is mandatory")
    options: Optional[List[str]] = Field(default=None, description="Choice options")
    instruction: Optional[str] = Field(default=None, description="Answering instruction")
    riasec_map: Optional[Dict[str, float]] = Field(
        default=None,
        validation_alias=AliasChoices("riasec_map", "riasecMap"),
        description="RIASEC trait -> weight, present on questions that feed RIASEC scoring",
    )


class TestAnswer(BaseSchema):
    """A single answer submitted by the assessment UI.

    The answer value is a tagged variant whose shape depends on the question
    type: a Likert number, a single choice string, a list of selected
    choices, or a subject -> grade grid.
    """

    __test__ = False  # not a pytest test class

    # Option strings are compared verbatim by the scoring rules
    model_config = {**BaseSchema.model_config, "str_strip_whitespace": False}

    question_id: str = Field(
        ...,
        validation_alias=AliasChoices("question_id", "questionId"),
        description="Answered question id",
    )
    answer: Optional[AnswerValue] = Field(default=None, description="Answer value")
    timestamp: Optional[datetime] = Field(default=None, description="Submission time")

    @property
    def kind(self) -> AnswerKind:
        """Variant tag of the held answer value."""
        value = self.answer
        if is_number(value):
            return AnswerKind.NUMERIC
        if isinstance(value, str):
            return AnswerKind.TEXT if value else AnswerKind.EMPTY
        if isinstance(value, list):
            return AnswerKind.CHOICES
        if isinstance(value, dict):
            return AnswerKind.GRID
        return AnswerKind.EMPTY

    @property
    def numeric_value(self) -> float:
        """Likert value of the answer; any non-numeric answer counts as 0."""
        return self.answer if self.kind == AnswerKind.NUMERIC else 0

    @property
    def choices(self) -> List[str]:
        """Selected options; a single choice becomes a one-element list."""
        if self.kind == AnswerKind.CHOICES:
            return [str(item) for item in self.answer]
        if self.kind == AnswerKind.TEXT:
            return [self.answer]
        return []

    @property
    def text_value(self) -> str:
        """Single choice or free text value, empty for other variants."""
        return self.answer if self.kind == AnswerKind.TEXT else ""

    @property
    def grid_values(self) -> Dict[str, float]:
        """Numeric entries of a grid answer; non-numeric cells are dropped."""
        if self.kind != AnswerKind.GRID:
            return {}
        return {str(key): value for key, value in self.answer.items() if is_number(value)}


class RiasecScores(FrozenSchema):
    """Raw RIASEC trait accumulators.

    Accumulators are unbounded and may go negative when question weights
    are negative; they are normalized only when compared to a career.
    """

    R: float = Field(default=0.0, description="Realistic")
    I: float = Field(default=0.0, description="Investigative")  # noqa: E741
    A: float = Field(default=0.0, description="Artistic")
    S: float = Field(default=0.0, description="Social")
    E: float = Field(default=0.0, description="Enterprising")
    C: float = Field(default=0.0, description="Conventional")

    @classmethod
    def coerce(cls, value: Union["RiasecScores", Mapping[str, float]]) -> "RiasecScores":
        """Accept either a RiasecScores instance or a plain trait mapping."""
        if isinstance(value, cls):
            return value
        return cls(**{code: value[code] for code in RIASEC_CODES if code in value})

    def get(self, code: str, default: float = 0.0) -> float:
        """Get the accumulator for a trait code."""
        if code in RIASEC_CODES:
            return getattr(self, code)
        return default

    def __contains__(self, code: object) -> bool:
        return code in RIASEC_CODES

    def items(self) -> Iterator[Tuple[str, float]]:
        """Iterate (code, score) pairs in R-I-A-S-E-C order."""
        return ((code, getattr(self, code)) for code in RIASEC_CODES)

    def to_dict(self) -> Dict[str, float]:
        """Plain trait mapping in R-I-A-S-E-C order."""
        return dict(self.items())
