"""Report service for career recommendations.

This service runs the complete pipeline from raw test answers to the
report payload: RIASEC scoring of the VIBEMatch answers, extraction of the
academic context from the EduStats answers, ranking of the career catalog
and grouping into the top buckets.
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from naviksha.core.config import Settings, get_settings
from naviksha.schemas.assessment_schemas import Question, RiasecScores, TestAnswer
from naviksha.schemas.career_schemas import (
    Career,
    CareerReport,
    ScoringWeights,
    StudentContext,
    StudentProfile,
)
from naviksha.services.career_service import CareerRankingService
from naviksha.services.scoring_service import ScoringRules, ScoringService
from naviksha.utils.constants import AnswerKind
from naviksha.utils.exceptions import ReportGenerationError, ValidationError
from naviksha.utils.helpers import get_riasec_code, riasec_percentages
from naviksha.utils.logger import PerformanceLogger, get_report_logger

logger = get_report_logger()


class ReportService:
    """Service building career reports from assessment answers."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        scoring_service: Optional[ScoringService] = None,
        ranking_service: Optional[CareerRankingService] = None
    ):
        """Initialize report service.

        Args:
            settings: Application settings (defaults to get_settings())
            scoring_service: RIASEC and fit scorer (built from settings)
            ranking_service: Career ranker (built from settings)
        """
        self.settings = settings or get_settings()
        self.default_weights = self.settings.get_scoring_weights()

        self.scoring_service = scoring_service or ScoringService(
            ScoringRules(
                riasec_max_score=self.settings.RIASEC_MAX_SCORE,
                default_weights=self.default_weights,
            )
        )
        self.ranking_service = ranking_service or CareerRankingService(
            self.scoring_service,
            max_reasons=self.settings.MAX_MATCH_REASONS,
            bucket_top_careers=self.settings.BUCKET_TOP_CAREERS,
        )

    def build_student_context(
        self,
        edu_answers: Iterable[Union[TestAnswer, Mapping[str, Any]]]
    ) -> StudentContext:
        """Extract the academic and family context from EduStats answers.

        Answers are matched to context fields by the question ids configured
        in settings. Missing or mismatched answers leave the field empty.

        Args:
            edu_answers: EduStats answers

        Returns:
            StudentContext: Extracted context
        """
        answers = {}
        for answer in edu_answers:
            answer = answer if isinstance(answer, TestAnswer) else TestAnswer.model_validate(answer)
            answers[answer.question_id] = answer

        def get(question_id: str) -> TestAnswer:
            return answers.get(question_id) or TestAnswer(question_id=question_id)

        grades_answer = get(self.settings.EDU_GRADES_QUESTION_ID)
        if grades_answer.kind not in (AnswerKind.GRID, AnswerKind.EMPTY):
            logger.warning(
                "Grades answer is not a numeric grid, ignoring it",
                extra={"question_id": grades_answer.question_id, "answer_kind": grades_answer.kind.value}
            )

        return StudentContext(
            grades=grades_answer.grid_values,
            parent_careers=get(self.settings.EDU_PARENT_CAREERS_QUESTION_ID).choices,
            family_preferences=get(self.settings.EDU_FAMILY_PREFERENCES_QUESTION_ID).choices,
            study_duration_preference=get(self.settings.EDU_STUDY_DURATION_QUESTION_ID).text_value,
            work_style_preference=get(self.settings.EDU_WORK_STYLE_QUESTION_ID).text_value,
            international_study_preference=get(self.settings.EDU_INTERNATIONAL_STUDY_QUESTION_ID).text_value,
        )

    def generate_report(
        self,
        vibe_answers: Iterable[Union[TestAnswer, Mapping[str, Any]]],
        questions: Iterable[Union[Question, Mapping[str, Any]]],
        context: Union[StudentContext, Mapping[str, Any]],
        careers: Iterable[Union[Career, Mapping[str, Any]]],
        weights: Optional[ScoringWeights] = None
    ) -> CareerReport:
        """Generate the full career report for a student.

        Args:
            vibe_answers: VIBEMatch answers
            questions: Question bank entries
            context: Academic and family context
            careers: Career catalog
            weights: Component weights (defaults to the configured weights)

        Returns:
            CareerReport: Report payload

        Raises:
            ValidationError: If the context cannot be validated
            ReportGenerationError: If the pipeline fails unexpectedly
        """
        weights = weights if weights is not None else self.default_weights
        context = _as_context(context)
        careers = list(careers)

        with PerformanceLogger("generate_report", logger, {"career_count": len(careers)}):
            stage = "riasec_scoring"
            try:
                riasec_scores = self.scoring_service.compute_riasec_scores(vibe_answers, questions)

                stage = "ranking"
                student = StudentProfile.from_context(riasec_scores, context)
                ranked = self.ranking_service.rank_careers(student, careers, weights)

                stage = "bucketing"
                buckets = self.ranking_service.group_by_buckets(ranked, careers)
            except Exception as e:
                logger.error(
                    f"Report generation failed during {stage}",
                    extra={"stage": stage, "error": str(e)}
                )
                raise ReportGenerationError(
                    f"Report generation failed: {str(e)}", stage=stage, cause=e
                ) from e

        report = CareerReport(
            riasec_scores=riasec_scores,
            riasec_percentages=self.percentages(riasec_scores),
            riasec_code=get_riasec_code(riasec_scores.to_dict()),
            top_buckets=buckets[:self.settings.REPORT_TOP_BUCKETS],
            career_matches=ranked,
            weights=weights,
        )

        logger.info(
            "Career report generated",
            extra={
                "riasec_code": report.riasec_code,
                "bucket_count": len(buckets),
                "top_bucket": buckets[0].bucket_name if buckets else None,
            }
        )
        return report

    def generate_report_from_answers(
        self,
        vibe_answers: Iterable[Union[TestAnswer, Mapping[str, Any]]],
        edu_answers: Iterable[Union[TestAnswer, Mapping[str, Any]]],
        questions: Iterable[Union[Question, Mapping[str, Any]]],
        careers: Iterable[Union[Career, Mapping[str, Any]]],
        weights: Optional[ScoringWeights] = None
    ) -> CareerReport:
        """Generate a report straight from both tests' answers."""
        context = self.build_student_context(edu_answers)
        return self.generate_report(vibe_answers, questions, context, careers, weights)

    def percentages(self, riasec_scores: RiasecScores) -> Dict[str, int]:
        """RIASEC scores as 0-100 percentages of the maximum achievable score."""
        return riasec_percentages(riasec_scores.to_dict(), self.settings.RIASEC_MAX_SCORE)


def _as_context(context: Union[StudentContext, Mapping[str, Any]]) -> StudentContext:
    if isinstance(context, StudentContext):
        return context
    try:
        return StudentContext.model_validate(context)
    except PydanticValidationError as e:
        raise ValidationError(
            "Invalid student context",
            field="context",
            validation_errors=[error["msg"] for error in e.errors()],
            cause=e,
        ) from e
