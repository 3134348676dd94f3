"""Scoring service for the career match engine.

This service turns raw VIBEMatch answers into RIASEC trait scores and
computes the four component fits of a student against a single career:
personality (RIASEC match), academic subjects, family context and practical
preferences. It also combines the four fits into the final match score.

All operations are pure: they never raise on malformed answer or catalog
content and every score they return lies in [0, 100].
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from naviksha.schemas.assessment_schemas import Question, RiasecScores, TestAnswer
from naviksha.schemas.career_schemas import ScoringWeights
from naviksha.utils.constants import (
    DEFAULT_RIASEC_MAX_SCORE,
    LONG_DURATION_QUALIFICATIONS,
    RIASEC_CODES,
    SUBJECT_SCORE_STEPS,
    TRADITIONAL_BUCKET_KEYWORDS,
    CareerTag,
    ContextAdjustments,
    PracticalAdjustments,
    PreferenceOptions,
    ScoringDefaults,
)
from naviksha.utils.helpers import clamp_score, harmonic_weight, is_number, round_half_up
from naviksha.utils.logger import get_scoring_logger

logger = get_scoring_logger()


@dataclass(frozen=True)
class ScoringRules:
    """Rule tables read by the fit calculators.

    Defaults mirror the production tables; tests and alternate catalogs can
    substitute their own.
    """

    riasec_max_score: float = DEFAULT_RIASEC_MAX_SCORE
    long_duration_qualifications: Tuple[str, ...] = LONG_DURATION_QUALIFICATIONS
    traditional_bucket_keywords: Tuple[str, ...] = TRADITIONAL_BUCKET_KEYWORDS
    subject_score_steps: Tuple[Tuple[float, int], ...] = SUBJECT_SCORE_STEPS
    neutral_subject_score: int = ScoringDefaults.NEUTRAL_SUBJECT_SCORE
    no_overlap_subject_score: int = ScoringDefaults.NO_OVERLAP_SUBJECT_SCORE
    base_fit_score: int = ScoringDefaults.BASE_FIT_SCORE
    default_weights: ScoringWeights = field(default_factory=ScoringWeights)


class ScoringService:
    """Service for RIASEC scoring and per-career component fits."""

    def __init__(self, rules: Optional[ScoringRules] = None):
        """Initialize scoring service.

        Args:
            rules: Rule tables (defaults to the production tables)
        """
        self.rules = rules or ScoringRules()

    # RIASEC scoring

    def compute_riasec_scores(
        self,
        answers: Iterable[Union[TestAnswer, Mapping[str, Any]]],
        questions: Iterable[Union[Question, Mapping[str, Any]]]
    ) -> RiasecScores:
        """Aggregate Likert answers into the six RIASEC trait scores.

        Answers whose question is unknown or carries no riasec_map do not
        feed RIASEC and are skipped. Non-numeric answers count as 0. One
        answer per question is expected; duplicates are all counted.

        Args:
            answers: Submitted answers
            questions: Question bank entries

        Returns:
            RiasecScores: Raw trait accumulators
        """
        question_index: Dict[str, Question] = {}
        for question in questions:
            question = question if isinstance(question, Question) else Question.model_validate(question)
            question_index.setdefault(question.id, question)

        totals = {code: 0.0 for code in RIASEC_CODES}
        skipped = 0

        for answer in answers:
            answer = answer if isinstance(answer, TestAnswer) else TestAnswer.model_validate(answer)
            question = question_index.get(answer.question_id)
            if question is None or not question.riasec_map:
                skipped += 1
                continue

            value = answer.numeric_value
            for dimension, weight in question.riasec_map.items():
                if dimension in totals:
                    totals[dimension] += value * weight

        logger.debug(
            "Computed RIASEC scores",
            extra={"riasec_scores": totals, "skipped_answers": skipped}
        )
        return RiasecScores(**totals)

    # Component fits

    def subject_match(
        self,
        grades: Mapping[str, float],
        career_subjects: Sequence[Any]
    ) -> int:
        """Score the student's grades in the career's primary subjects.

        Args:
            grades: Subject -> grade percentage
            career_subjects: Subjects relevant to the career

        Returns:
            int: 50 when the career lists no subjects, 30 when none of them
                has a grade, otherwise a step score of the average grade
        """
        if not career_subjects:
            return self.rules.neutral_subject_score

        matched = [
            grades[subject]
            for subject in career_subjects
            if isinstance(subject, str) and is_number(grades.get(subject))
        ]
        if not matched:
            return self.rules.no_overlap_subject_score

        average = sum(matched) / len(matched)
        for threshold, score in self.rules.subject_score_steps:
            if average >= threshold:
                return score
        return self.rules.no_overlap_subject_score

    def context_fit(
        self,
        parent_careers: Sequence[str],
        family_preferences: Sequence[str],
        career_bucket: str,
        career_tags: Sequence[Any]
    ) -> int:
        """Score how well a career fits the family background.

        Every rule applies independently:

        1. +10 when the first word of a parent career appears in the bucket
           name (case-insensitive substring).
        2. For new-age careers, +15 when a parent works in IT or the family
           highly encourages new careers, otherwise -20 when the family does
           not prefer them.
        3. +10 for traditional buckets (Engineering, Medicine, Finance).

        Args:
            parent_careers: Parent career options selected
            family_preferences: Family attitude options selected
            career_bucket: Career category
            career_tags: Career catalog tags

        Returns:
            int: Context fit in [0, 100]
        """
        score = self.rules.base_fit_score
        bucket = career_bucket or ""
        bucket_lower = bucket.lower()

        if any(parent.lower().split(" ")[0] in bucket_lower for parent in parent_careers):
            score += ContextAdjustments.PARENT_KEYWORD_BONUS

        if CareerTag.NEW_AGE.value in career_tags:
            if (PreferenceOptions.IT_PARENT_CAREER in parent_careers
                    or PreferenceOptions.HIGHLY_ENCOURAGED in family_preferences):
                score += ContextAdjustments.NEW_AGE_ENCOURAGED_BONUS
            elif PreferenceOptions.NOT_PREFERRED in family_preferences:
                score += ContextAdjustments.NEW_AGE_REJECTED_PENALTY

        if any(keyword in bucket for keyword in self.rules.traditional_bucket_keywords):
            score += ContextAdjustments.TRADITIONAL_BONUS

        return int(clamp_score(score))

    def practical_fit(
        self,
        study_duration_preference: str,
        work_style_preference: str,
        international_study_preference: str,
        career_qualification: str,
        career_tags: Sequence[Any]
    ) -> int:
        """Score a career against the student's practical preferences.

        Args:
            study_duration_preference: 'Yes' / 'No' to long study durations
            work_style_preference: Preferred work style option
            international_study_preference: 'Yes' / 'No' to studying abroad
            career_qualification: Minimum qualification of the career
            career_tags: Career catalog tags

        Returns:
            int: Practical fit in [0, 100]
        """
        score = self.rules.base_fit_score
        qualification = career_qualification or ""

        is_long_duration = any(
            degree in qualification for degree in self.rules.long_duration_qualifications
        )
        if is_long_duration:
            if study_duration_preference == PreferenceOptions.YES:
                score += PracticalAdjustments.LONG_DURATION_ACCEPTED
            elif study_duration_preference == PreferenceOptions.NO:
                score += PracticalAdjustments.LONG_DURATION_REJECTED

        if (work_style_preference == PreferenceOptions.REMOTE_FLEXIBLE
                and CareerTag.TECH.value in career_tags):
            score += PracticalAdjustments.REMOTE_TECH_BONUS

        if (work_style_preference == PreferenceOptions.FIELD_ON_SITE
                and CareerTag.HANDS_ON.value in career_tags):
            score += PracticalAdjustments.FIELD_HANDS_ON_BONUS

        if (international_study_preference == PreferenceOptions.YES
                and CareerTag.NEW_AGE.value in career_tags):
            score += PracticalAdjustments.INTERNATIONAL_NEW_AGE_BONUS

        return int(clamp_score(score))

    def riasec_match(
        self,
        student_scores: Union[RiasecScores, Mapping[str, float]],
        career_riasec_profile: str
    ) -> int:
        """Score the student's traits against a career's RIASEC profile.

        Profile letters are ordered by importance; the letter at position i
        weighs 1/(i+1). Each trait is normalized against riasec_max_score.
        Unknown letters are ignored but still take up their position.

        Args:
            student_scores: Raw trait accumulators
            career_riasec_profile: Ordered trait codes, e.g. 'RIA'

        Returns:
            int: RIASEC match in [0, 100], 0 for an empty profile
        """
        scores = RiasecScores.coerce(student_scores)
        max_score = self.rules.riasec_max_score

        total_match = 0.0
        total_possible = 0.0

        for index, dimension in enumerate(career_riasec_profile or ""):
            if dimension not in scores:
                continue
            weight = harmonic_weight(index)
            normalized = scores.get(dimension) / max_score * 100
            total_match += normalized * weight
            total_possible += 100 * weight

        if total_possible <= 0:
            return 0

        return round_half_up(clamp_score(total_match / total_possible * 100))

    # Combination

    def final_score(
        self,
        riasec_match: float,
        subject_match: float,
        context_fit: float,
        practical_fit: float,
        weights: Optional[ScoringWeights] = None
    ) -> int:
        """Combine the four component scores into the final match score.

        Args:
            riasec_match: Personality fit
            subject_match: Academic fit
            context_fit: Family context fit
            practical_fit: Practical preference fit
            weights: Component weights (defaults to the configured weights)

        Returns:
            int: Final match score in [0, 100]
        """
        if weights is None:
            weights = self.rules.default_weights

        combined = (
            riasec_match * weights.riasec_weight
            + subject_match * weights.subject_weight
            + context_fit * weights.context_weight
            + practical_fit * weights.practical_weight
        )
        return round_half_up(clamp_score(combined))

    def component_scores(
        self,
        student: Any,
        riasec_profile: str,
        bucket: str,
        qualification: str,
        subjects: List[Any],
        tags: List[Any]
    ) -> Dict[str, int]:
        """Compute all four component fits of a student for one career.

        Args:
            student: StudentProfile
            riasec_profile: Career RIASEC profile
            bucket: Career bucket
            qualification: Career minimum qualification
            subjects: Parsed career subjects
            tags: Parsed career tags

        Returns:
            Dict[str, int]: riasec, subject, context and practical scores
        """
        return {
            "riasec": self.riasec_match(student.riasec_scores, riasec_profile),
            "subject": self.subject_match(student.grades, subjects),
            "context": self.context_fit(
                student.parent_careers,
                student.family_preferences,
                bucket,
                tags,
            ),
            "practical": self.practical_fit(
                student.study_duration_preference,
                student.work_style_preference,
                student.international_study_preference,
                qualification,
                tags,
            ),
        }
