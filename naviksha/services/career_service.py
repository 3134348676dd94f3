"""Career ranking service.

This service scores every career of the catalog for a student, explains
each match with short reasons and a confidence tier, and groups the ranked
list into career buckets.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from naviksha.schemas.career_schemas import (
    Career,
    CareerBucket,
    CareerMatch,
    ScoringWeights,
    StudentProfile,
)
from naviksha.services.scoring_service import ScoringService
from naviksha.utils.constants import (
    CONFIDENCE_THRESHOLDS,
    CareerTag,
    ConfidenceLevel,
    MatchReasons,
    ReasonThresholds,
    ScoringDefaults,
)
from naviksha.utils.helpers import calculate_weighted_average, harmonic_weight, round_half_up
from naviksha.utils.logger import get_ranking_logger

logger = get_ranking_logger()


def get_confidence_level(score: int) -> ConfidenceLevel:
    """Get confidence tier for a final match score.

    Args:
        score: Final match score

    Returns:
        ConfidenceLevel: High (>= 80), Medium (>= 60) or Low
    """
    for threshold, level in CONFIDENCE_THRESHOLDS:
        if score >= threshold:
            return level
    return ConfidenceLevel.LOW


def generate_match_reasons(
    riasec_match: int,
    subject_match: int,
    context_fit: int,
    practical_fit: int,
    tags: Sequence[Any],
    max_reasons: int = ScoringDefaults.MAX_MATCH_REASONS
) -> List[str]:
    """Generate human-readable reasons for a career match.

    Rules are checked in a fixed order and the first max_reasons produced
    are kept, whatever the magnitude of the scores behind them.

    Args:
        riasec_match: Personality fit
        subject_match: Academic fit
        context_fit: Family context fit
        practical_fit: Practical preference fit
        tags: Parsed career tags
        max_reasons: Number of reasons kept

    Returns:
        List[str]: Match reasons in rule order
    """
    reasons: List[str] = []

    if riasec_match >= ReasonThresholds.RIASEC:
        reasons.append(MatchReasons.RIASEC.format(score=riasec_match))

    if subject_match >= ReasonThresholds.SUBJECT:
        reasons.append(MatchReasons.SUBJECT)

    if context_fit >= ReasonThresholds.CONTEXT:
        reasons.append(MatchReasons.CONTEXT)

    if practical_fit >= ReasonThresholds.PRACTICAL:
        reasons.append(MatchReasons.PRACTICAL)

    if CareerTag.NEW_AGE.value in tags:
        reasons.append(MatchReasons.NEW_AGE)

    if CareerTag.HANDS_ON.value in tags:
        reasons.append(MatchReasons.HANDS_ON)

    return reasons[:max_reasons]


class CareerRankingService:
    """Service ranking the career catalog for a student."""

    def __init__(
        self,
        scoring_service: Optional[ScoringService] = None,
        max_reasons: int = ScoringDefaults.MAX_MATCH_REASONS,
        bucket_top_careers: int = ScoringDefaults.BUCKET_TOP_CAREERS
    ):
        """Initialize career ranking service.

        Args:
            scoring_service: Component fit calculator (defaults to ScoringService())
            max_reasons: Reasons kept per career
            bucket_top_careers: Careers kept per bucket and used for its score
        """
        self.scoring_service = scoring_service or ScoringService()
        self.max_reasons = max_reasons
        self.bucket_top_careers = bucket_top_careers

    def score_career(
        self,
        student: StudentProfile,
        career: Career,
        weights: Optional[ScoringWeights] = None
    ) -> CareerMatch:
        """Score a single career for a student.

        Args:
            student: Student profile
            career: Catalog record
            weights: Component weights

        Returns:
            CareerMatch: Scored match with reasons and confidence
        """
        subjects = career.subject_list
        tags = career.tag_list

        components = self.scoring_service.component_scores(
            student,
            riasec_profile=career.riasec_profile,
            bucket=career.bucket,
            qualification=career.min_qualification or "",
            subjects=subjects,
            tags=tags,
        )
        final_score = self.scoring_service.final_score(
            components["riasec"],
            components["subject"],
            components["context"],
            components["practical"],
            weights,
        )

        logger.debug(
            f"Scored career {career.career_name}",
            extra={"career_name": career.career_name, "components": components, "final_score": final_score}
        )

        return CareerMatch(
            career_name=career.career_name,
            match_score=final_score,
            top_reasons=generate_match_reasons(
                components["riasec"],
                components["subject"],
                components["context"],
                components["practical"],
                tags,
                self.max_reasons,
            ),
            confidence=get_confidence_level(final_score),
        )

    def rank_careers(
        self,
        student: Union[StudentProfile, Mapping[str, Any]],
        careers: Iterable[Union[Career, Mapping[str, Any]]],
        weights: Optional[ScoringWeights] = None
    ) -> List[CareerMatch]:
        """Score every career and sort the matches by descending score.

        Careers with equal scores keep their catalog order.

        Args:
            student: Student profile
            careers: Career catalog
            weights: Component weights (defaults to the configured weights)

        Returns:
            List[CareerMatch]: Ranked matches
        """
        student = student if isinstance(student, StudentProfile) else StudentProfile.model_validate(student)
        careers = _as_careers(careers)

        matches = [self.score_career(student, career, weights) for career in careers]
        ranked = sorted(matches, key=lambda match: match.match_score, reverse=True)

        logger.info(
            "Ranked careers",
            extra={
                "career_count": len(ranked),
                "top_career": ranked[0].career_name if ranked else None,
                "top_score": ranked[0].match_score if ranked else None,
            }
        )
        return ranked

    def group_by_buckets(
        self,
        ranked_careers: Iterable[CareerMatch],
        careers: Iterable[Union[Career, Mapping[str, Any]]]
    ) -> List[CareerBucket]:
        """Group ranked matches into buckets ordered by bucket score.

        A match joins the bucket of the first catalog career with the same
        name; matches with no catalog career are dropped. The bucket score
        is the harmonic rank-weighted average of its best matches.

        Args:
            ranked_careers: Career matches
            careers: Career catalog

        Returns:
            List[CareerBucket]: Buckets sorted by descending score
        """
        bucket_by_career: Dict[str, str] = {}
        for career in _as_careers(careers):
            bucket_by_career.setdefault(career.career_name, career.bucket)

        grouped: Dict[str, List[CareerMatch]] = {}
        for match in ranked_careers:
            bucket_name = bucket_by_career.get(match.career_name)
            if bucket_name is None:
                logger.warning(
                    f"No catalog career named {match.career_name}, match left out of buckets",
                    extra={"career_name": match.career_name}
                )
                continue
            grouped.setdefault(bucket_name, []).append(match)

        buckets = []
        for bucket_name, matches in grouped.items():
            top_careers = sorted(matches, key=lambda match: match.match_score, reverse=True)
            top_careers = top_careers[:self.bucket_top_careers]

            average = calculate_weighted_average(
                (match.match_score, harmonic_weight(index))
                for index, match in enumerate(top_careers)
            )
            buckets.append(CareerBucket(
                bucket_name=bucket_name,
                bucket_score=round_half_up(average),
                top_careers=top_careers,
            ))

        return sorted(buckets, key=lambda bucket: bucket.bucket_score, reverse=True)


def _as_careers(careers: Iterable[Union[Career, Mapping[str, Any]]]) -> List[Career]:
    return [
        career if isinstance(career, Career) else Career.model_validate(career)
        for career in careers
    ]
