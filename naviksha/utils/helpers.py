"""Helper utilities for the Naviksha career match engine.

This module provides the small numeric and parsing utilities shared by the
scoring, ranking and report services.
"""

import json
import math
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from naviksha.utils.constants import RIASEC_CODES, RiasecDimension, ScoringDefaults


# Numeric utilities

def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded up.

    Python's built-in round() uses banker's rounding, so 62.5 would become
    62. Scores are rounded the conventional way instead.

    Args:
        value: Value to round

    Returns:
        int: Rounded value
    """
    return int(math.floor(value + 0.5))


def clamp_score(
    value: float,
    min_score: float = ScoringDefaults.MIN_SCORE,
    max_score: float = ScoringDefaults.MAX_SCORE
) -> float:
    """Clamp a score into [min_score, max_score].

    NaN collapses to min_score.

    Args:
        value: Raw score
        min_score: Lower bound
        max_score: Upper bound

    Returns:
        float: Clamped score
    """
    if math.isnan(value):
        return min_score
    return max(min_score, min(max_score, value))


def harmonic_weight(position: int) -> float:
    """Weight of a 0-based position under harmonic decay: 1, 1/2, 1/3, ..."""
    return 1.0 / (position + 1)


def calculate_weighted_average(
    values: Iterable[Tuple[float, float]]
) -> float:
    """Calculate weighted average.

    Args:
        values: (value, weight) tuples

    Returns:
        float: Weighted average, 0.0 when the total weight is zero
    """
    values = list(values)
    total_weight = sum(weight for _, weight in values)
    if total_weight == 0:
        return 0.0

    weighted_sum = sum(value * weight for value, weight in values)
    return weighted_sum / total_weight


def is_number(value: Any) -> bool:
    """Check for a real int/float value; booleans do not count."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# Parsing utilities

def parse_string_list(value: Any) -> List[Any]:
    """Parse a list that may arrive natively or JSON-encoded.

    Catalog records store subjects and tags either as a list or as a JSON
    string such as '["tech", "new_age"]'. Anything that does not decode to a
    list is wrapped as a single-element list of the raw value. Never raises.

    Args:
        value: List, JSON-encoded list, or any other raw value

    Returns:
        List[Any]: Parsed list
    """
    if isinstance(value, (list, tuple)):
        return list(value)

    if value is None:
        return []

    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except (ValueError, RecursionError):
            return [value]
        if isinstance(decoded, list):
            return decoded

    return [value]


# RIASEC utilities

def riasec_percentages(
    scores: Mapping[str, float],
    max_score: float
) -> Dict[str, int]:
    """Convert raw RIASEC accumulators to 0-100 percentages of max_score.

    Args:
        scores: Raw trait accumulators keyed by trait code
        max_score: Assumed maximum achievable accumulator

    Returns:
        Dict[str, int]: Percentage per trait code, in R-I-A-S-E-C order
    """
    if max_score <= 0:
        return {code: 0 for code in RIASEC_CODES}

    return {
        code: round_half_up(clamp_score(scores.get(code, 0.0) / max_score * 100))
        for code in RIASEC_CODES
    }


def get_top_dimensions(
    scores: Mapping[str, float],
    top_n: int = ScoringDefaults.RIASEC_CODE_LENGTH
) -> List[Tuple[RiasecDimension, float]]:
    """Get top N dimensions by score.

    Ties keep R-I-A-S-E-C order.

    Args:
        scores: Trait accumulators keyed by trait code
        top_n: Number of top dimensions to return

    Returns:
        List[Tuple[RiasecDimension, float]]: Top dimensions with scores
    """
    ordered = [(RiasecDimension.from_code(code), scores.get(code, 0.0)) for code in RIASEC_CODES]
    sorted_dims = sorted(ordered, key=lambda item: item[1], reverse=True)
    return sorted_dims[:top_n]


def get_riasec_code(
    scores: Mapping[str, float],
    length: int = ScoringDefaults.RIASEC_CODE_LENGTH
) -> str:
    """Get the dominant RIASEC code (e.g. "RIA") for a set of scores."""
    return "".join(dim.value for dim, _ in get_top_dimensions(scores, length))
