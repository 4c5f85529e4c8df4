"""Normalization of class scores and the final decision."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .errors import DegenerateModel


def argmax(values: Sequence[float]) -> int:
    """Index of the largest value; the lowest index wins ties."""
    if not values:
        raise ValueError("argmax of an empty sequence")
    best = 0
    for i in range(1, len(values)):
        if values[i] > values[best]:
            best = i
    return best


def decide(scores: Sequence[float]) -> tuple[list[float], int, float]:
    """Normalize scores into probabilities and pick the winning class.

    Args:
        scores: Unnormalized, non-negative per-class scores.

    Returns:
        Tuple of ``(probabilities, predicted_class, confidence)``.

    Raises:
        DegenerateModel: If every class scored zero.
    """
    evidence = sum(scores)
    if evidence == 0:
        raise DegenerateModel(
            "Total evidence is zero: no class has any training support"
        )
    probabilities = [s / evidence for s in scores]
    predicted = argmax(probabilities)
    return probabilities, predicted, probabilities[predicted]


def decide_log(log_scores: Sequence[float]) -> tuple[list[float], int, float]:
    """Same as ``decide`` for scores given in log space.

    Uses log-sum-exp for numerical stability.

    Raises:
        DegenerateModel: If every class has a log score of ``-inf``.
    """
    if not log_scores or max(log_scores) == -math.inf:
        raise DegenerateModel(
            "Total evidence is zero: no class has any training support"
        )
    max_score = max(log_scores)
    exp_scores = [math.exp(s - max_score) for s in log_scores]
    total = sum(exp_scores)
    probabilities = [s / total for s in exp_scores]
    predicted = argmax(probabilities)
    return probabilities, predicted, probabilities[predicted]
