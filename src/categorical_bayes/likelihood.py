"""Laplacian smoothing and per-class likelihood scores.

Smoothing adds exactly 1 to every joint count regardless of how many
values a feature can take, so each class denominator grows by F (one per
feature) rather than by the feature's domain size:

    score[k] = (n_k / N) * prod_j (count[j][k] + 1) / (n_k + F)

This is not textbook add-one smoothing, which would use the cardinality
of each feature's domain in the denominator. The ``n_k + F`` form is kept
as-is because results must match the established model numerically.
"""

from __future__ import annotations

import math
from collections.abc import Sequence


def smooth(joint_counts: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy of ``joint_counts`` with every cell incremented by 1."""
    return [[count + 1 for count in row] for row in joint_counts]


def score(
    smoothed_counts: Sequence[Sequence[int]],
    class_counts: Sequence[int],
    num_samples: int,
    num_features: int,
) -> list[float]:
    """Compute the unnormalized posterior of each class.

    Args:
        smoothed_counts: F x C smoothed joint counts.
        class_counts: Training rows per class.
        num_samples: Training set size (N).
        num_features: Number of predictor slots (F).

    Returns:
        One non-negative score per class. Classes with no training rows
        score exactly 0.0.
    """
    scores: list[float] = []
    for k, n_k in enumerate(class_counts):
        if n_k == 0:
            scores.append(0.0)
            continue
        denominator = n_k + num_features
        value = 1.0
        for j in range(num_features):
            value *= smoothed_counts[j][k] / denominator
        value *= n_k / num_samples
        scores.append(value)
    return scores


def log_score(
    smoothed_counts: Sequence[Sequence[int]],
    class_counts: Sequence[int],
    num_samples: int,
    num_features: int,
) -> list[float]:
    """Log-space equivalent of ``score``.

    Classes with no training rows get ``-inf``. Useful when F is large
    enough for the product of conditionals to underflow.
    """
    scores: list[float] = []
    for k, n_k in enumerate(class_counts):
        if n_k == 0:
            scores.append(-math.inf)
            continue
        log_denominator = math.log(n_k + num_features)
        value = math.log(n_k / num_samples)
        for j in range(num_features):
            value += math.log(smoothed_counts[j][k]) - log_denominator
        scores.append(value)
    return scores
