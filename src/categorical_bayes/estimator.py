"""Frequency estimation: joint and per-class counts for a query.

Two interchangeable ways to obtain the same counts:

- ``estimate`` re-scans every training row against the query (O(N*F)).
- ``FrequencyIndex`` builds per-slot value histograms once and answers a
  query by table lookup (O(F*C)).

Both produce an F x C joint count table, where cell ``[j][k]`` is the
number of rows whose feature ``j`` equals ``query[j]`` and whose label is
``k``, plus the length-C class count vector.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .errors import SchemaMismatch
from .models import TrainingRow, TrainingSet, check_row


def _check_query(query: Sequence[str], num_features: int) -> None:
    if len(query) != num_features:
        raise SchemaMismatch(
            f"Query has {len(query)} feature values, expected {num_features}"
        )


def zero_table(rows: int, cols: int) -> list[list[int]]:
    """Allocate a rows x cols table of zeros."""
    return [[0] * cols for _ in range(rows)]


def estimate(
    rows: Iterable[TrainingRow],
    query: Sequence[str],
    num_features: int,
    num_classes: int,
) -> tuple[list[list[int]], list[int]]:
    """Count query matches per feature and class by scanning all rows.

    Feature values are compared with exact string equality.

    Args:
        rows: Labeled training rows.
        query: The F feature values being classified.
        num_features: Number of predictor slots (F).
        num_classes: Number of class labels (C).

    Returns:
        Tuple of ``(joint_counts, class_counts)``.

    Raises:
        SchemaMismatch: If the query or a row does not have F values.
        InvalidLabel: If a row's label is outside ``[0, C)``.
    """
    _check_query(query, num_features)

    joint_counts = zero_table(num_features, num_classes)
    class_counts = [0] * num_classes

    for row in rows:
        check_row(row, num_features, num_classes)
        label = row.label
        class_counts[label] += 1
        for j in range(num_features):
            if row.features[j] == query[j]:
                joint_counts[j][label] += 1

    return joint_counts, class_counts


class FrequencyIndex:
    """Precomputed per-feature-value class histograms for a training set.

    Built once per training set; immutable afterwards, so it can be shared
    freely between threads.

    Example::

        index = FrequencyIndex(training_set)
        joint, classes = index.counts(["high", "low", "no"])
    """

    def __init__(self, training_set: TrainingSet) -> None:
        self._num_features = training_set.num_features
        self._num_classes = training_set.num_classes

        histograms: list[dict[str, list[int]]] = [{} for _ in range(self._num_features)]
        class_counts = [0] * self._num_classes
        for row in training_set:
            class_counts[row.label] += 1
            for j, value in enumerate(row.features):
                per_class = histograms[j].setdefault(value, [0] * self._num_classes)
                per_class[row.label] += 1

        self._histograms = [
            {value: tuple(counts) for value, counts in h.items()} for h in histograms
        ]
        self._class_counts = tuple(class_counts)
        self._empty = (0,) * self._num_classes

    @property
    def num_features(self) -> int:
        return self._num_features

    @property
    def num_classes(self) -> int:
        return self._num_classes

    @property
    def class_counts(self) -> tuple[int, ...]:
        return self._class_counts

    @property
    def num_samples(self) -> int:
        return sum(self._class_counts)

    def values(self, feature: int) -> list[str]:
        """Distinct values observed for a feature slot, sorted."""
        return sorted(self._histograms[feature])

    def joint_counts(self, query: Sequence[str]) -> list[list[int]]:
        """F x C joint count table for ``query``.

        Raises:
            SchemaMismatch: If the query does not have F values.
        """
        _check_query(query, self._num_features)
        return [
            list(self._histograms[j].get(query[j], self._empty))
            for j in range(self._num_features)
        ]

    def counts(self, query: Sequence[str]) -> tuple[list[list[int]], list[int]]:
        """Same result as ``estimate`` for the indexed training set."""
        return self.joint_counts(query), list(self._class_counts)
