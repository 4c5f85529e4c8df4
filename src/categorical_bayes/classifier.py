"""Categorical Naive Bayes classification.

Combines the three stages (frequency estimation, smoothing and likelihood
scoring, decision) into a single call that returns a complete
``ClassificationResult`` or raises.

Two entry points:

- ``classify(training_set, query)``: stateless, re-scans the training rows
  for every query.
- ``NaiveBayesClassifier``: holds a loaded training set and a precomputed
  ``FrequencyIndex`` so each query is a table lookup.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .config import ModelConfig
from .decision import decide, decide_log
from .errors import ModelNotReady, SchemaMismatch
from .estimator import FrequencyIndex, estimate
from .likelihood import log_score, score, smooth
from .loader import load_training_data
from .models import ClassificationResult, TrainingSet

logger = logging.getLogger(__name__)


def _freeze(table: Sequence[Sequence[int]]) -> tuple[tuple[int, ...], ...]:
    return tuple(tuple(row) for row in table)


def build_result(
    query: Sequence[str],
    raw_joint_counts: Sequence[Sequence[int]],
    class_counts: Sequence[int],
    num_features: int,
    log_space: bool = False,
) -> ClassificationResult:
    """Run smoothing, scoring and the decision on precomputed counts.

    Raises:
        ModelNotReady: If the counts come from an empty training set.
        DegenerateModel: If no class has positive evidence.
    """
    num_samples = sum(class_counts)
    if num_samples == 0:
        raise ModelNotReady("No training data loaded")

    smoothed = smooth(raw_joint_counts)
    if log_space:
        log_scores = log_score(smoothed, class_counts, num_samples, num_features)
        probabilities, predicted, confidence = decide_log(log_scores)
        # Report linear scores for display even when deciding in log space
        scores = score(smoothed, class_counts, num_samples, num_features)
    else:
        scores = score(smoothed, class_counts, num_samples, num_features)
        probabilities, predicted, confidence = decide(scores)

    return ClassificationResult(
        query=tuple(query),
        raw_joint_counts=_freeze(raw_joint_counts),
        joint_counts=_freeze(smoothed),
        class_counts=tuple(class_counts),
        scores=tuple(scores),
        probabilities=tuple(probabilities),
        predicted_class=predicted,
        confidence=confidence,
    )


def classify(
    training_set: TrainingSet,
    query: Sequence[str],
    log_space: bool = False,
) -> ClassificationResult:
    """Classify ``query`` against ``training_set`` by re-scanning every row.

    Args:
        training_set: Validated labeled training rows.
        query: Exactly F feature values.
        log_space: Accumulate likelihoods in log space.

    Returns:
        ClassificationResult with counts, scores, probabilities and the
        predicted class.

    Raises:
        SchemaMismatch: If the query does not have F values.
        ModelNotReady: If the training set is empty.
        DegenerateModel: If no class has positive evidence.
    """
    if len(query) != training_set.num_features:
        raise SchemaMismatch(
            f"Query has {len(query)} feature values, expected {training_set.num_features}"
        )
    if not len(training_set):
        raise ModelNotReady("No training data loaded")

    joint_counts, class_counts = estimate(
        training_set, query, training_set.num_features, training_set.num_classes
    )
    return build_result(
        query, joint_counts, class_counts, training_set.num_features, log_space=log_space
    )


@dataclass(frozen=True)
class _Snapshot:
    """A training set and its index, published together."""

    training_set: TrainingSet
    index: FrequencyIndex


class NaiveBayesClassifier:
    """Categorical Naive Bayes classifier bound to a model configuration.

    Training data is held as an immutable snapshot. Loading new data builds
    a fresh snapshot and swaps it in atomically, so ``classify`` may be
    called from several threads while another thread reloads.

    Example::

        config = load_config("examples/food_freshness.yaml")
        classifier = NaiveBayesClassifier(config)
        classifier.load_training_data("examples/food_freshness.csv")

        result = classifier.classify(["freezer", "short", "meat", "vacuum_packed"])
        print(config.class_name(result.predicted_class))  # "fresh"
        print(result.confidence)                          # 0.979...

    Args:
        config: Feature and class layout of the model.
    """

    def __init__(self, config: ModelConfig) -> None:
        self._config = config
        self._snapshot: Optional[_Snapshot] = None
        self._lock = threading.Lock()

    @property
    def config(self) -> ModelConfig:
        return self._config

    @property
    def num_features(self) -> int:
        return self._config.num_features

    @property
    def num_classes(self) -> int:
        return self._config.num_classes

    @property
    def is_ready(self) -> bool:
        """Whether training data has been loaded."""
        return self._snapshot is not None

    @property
    def training_set(self) -> TrainingSet:
        """The currently loaded training set.

        Raises:
            ModelNotReady: If no training data has been loaded.
        """
        return self._current().training_set

    def class_name(self, label: int) -> str:
        return self._config.class_name(label)

    def load_training_data(self, file_path: str | Path) -> TrainingSet:
        """Load training rows from a delimited file and make them current.

        Raises:
            FileNotFoundError: If the file does not exist.
            SchemaMismatch: If a row has the wrong number of fields.
            InvalidLabel: If a label is not an integer in ``[0, C)``.
            ModelNotReady: If the file holds no rows.
        """
        training_set = load_training_data(
            file_path,
            self.num_features,
            self.num_classes,
            delimiter=self._config.delimiter,
        )
        return self.fit(training_set)

    def fit(self, data: Union[TrainingSet, Iterable[Sequence]]) -> TrainingSet:
        """Make ``data`` the current training set.

        Args:
            data: A TrainingSet matching this model's shape, or raw
                ``[v1, ..., vF, label]`` records.

        Raises:
            SchemaMismatch: If the data's shape differs from the config.
            InvalidLabel: If a label is not an integer in ``[0, C)``.
            ModelNotReady: If there are no rows.
        """
        if isinstance(data, TrainingSet):
            training_set = data
            if (training_set.num_features, training_set.num_classes) != (
                self.num_features, self.num_classes
            ):
                raise SchemaMismatch(
                    f"Training set has shape F={training_set.num_features}, "
                    f"C={training_set.num_classes}; model expects "
                    f"F={self.num_features}, C={self.num_classes}"
                )
        else:
            training_set = TrainingSet.from_records(data, self.num_features, self.num_classes)

        if not len(training_set):
            raise ModelNotReady("Training data contains no rows")

        snapshot = _Snapshot(training_set=training_set, index=FrequencyIndex(training_set))
        with self._lock:
            self._snapshot = snapshot
        logger.debug(
            "Published training snapshot: %d rows, class counts %s",
            len(training_set), list(snapshot.index.class_counts),
        )
        return training_set

    def classify(self, query: Sequence[str]) -> ClassificationResult:
        """Classify a single feature vector.

        Raises:
            ModelNotReady: If no training data has been loaded.
            SchemaMismatch: If the query does not have F values.
            DegenerateModel: If no class has positive evidence.
        """
        snapshot = self._current()
        return self._classify_with(snapshot, query)

    def classify_batch(self, queries: Iterable[Sequence[str]]) -> list[ClassificationResult]:
        """Classify several feature vectors against one consistent snapshot."""
        snapshot = self._current()
        return [self._classify_with(snapshot, q) for q in queries]

    def _current(self) -> _Snapshot:
        snapshot = self._snapshot
        if snapshot is None:
            raise ModelNotReady("No training data loaded. Call load_training_data() first.")
        return snapshot

    def _classify_with(self, snapshot: _Snapshot, query: Sequence[str]) -> ClassificationResult:
        joint_counts, class_counts = snapshot.index.counts(query)
        return build_result(
            query,
            joint_counts,
            class_counts,
            self.num_features,
            log_space=self._config.log_space,
        )
