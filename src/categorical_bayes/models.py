"""Data models for categorical Naive Bayes classification."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Sequence
from dataclasses import dataclass

from .errors import InvalidLabel, SchemaMismatch


@dataclass(frozen=True)
class TrainingRow:
    """A single labeled training example.

    Feature values are compared by exact equality, so tokens keep the type
    they were given with (strings when read from a file).
    """

    features: tuple[Hashable, ...]
    label: int

    def __len__(self) -> int:
        return len(self.features)


def check_row(row: TrainingRow, num_features: int, num_classes: int) -> None:
    """Raise if ``row`` does not fit an F-feature, C-class schema."""
    if len(row.features) != num_features:
        raise SchemaMismatch(
            f"Training row has {len(row.features)} feature values, expected {num_features}"
        )
    if isinstance(row.label, bool) or not isinstance(row.label, int):
        raise InvalidLabel(f"Training label {row.label!r} is not an integer")
    if not 0 <= row.label < num_classes:
        raise InvalidLabel(
            f"Training label {row.label} outside valid range [0, {num_classes})"
        )


@dataclass(frozen=True)
class TrainingSet:
    """An immutable, validated sequence of training rows.

    Args:
        rows: Training examples in load order.
        num_features: Number of predictor slots (F).
        num_classes: Number of class labels (C); labels are ``0..C-1``.

    Raises:
        SchemaMismatch: If any row does not carry exactly F feature values.
        InvalidLabel: If any label falls outside ``[0, C)``.
    """

    rows: tuple[TrainingRow, ...]
    num_features: int
    num_classes: int

    def __post_init__(self) -> None:
        if self.num_features < 1:
            raise ValueError(f"num_features must be >= 1, got {self.num_features}")
        if self.num_classes < 1:
            raise ValueError(f"num_classes must be >= 1, got {self.num_classes}")
        # Accept any iterable of rows but always store a tuple
        object.__setattr__(self, "rows", tuple(self.rows))
        for row in self.rows:
            check_row(row, self.num_features, self.num_classes)

    @classmethod
    def from_records(
        cls,
        records: Iterable[Sequence],
        num_features: int,
        num_classes: int,
    ) -> "TrainingSet":
        """Build a training set from ``[v1, ..., vF, label]`` records.

        Raises:
            SchemaMismatch: If a record does not have F + 1 fields.
            InvalidLabel: If a label is not an integer in ``[0, C)``.
        """
        rows = []
        for record in records:
            if len(record) != num_features + 1:
                raise SchemaMismatch(
                    f"Record {list(record)!r} has {len(record) - 1} feature values, "
                    f"expected {num_features}"
                )
            *features, label = record
            rows.append(TrainingRow(features=tuple(features), label=label))
        return cls(rows=tuple(rows), num_features=num_features, num_classes=num_classes)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[TrainingRow]:
        return iter(self.rows)

    def class_counts(self) -> list[int]:
        """Number of rows carrying each label."""
        counts = [0] * self.num_classes
        for row in self.rows:
            counts[row.label] += 1
        return counts


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying a single query vector.

    Attributes:
        query: The feature values that were classified.
        raw_joint_counts: F x C matches between query and training rows.
        joint_counts: ``raw_joint_counts`` after Laplacian smoothing.
        class_counts: Training rows per class.
        scores: Unnormalized posterior (likelihood times prior) per class.
        probabilities: ``scores`` normalized to sum to 1.
        predicted_class: Index of the most probable class.
        confidence: Probability of the predicted class.
    """

    query: tuple[str, ...]
    raw_joint_counts: tuple[tuple[int, ...], ...]
    joint_counts: tuple[tuple[int, ...], ...]
    class_counts: tuple[int, ...]
    scores: tuple[float, ...]
    probabilities: tuple[float, ...]
    predicted_class: int
    confidence: float

    @property
    def num_samples(self) -> int:
        return sum(self.class_counts)

    @property
    def num_classes(self) -> int:
        return len(self.class_counts)

    def to_dict(self) -> dict:
        return {
            "query": list(self.query),
            "raw_joint_counts": [list(r) for r in self.raw_joint_counts],
            "joint_counts": [list(r) for r in self.joint_counts],
            "class_counts": list(self.class_counts),
            "scores": [round(s, 6) for s in self.scores],
            "probabilities": [round(p, 4) for p in self.probabilities],
            "predicted_class": self.predicted_class,
            "confidence": round(self.confidence, 4),
        }
