"""Tests for data models -- TrainingRow, TrainingSet, ClassificationResult."""

from __future__ import annotations

import dataclasses

import pytest

from categorical_bayes.errors import InvalidLabel, SchemaMismatch
from categorical_bayes.models import ClassificationResult, TrainingRow, TrainingSet


class TestTrainingSet:
    """Tests for TrainingSet construction and validation."""

    def test_from_records(self, small_set):
        assert len(small_set) == 3
        assert small_set.rows[0] == TrainingRow(features=("a", "x", "p"), label=0)
        assert small_set.num_features == 3
        assert small_set.num_classes == 2

    def test_tokens_keep_their_type(self):
        ts = TrainingSet.from_records([[1, True, 0]], num_features=2, num_classes=1)
        assert ts.rows[0].features == (1, True)
    def test_class_counts(self, small_set):
        assert small_set.class_counts() == [1, 2]
        assert sum(small_set.class_counts()) == len(small_set)

    def test_iterates_rows_in_order(self, small_set):
        assert [r.label for r in small_set] == [0, 1, 1]

    def test_rows_stored_as_tuple(self):
        rows = [TrainingRow(features=("a",), label=0)]
        ts = TrainingSet(rows=rows, num_features=1, num_classes=1)
        assert isinstance(ts.rows, tuple)

    def test_is_frozen(self, small_set):
        with pytest.raises(dataclasses.FrozenInstanceError):
            small_set.num_classes = 3  # type: ignore[misc]

    def test_record_with_wrong_width_raises(self):
        with pytest.raises(SchemaMismatch):
            TrainingSet.from_records([["a", "b", 0]], num_features=3, num_classes=2)

    def test_row_with_wrong_width_raises(self):
        with pytest.raises(SchemaMismatch):
            TrainingSet(
                rows=(TrainingRow(features=("a",), label=0),),
                num_features=2,
                num_classes=2,
            )

    def test_label_out_of_range_raises(self):
        with pytest.raises(InvalidLabel):
            TrainingSet.from_records([["a", 5]], num_features=1, num_classes=2)

    def test_non_integer_label_raises(self):
        with pytest.raises(InvalidLabel, match="not an integer"):
            TrainingSet.from_records([["a", "1"]], num_features=1, num_classes=2)

    def test_invalid_shape_raises(self):
        with pytest.raises(ValueError):
            TrainingSet(rows=(), num_features=0, num_classes=2)

    def test_empty_set_is_allowed(self):
        ts = TrainingSet(rows=(), num_features=2, num_classes=2)
        assert len(ts) == 0


class TestClassificationResult:
    """Tests for the ClassificationResult dataclass."""

    @pytest.fixture
    def result(self) -> ClassificationResult:
        return ClassificationResult(
            query=("a", "x"),
            raw_joint_counts=((1, 0), (0, 2)),
            joint_counts=((2, 1), (1, 3)),
            class_counts=(1, 2),
            scores=(0.1234567, 0.3),
            probabilities=(0.29153, 0.70847),
            predicted_class=1,
            confidence=0.70847,
        )

    def test_num_samples_and_classes(self, result):
        assert result.num_samples == 3
        assert result.num_classes == 2

    def test_to_dict(self, result):
        d = result.to_dict()
        assert d["query"] == ["a", "x"]
        assert d["joint_counts"] == [[2, 1], [1, 3]]
        assert d["raw_joint_counts"] == [[1, 0], [0, 2]]
        assert d["predicted_class"] == 1
        assert d["confidence"] == 0.7085
        assert d["probabilities"] == [0.2915, 0.7085]

    def test_is_frozen(self, result):
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.predicted_class = 0  # type: ignore[misc]
