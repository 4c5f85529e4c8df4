"""Tests for model configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from categorical_bayes.config import (
    AttributeSpec,
    ModelConfig,
    create_config_from_dict,
    load_config,
)


class TestModelConfig:
    """Tests for the ModelConfig dataclass."""

    def test_defaults(self):
        config = ModelConfig(num_features=3, num_classes=2)
        assert config.attribute_names == ["feature_0", "feature_1", "feature_2"]
        assert config.attribute_values(0) == []
        assert config.class_name(1) == "1"
        assert config.log_space is False
        assert config.delimiter is None

    def test_named_attributes_and_classes(self):
        config = ModelConfig(
            num_features=1,
            num_classes=2,
            attributes=[AttributeSpec("gym attendance", ["no", "daily"])],
            class_names=["low", "high"],
        )
        assert config.attribute_names == ["gym attendance"]
        assert config.attribute_values(0) == ["no", "daily"]
        assert config.class_name(0) == "low"

    @pytest.mark.parametrize("f, c", [(0, 2), (2, 0), (-1, 1)])
    def test_invalid_shape_raises(self, f, c):
        with pytest.raises(ValueError, match="must be >= 1"):
            ModelConfig(num_features=f, num_classes=c)

    def test_attribute_count_mismatch_raises(self):
        with pytest.raises(ValueError, match="attributes"):
            ModelConfig(num_features=2, num_classes=2, attributes=[AttributeSpec("a")])

    def test_class_name_count_mismatch_raises(self):
        with pytest.raises(ValueError, match="class names"):
            ModelConfig(num_features=1, num_classes=2, class_names=["only"])


class TestLoadConfig:
    """Tests for YAML loading."""

    def test_load_example(self, food_config):
        assert food_config.title == "Food Storage Freshness Prediction Model"
        assert food_config.num_features == 4
        assert food_config.num_classes == 2
        assert food_config.attribute_names[0] == "Storage Location"
        assert "vacuum_packed" in food_config.attribute_values(3)
        assert food_config.class_name(1) == "fresh"
        assert food_config.delimiter == ","

    def test_counts_without_names(self, tmp_path: Path):
        file = tmp_path / "model.yaml"
        file.write_text("num_features: 3\nnum_classes: 4\nlog_space: true\n", encoding="utf-8")
        config = load_config(file)
        assert (config.num_features, config.num_classes) == (3, 4)
        assert config.log_space is True

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_malformed_yaml_raises(self, tmp_path: Path):
        file = tmp_path / "model.yaml"
        file.write_text("features: [a, b\nclasses: [x]\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(file)

    def test_byte_order_mark_is_accepted(self, tmp_path: Path):
        file = tmp_path / "model.yaml"
        file.write_text("\ufefftitle: Demo\nnum_features: 1\nnum_classes: 2\n", encoding="utf-8")
        assert load_config(file).title == "Demo"

    def test_non_mapping_raises(self, tmp_path: Path):
        file = tmp_path / "model.yaml"
        file.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_config(file)


class TestCreateConfigFromDict:
    """Tests for dictionary-based construction."""

    def test_plain_feature_names(self):
        config = create_config_from_dict({"features": ["a", "b"], "classes": ["no", "yes"]})
        assert config.attribute_names == ["a", "b"]
        assert config.attribute_values(1) == []

    def test_values_are_stringified(self):
        config = create_config_from_dict({
            "features": [{"name": "grade", "values": [1, 2, 3]}],
            "num_classes": 2,
        })
        assert config.attribute_values(0) == ["1", "2", "3"]

    def test_missing_features_raises(self):
        with pytest.raises(ValueError, match="num_features"):
            create_config_from_dict({"classes": ["a", "b"]})

    def test_missing_classes_raises(self):
        with pytest.raises(ValueError, match="num_classes"):
            create_config_from_dict({"features": ["a"]})

    def test_bad_feature_entry_raises(self):
        with pytest.raises(ValueError, match="Feature entry 0"):
            create_config_from_dict({"features": [{"values": ["x"]}], "num_classes": 2})
