"""Shared test fixtures for categorical-bayes tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from categorical_bayes.config import ModelConfig, load_config
from categorical_bayes.models import TrainingSet

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


@pytest.fixture
def food_config_path() -> Path:
    """Path to the food freshness model configuration."""
    return EXAMPLES_DIR / "food_freshness.yaml"


@pytest.fixture
def food_data_path() -> Path:
    """Path to the food freshness training data."""
    return EXAMPLES_DIR / "food_freshness.csv"


@pytest.fixture
def career_config_path() -> Path:
    """Path to the career success model configuration."""
    return EXAMPLES_DIR / "career_success.yaml"


@pytest.fixture
def career_data_path() -> Path:
    """Path to the career success training data."""
    return EXAMPLES_DIR / "career_success.csv"


@pytest.fixture
def food_config(food_config_path: Path) -> ModelConfig:
    return load_config(food_config_path)


@pytest.fixture
def small_records() -> list[list]:
    """Three rows, three features, two classes."""
    return [
        ["a", "x", "p", 0],
        ["a", "y", "p", 1],
        ["b", "x", "q", 1],
    ]


@pytest.fixture
def small_set(small_records: list[list]) -> TrainingSet:
    return TrainingSet.from_records(small_records, num_features=3, num_classes=2)


@pytest.fixture
def small_config() -> ModelConfig:
    return ModelConfig(num_features=3, num_classes=2)


@pytest.fixture
def tmp_data_file(tmp_path: Path) -> Path:
    """A temporary training file with the small three-row dataset."""
    file = tmp_path / "train.csv"
    file.write_text("a, x, p, 0\na, y, p, 1\n\nb, x, q, 1\n", encoding="utf-8")
    return file
