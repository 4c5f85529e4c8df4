"""Model configuration: feature schema, class labels and loader options.

Configurations are plain dataclasses that can be built in code or loaded
from a YAML file::

    title: Food Storage Freshness Prediction Model
    features:
      - name: Storage Location
        values: [fridge, freezer, pantry, left_outside]
      - name: Storage Duration
        values: [short, medium, long, very_long]
    classes: [spoiled, fresh]
    delimiter: ","

Attribute names, value domains and class names are display metadata only;
classification needs nothing but the feature and class counts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass
class AttributeSpec:
    """A named predictor slot and its admissible values."""

    name: str
    values: list[str] = field(default_factory=list)


@dataclass
class ModelConfig:
    """Shape and labelling of a categorical Naive Bayes model.

    Args:
        num_features: Number of predictor slots (F).
        num_classes: Number of class labels (C), labels are ``0..C-1``.
        title: Human-readable model title.
        attributes: Optional per-slot names and value domains (length F).
        class_names: Optional display name per label (length C).
        delimiter: Field separator for training files. ``None`` picks one
            from the file extension.
        log_space: Accumulate likelihoods in log space.
    """

    num_features: int
    num_classes: int
    title: str = "Naive Bayes Model"
    attributes: list[AttributeSpec] = field(default_factory=list)
    class_names: list[str] = field(default_factory=list)
    delimiter: Optional[str] = None
    log_space: bool = False

    def __post_init__(self) -> None:
        if self.num_features < 1:
            raise ValueError(f"num_features must be >= 1, got {self.num_features}")
        if self.num_classes < 1:
            raise ValueError(f"num_classes must be >= 1, got {self.num_classes}")
        if self.attributes and len(self.attributes) != self.num_features:
            raise ValueError(
                f"Expected {self.num_features} attributes, got {len(self.attributes)}"
            )
        if self.class_names and len(self.class_names) != self.num_classes:
            raise ValueError(
                f"Expected {self.num_classes} class names, got {len(self.class_names)}"
            )

    @property
    def attribute_names(self) -> list[str]:
        if self.attributes:
            return [a.name for a in self.attributes]
        return [f"feature_{j}" for j in range(self.num_features)]

    def attribute_values(self, feature: int) -> list[str]:
        """Documented domain of a feature slot (empty if unknown)."""
        if self.attributes:
            return list(self.attributes[feature].values)
        return []

    def class_name(self, label: int) -> str:
        if self.class_names:
            return self.class_names[label]
        return str(label)


def load_config(config_path: str | Path) -> ModelConfig:
    """Load a model configuration from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file does not describe a valid model.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r", encoding="utf-8-sig") as f:
        try:
            config_dict = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(config_dict, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping")

    config = create_config_from_dict(config_dict)
    logger.debug(
        "Loaded config %s: %d features, %d classes",
        path, config.num_features, config.num_classes,
    )
    return config


def create_config_from_dict(config_dict: dict[str, Any]) -> ModelConfig:
    """Build a ``ModelConfig`` from a plain dictionary.

    ``num_features`` and ``num_classes`` may be omitted when ``features``
    and ``classes`` lists are present.
    """
    attributes = []
    for i, entry in enumerate(config_dict.get("features") or []):
        if isinstance(entry, str):
            attributes.append(AttributeSpec(name=entry))
        elif isinstance(entry, dict) and "name" in entry:
            values = [str(v) for v in entry.get("values") or []]
            attributes.append(AttributeSpec(name=str(entry["name"]), values=values))
        else:
            raise ValueError(f"Feature entry {i} must be a name or a mapping with 'name'")

    class_names = [str(c) for c in config_dict.get("classes") or []]

    num_features = config_dict.get("num_features", len(attributes))
    num_classes = config_dict.get("num_classes", len(class_names))
    if not num_features:
        raise ValueError("Configuration must define 'num_features' or 'features'")
    if not num_classes:
        raise ValueError("Configuration must define 'num_classes' or 'classes'")

    return ModelConfig(
        num_features=int(num_features),
        num_classes=int(num_classes),
        title=str(config_dict.get("title", "Naive Bayes Model")),
        attributes=attributes,
        class_names=class_names,
        delimiter=config_dict.get("delimiter"),
        log_space=bool(config_dict.get("log_space", False)),
    )
