"""Categorical Naive Bayes -- classify discrete feature vectors by maximum posterior."""

__version__ = "0.1.0"

from .classifier import NaiveBayesClassifier, build_result, classify
from .config import AttributeSpec, ModelConfig, create_config_from_dict, load_config
from .decision import argmax, decide, decide_log
from .errors import (
    DegenerateModel,
    InvalidLabel,
    ModelNotReady,
    NaiveBayesError,
    SchemaMismatch,
)
from .estimator import FrequencyIndex, estimate
from .likelihood import log_score, score, smooth
from .loader import (
    DelimitedTextParser,
    TabSeparatedParser,
    get_parser,
    load_training_data,
    parse_lines,
)
from .models import ClassificationResult, TrainingRow, TrainingSet

__all__ = [
    # Core
    "NaiveBayesClassifier",
    "classify",
    "build_result",
    "ClassificationResult",
    "TrainingRow",
    "TrainingSet",
    # Stages
    "estimate",
    "FrequencyIndex",
    "smooth",
    "score",
    "log_score",
    "argmax",
    "decide",
    "decide_log",
    # Configuration
    "ModelConfig",
    "AttributeSpec",
    "load_config",
    "create_config_from_dict",
    # Loading
    "DelimitedTextParser",
    "TabSeparatedParser",
    "get_parser",
    "load_training_data",
    "parse_lines",
    # Errors
    "NaiveBayesError",
    "SchemaMismatch",
    "InvalidLabel",
    "DegenerateModel",
    "ModelNotReady",
]
