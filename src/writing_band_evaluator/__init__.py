"""
writing_band_evaluator package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import EvaluatorConfig, config_from_dict, config_from_yaml, load_config
from .errors import ConfigError, EvaluatorError, InvalidInputError
from .models import AnalysisResult, BandScores, TaskCategory
from .pipeline import Evaluator, evaluate, evaluate_corpus

__all__ = [
    "EvaluatorConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "EvaluatorError",
    "InvalidInputError",
    "ConfigError",
    "AnalysisResult",
    "BandScores",
    "TaskCategory",
    "Evaluator",
    "evaluate",
    "evaluate_corpus",
]

__version__ = "0.1.0"
