from __future__ import annotations


class EvaluatorError(Exception):
    """Base class for errors raised by the writing band evaluator."""


class InvalidInputError(EvaluatorError, TypeError):
    """Raised when the text or task category passed in has the wrong type or value."""


class ConfigError(EvaluatorError, ValueError):
    """Raised when a configuration source cannot be turned into EvaluatorConfig."""
