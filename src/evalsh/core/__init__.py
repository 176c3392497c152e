"""Core evaluation layer: errors, evaluator protocol, logging setup."""

from evalsh.core.errors import ConfigError, EvalshError, EvaluationError, InputEnd
from evalsh.core.evaluator import Evaluator, PythonEvaluator

__all__ = [
    "ConfigError",
    "EvalshError",
    "EvaluationError",
    "Evaluator",
    "InputEnd",
    "PythonEvaluator",
]
