"""Error types shared across evalsh."""

from __future__ import annotations


class EvalshError(Exception):
    """Base class for evalsh errors."""

    pass


class EvaluationError(EvalshError):
    """Raised when a unit of source fails to compile or raises while running.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputEnd(EvalshError):
    """Raised when the input stream is exhausted or the exit sentinel is read."""

    pass


class ConfigError(EvalshError):
    """Raised when configuration cannot be loaded."""

    pass
