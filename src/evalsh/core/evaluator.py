"""Completeness checking and evaluation of interactive source.

The REPL loop only talks to the ``Evaluator`` protocol, so the loop itself
knows nothing about parsing. ``PythonEvaluator`` is the default
implementation: it reuses the interpreter's own interactive compiler for
the completeness check and runs code in a persistent namespace.
"""

from __future__ import annotations

import ast
import logging
from codeop import CommandCompiler
from inspect import CO_COROUTINE
from typing import Any, Protocol

from evalsh.core.errors import EvaluationError

logger = logging.getLogger(__name__)

# Allows `await http.get(...)` directly at the prompt
_COMPILE_FLAGS = ast.PyCF_ALLOW_TOP_LEVEL_AWAIT


class Evaluator(Protocol):
    """Capability the REPL loop needs from a scripting host."""

    def is_complete(self, source: str) -> bool:
        """Return True if source forms one complete evaluable unit."""
        ...

    async def evaluate(self, source: str) -> Any:
        """Evaluate source, returning its value (None if it has none).

        Raises:
            EvaluationError: If the source is invalid or raises.
        """
        ...


class PythonEvaluator:
    """Evaluates Python source against a shared namespace.

    Expressions return their value, statements return None. Top-level
    ``await`` is accepted in both.

    Unlike the stock interactive console:

    - Statement lists never echo, so ``x = 1; x`` prints nothing. Only a
      unit that is a single expression has a value.
    - Each unit is compiled with fixed flags, so ``from __future__``
      imports affect only the unit they appear in.
    """

    def __init__(self, namespace: dict[str, Any], filename: str = "<repl>"):
        self.namespace = namespace
        self.filename = filename
        self._compiler = CommandCompiler()
        self._compiler.compiler.flags |= _COMPILE_FLAGS

    def is_complete(self, source: str) -> bool:
        try:
            code = self._compiler(source, self.filename, "single")
        except (SyntaxError, ValueError, OverflowError):
            # Can never become valid, so hand it to evaluate() for reporting
            return True
        return code is not None

    async def evaluate(self, source: str) -> Any:
        if not _has_code(source):
            return None

        try:
            try:
                code = compile(source, self.filename, "eval", _COMPILE_FLAGS, dont_inherit=True)
                is_expression = True
            except SyntaxError:
                code = compile(source, self.filename, "exec", _COMPILE_FLAGS, dont_inherit=True)
                is_expression = False

            result = eval(code, self.namespace)
            if code.co_flags & CO_COROUTINE:
                result = await result
        except Exception as e:
            logger.debug("Evaluation failed: %s", source, exc_info=True)
            raise EvaluationError(f"{type(e).__name__}: {e}") from e

        return result if is_expression else None


def _has_code(source: str) -> bool:
    """Check whether source holds anything besides blanks and comments."""
    for line in source.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            return True
    return False
