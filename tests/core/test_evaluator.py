"""Tests for PythonEvaluator."""

import asyncio

import pytest

from evalsh.core.errors import EvaluationError
from evalsh.core.evaluator import Evaluator, PythonEvaluator


class TestIsComplete:
    """Tests for the completeness check."""

    @pytest.mark.parametrize(
        "source",
        [
            "1 + 1",
            "x = 5",
            "print('hi')",
            "import json",
            "await asyncio.sleep(0)",
            "",
            "# just a comment",
        ],
    )
    def test_complete_units(self, source):
        """Single complete statements are complete."""
        assert PythonEvaluator({}).is_complete(source) is True

    @pytest.mark.parametrize(
        "source",
        [
            "print(",
            "print(\n1,",
            "x = [1,\n2,",
            "def f():",
            "if True:\n    x = 1",
        ],
    )
    def test_incomplete_units(self, source):
        """Open brackets, blocks and strings need more input."""
        assert PythonEvaluator({}).is_complete(source) is False

    def test_block_completes_with_blank_line(self):
        """A compound statement is complete once followed by an empty line."""
        evaluator = PythonEvaluator({})

        assert evaluator.is_complete("def f():\n    return 1") is False
        assert evaluator.is_complete("def f():\n    return 1\n") is True

    def test_bracket_closing_completes(self):
        """Appending the closing bracket completes a call."""
        evaluator = PythonEvaluator({})

        assert evaluator.is_complete("print(") is False
        assert evaluator.is_complete("print(\n1,") is False
        assert evaluator.is_complete("print(\n1,\n)") is True

    def test_syntax_error_counts_as_complete(self):
        """Invalid source is complete so that it gets reported."""
        assert PythonEvaluator({}).is_complete("1 +* 2") is True
        assert PythonEvaluator({}).is_complete(")") is True


class TestEvaluate:
    """Tests for evaluation against the namespace."""

    async def test_expression_returns_value(self):
        """Expressions return their value."""
        assert await PythonEvaluator({}).evaluate("1 + 1") == 2

    async def test_statement_returns_none(self):
        """Statements return None and bind names."""
        namespace = {}
        evaluator = PythonEvaluator(namespace)

        assert await evaluator.evaluate("x = 5") is None
        assert namespace["x"] == 5

    async def test_namespace_persists(self):
        """Bindings from one evaluation are visible to the next."""
        evaluator = PythonEvaluator({})

        await evaluator.evaluate("x = 5")

        assert await evaluator.evaluate("x * 2") == 10

    async def test_multiline_block(self):
        """Multi-line blocks run as statements."""
        namespace = {}
        evaluator = PythonEvaluator(namespace)

        await evaluator.evaluate("def double(n):\n    return n * 2\n")

        assert await evaluator.evaluate("double(21)") == 42

    async def test_multiline_expression(self):
        """Expressions spanning lines still return their value."""
        assert await PythonEvaluator({}).evaluate("max(\n1,\n3,\n)") == 3

    async def test_blank_and_comment_source(self):
        """Nothing to run yields None."""
        evaluator = PythonEvaluator({})

        assert await evaluator.evaluate("") is None
        assert await evaluator.evaluate("   ") is None
        assert await evaluator.evaluate("# note") is None

    async def test_falsy_values_returned(self):
        """Falsy results come back as-is, not as None."""
        evaluator = PythonEvaluator({})

        assert await evaluator.evaluate("0") == 0
        assert await evaluator.evaluate("''") == ""
        assert await evaluator.evaluate("[]") == []

    async def test_top_level_await_expression(self):
        """Top-level await in an expression is awaited."""
        namespace = {"asyncio": asyncio}

        async def answer():
            return 42

        namespace["answer"] = answer
        evaluator = PythonEvaluator(namespace)

        assert await evaluator.evaluate("await answer()") == 42

    async def test_top_level_await_statement(self):
        """Top-level await in a statement binds its result."""
        namespace = {}

        async def answer():
            return 42

        namespace["answer"] = answer
        evaluator = PythonEvaluator(namespace)

        assert await evaluator.evaluate("x = await answer()") is None
        assert namespace["x"] == 42

    async def test_runtime_error_wrapped(self):
        """Exceptions raised while running become EvaluationError."""
        with pytest.raises(EvaluationError) as exc_info:
            await PythonEvaluator({}).evaluate("1 / 0")

        assert exc_info.value.message == "ZeroDivisionError: division by zero"
        assert isinstance(exc_info.value.__cause__, ZeroDivisionError)

    async def test_name_error_wrapped(self):
        """Undefined names are reported with their type."""
        with pytest.raises(EvaluationError) as exc_info:
            await PythonEvaluator({}).evaluate("undefined_name")

        assert exc_info.value.message.startswith("NameError:")

    async def test_syntax_error_wrapped(self):
        """Syntax errors are reported as EvaluationError."""
        with pytest.raises(EvaluationError) as exc_info:
            await PythonEvaluator({}).evaluate("1 +* 2")

        assert exc_info.value.message.startswith("SyntaxError:")

    async def test_environment_usable_after_error(self):
        """A failing evaluation leaves earlier bindings intact."""
        evaluator = PythonEvaluator({})
        await evaluator.evaluate("x = 5")

        with pytest.raises(EvaluationError):
            await evaluator.evaluate("x.missing")

        assert await evaluator.evaluate("x + 1") == 6

    async def test_system_exit_propagates(self):
        """SystemExit is not turned into an evaluation error."""
        with pytest.raises(SystemExit):
            await PythonEvaluator({}).evaluate("raise SystemExit(3)")

    async def test_future_annotations_not_inherited(self):
        """Code runs without this package's __future__ flags."""
        namespace = {}
        evaluator = PythonEvaluator(namespace)

        await evaluator.evaluate("def f(x: int) -> int:\n    return x\n")

        assert namespace["f"].__annotations__["x"] is int

    async def test_future_import_scoped_to_unit(self):
        """A __future__ import typed at the prompt does not leak into later units."""
        namespace = {}
        evaluator = PythonEvaluator(namespace)

        await evaluator.evaluate("from __future__ import annotations\ndef g(x: int): pass\n")
        await evaluator.evaluate("def h(x: int): pass\n")

        assert namespace["g"].__annotations__["x"] == "int"
        assert namespace["h"].__annotations__["x"] is int

    async def test_statement_list_has_no_value(self):
        """Only a lone expression produces a value."""
        namespace = {}

        assert await PythonEvaluator(namespace).evaluate("x = 1; x") is None
        assert namespace["x"] == 1

    def test_satisfies_protocol(self):
        """PythonEvaluator can be used where an Evaluator is expected."""
        evaluator: Evaluator = PythonEvaluator({})
        assert callable(evaluator.is_complete)
        assert callable(evaluator.evaluate)
