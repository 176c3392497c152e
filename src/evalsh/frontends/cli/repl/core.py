"""Core REPL loop."""

from __future__ import annotations

import logging
from collections.abc import Callable

from evalsh.config import EvalshConfig, load_config
from evalsh.core.errors import EvaluationError, InputEnd
from evalsh.core.evaluator import Evaluator, PythonEvaluator
from evalsh.frontends.cli.repl.display import (
    FAREWELL,
    format_error,
    format_value,
    print_banner,
)
from evalsh.frontends.cli.repl.state import REPLState
from evalsh.http.client import HttpClient, HttpClientConfig

logger = logging.getLogger(__name__)


def _next_line(read_line: Callable[[str], str], prompt: str, buffer: str) -> str:
    """Read one line, turning end of input into InputEnd.

    An empty line only ends the session when nothing is buffered; inside a
    multi-line unit it is ordinary input.
    """
    try:
        line = read_line(prompt)
    except EOFError:
        raise InputEnd("end of input") from None
    if not line and not buffer:
        raise InputEnd("empty line")
    return line


async def run_interactive(
    state: REPLState | None = None,
    evaluator: Evaluator | None = None,
    read_line: Callable[[str], str] | None = None,
    config: EvalshConfig | None = None,
) -> None:
    """Run the read-eval-print loop until an empty line or end of input.

    Args:
        state: Optional REPL state to resume from.
        evaluator: Completeness checker and evaluator. Defaults to a
            PythonEvaluator over a namespace preloaded with HTTP helpers.
        read_line: Reads one line given a prompt. Defaults to input() with
            readline history.
        config: Resolved configuration. Loaded from the environment if None.
    """
    if config is None:
        config = load_config()
    if state is None:
        state = REPLState()

    if read_line is None:
        from evalsh.frontends.cli.repl.history import setup_readline

        setup_readline(config)
        read_line = input

    client: HttpClient | None = None
    if evaluator is None:
        from evalsh.frontends.cli.repl.namespace import build_namespace

        client = HttpClient(
            HttpClientConfig(
                base_url=config.server_url,
                connect_timeout=config.connect_timeout,
                read_timeout=config.read_timeout,
            )
        )

    buffer = ""
    interrupt_count = 0

    try:
        if client is not None:
            await client.connect()
            state.namespace.update(build_namespace(client, config))
            evaluator = PythonEvaluator(state.namespace)

        print_banner(config.server_url)

        while True:
            prompt = config.continuation_prompt if buffer else config.prompt
            try:
                line = _next_line(read_line, prompt, buffer)
                interrupt_count = 0
            except InputEnd as e:
                logger.debug("Session ended: %s", e)
                print(FAREWELL)
                break
            except KeyboardInterrupt:
                interrupt_count += 1
                if interrupt_count >= 2:
                    print(f"\n{FAREWELL}")
                    break
                print("\n(Press Ctrl-C again to exit, or continue typing)")
                buffer = ""
                continue

            buffer = f"{buffer}\n{line}" if buffer else line

            if not evaluator.is_complete(buffer):
                continue

            state.history.append(buffer)
            logger.debug("Evaluating unit %d: %r", len(state.history), buffer)
            try:
                value = await evaluator.evaluate(buffer)
            except EvaluationError as e:
                print(format_error(e.message))
            except KeyboardInterrupt:
                # Abandons the running unit; bindings made so far are kept
                print("\nKeyboardInterrupt")
            else:
                if value is not None:
                    state.remember(value)
                    print(format_value(value))
            finally:
                buffer = ""
    finally:
        if client is not None:
            await client.close()
