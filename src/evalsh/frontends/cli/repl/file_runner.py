"""Script file execution in a fresh shell environment."""

from __future__ import annotations

from pathlib import Path

from evalsh.config import EvalshConfig, load_config
from evalsh.core.errors import EvaluationError
from evalsh.core.evaluator import PythonEvaluator
from evalsh.frontends.cli.repl.display import format_error, format_value
from evalsh.frontends.cli.repl.namespace import build_namespace
from evalsh.http.client import HttpClient, HttpClientConfig


async def run_from_file(filepath: str, config: EvalshConfig | None = None) -> int:
    """Evaluate a script file with the shell's preloaded helpers.

    Top-level ``await`` is allowed, as at the prompt.

    Args:
        filepath: Path to the script.
        config: Resolved configuration. Loaded from the environment if None.

    Returns:
        Exit code: 0 on success, 1 on failure.
    """
    if config is None:
        config = load_config()

    try:
        source = Path(filepath).read_text(encoding="utf-8")
    except FileNotFoundError:
        print(format_error(f"File not found: {filepath}"))
        return 1
    except UnicodeDecodeError as e:
        print(format_error(f"Cannot decode {filepath}: {e}"))
        return 1
    except OSError as e:
        print(format_error(f"Cannot read {filepath}: {e.strerror or e}"))
        return 1

    async with HttpClient(
        HttpClientConfig(
            base_url=config.server_url,
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
        )
    ) as client:
        evaluator = PythonEvaluator(build_namespace(client, config), filename=filepath)
        try:
            value = await evaluator.evaluate(source)
        except EvaluationError as e:
            print(format_error(e.message))
            return 1

    if value is not None:
        print(format_value(value))
    return 0
