"""Interactive REPL for evalsh.

Public API:
    run_interactive: Main interactive REPL function
    run_from_file: Execute a script file
    REPLState: REPL state management
    build_namespace: Preloaded evaluation environment
"""

from __future__ import annotations

from evalsh.frontends.cli.repl.core import run_interactive
from evalsh.frontends.cli.repl.file_runner import run_from_file
from evalsh.frontends.cli.repl.namespace import build_namespace
from evalsh.frontends.cli.repl.state import REPLState

__all__ = [
    "run_interactive",
    "run_from_file",
    "REPLState",
    "build_namespace",
]
