"""Initial bindings for the evaluation environment."""

from __future__ import annotations

import asyncio
import builtins
import json
from typing import Any

from evalsh.config import EvalshConfig
from evalsh.frontends.cli.repl.display import print_help
from evalsh.http import (
    Database,
    HTTPResponse,
    HttpClient,
    make_docs,
    parse_headers,
    parse_response,
)


def build_namespace(client: HttpClient, config: EvalshConfig) -> dict[str, Any]:
    """Create the namespace a fresh session starts with.

    Args:
        client: HttpClient the helpers are bound to.
        config: Resolved configuration, exposed as ``config``.
    """

    def shell_help(*args: Any) -> None:
        """Show shell usage, or builtin help for an object."""
        if args:
            builtins.help(*args)
        else:
            print_help()

    def db(name: str) -> Database:
        """Database client for ``name`` on the configured server."""
        return Database(client, name)

    return {
        "__name__": "__evalsh__",
        "asyncio": asyncio,
        "json": json,
        # HTTP helpers
        "http": client,
        "HTTPResponse": HTTPResponse,
        "parse_response": parse_response,
        "parse_headers": parse_headers,
        # Database helpers
        "Database": Database,
        "db": db,
        "make_docs": make_docs,
        # Session
        "config": config,
        "help": shell_help,
    }
