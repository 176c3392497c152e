"""Display and output formatting utilities for REPL."""

from __future__ import annotations

import json
import pprint
from dataclasses import asdict, is_dataclass
from typing import Any

from evalsh.__version__ import __version__

FAREWELL = "exiting"
ERROR_PREFIX = "ERROR: "
PPRINT_WIDTH = 100

HELP_TEXT = """
evalsh - interactive Python shell for HTTP document databases

Pre-loaded:
  http          HttpClient bound to the server URL
  db(name)      Database client for one database
  Database, HTTPResponse, parse_response, parse_headers, make_docs
  json, asyncio, config

Examples:
  resp = await http.get("/")
  resp.status, resp.json()
  test = db("test_suite_db")
  await test.create()
  await test.bulk_save(make_docs(1, 11))
  await test.info()

Multi-line input continues until the statement is complete; finish
blocks with an empty line. The last result is available as _.

An empty line at the prompt exits.
"""


def format_value(value: Any) -> str:
    """Render a result for REPL display.

    Dataclass instances (HTTPResponse included) are shown as indented JSON
    when their fields serialize cleanly. Plain containers go through
    pprint so Python keys and literals keep their own spelling.
    """
    if is_dataclass(value) and not isinstance(value, type):
        try:
            return json.dumps(asdict(value), indent=2)
        except (TypeError, ValueError):
            return repr(value)
    if isinstance(value, (dict, list, tuple, set, frozenset)):
        return pprint.pformat(value, width=PPRINT_WIDTH, sort_dicts=False)
    return repr(value)


def format_error(message: str) -> str:
    return f"{ERROR_PREFIX}{message}"


def print_banner(server_url: str) -> None:
    """Print startup message."""
    print(f"evalsh {__version__}")
    print(f"Server: {server_url} | help() for usage, empty line to exit\n")


def print_help() -> None:
    """Print usage help."""
    print(HELP_TEXT)
