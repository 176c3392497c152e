"""evalsh - Interactive Python shell for HTTP document databases.

Layers:
    core/       Evaluation (completeness check, evaluator, errors, logging)
    http/       HTTP client, raw response parser, database client
    frontends/  User interfaces (CLI and REPL)

Key Concepts:
    Evaluator:  Decides when buffered input is complete and evaluates it
    REPLState:  Persistent namespace, last value and history of a session
    HttpClient: Verb helpers returning structured HTTPResponse objects

Quick Start (evaluate against a namespace):
    >>> from evalsh import PythonEvaluator
    >>> evaluator = PythonEvaluator({})
    >>> evaluator.is_complete("x = (1 +")
    False
    >>> await evaluator.evaluate("1 + 1")
    2

With HTTP helpers:
    >>> from evalsh import Database, HttpClient, HttpClientConfig
    >>> async with HttpClient(HttpClientConfig("http://127.0.0.1:5984")) as http:
    ...     info = await Database(http, "test_suite_db").info()
"""

from evalsh.__version__ import __version__
from evalsh.core import (
    ConfigError,
    EvalshError,
    EvaluationError,
    Evaluator,
    InputEnd,
    PythonEvaluator,
)
from evalsh.http import (
    Database,
    DatabaseError,
    HTTPResponse,
    HttpClient,
    HttpClientConfig,
    ResponseParseError,
    make_docs,
    parse_headers,
    parse_response,
)

__all__ = [
    "__version__",
    # Evaluation
    "Evaluator",
    "PythonEvaluator",
    # Errors
    "EvalshError",
    "EvaluationError",
    "InputEnd",
    "ConfigError",
    "DatabaseError",
    "ResponseParseError",
    # HTTP
    "HttpClient",
    "HttpClientConfig",
    "HTTPResponse",
    "parse_response",
    "parse_headers",
    "Database",
    "make_docs",
]
