"""HTTP helpers preloaded into the shell environment."""

from evalsh.http.client import HttpClient, HttpClientConfig
from evalsh.http.database import Database, DatabaseError, make_docs
from evalsh.http.response import (
    HTTPResponse,
    ResponseParseError,
    parse_headers,
    parse_response,
)

__all__ = [
    "Database",
    "DatabaseError",
    "HTTPResponse",
    "HttpClient",
    "HttpClientConfig",
    "ResponseParseError",
    "make_docs",
    "parse_headers",
    "parse_response",
]
