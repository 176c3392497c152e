"""Thin client for a document database over HttpClient.

Wraps the handful of endpoints the shell and the integration tests use:
database lifecycle, document save/open, views and purge.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote

from evalsh.core.errors import EvalshError
from evalsh.http.client import HttpClient
from evalsh.http.response import HTTPResponse

logger = logging.getLogger(__name__)

DESIGN_PREFIX = "_design/"


class DatabaseError(EvalshError):
    """Raised when the database answers with a non-success status."""

    def __init__(self, status: int, error: str, reason: str = ""):
        super().__init__(f"{status} {error}: {reason}" if reason else f"{status} {error}")
        self.status = status
        self.error = error
        self.reason = reason

    @classmethod
    def from_response(cls, response: HTTPResponse) -> DatabaseError:
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict):
            return cls(response.status, str(data.get("error", "unknown")), str(data.get("reason", "")))
        return cls(response.status, response.reason or "error", response.body)


def make_docs(start: int, end: int) -> list[dict[str, Any]]:
    """Build simple test documents for ids start..end-1."""
    return [{"_id": str(i), "integer": i, "string": str(i)} for i in range(start, end)]


def doc_path(doc_id: str) -> str:
    """URL path segment for a document id; design doc slashes are kept."""
    if doc_id.startswith(DESIGN_PREFIX):
        return DESIGN_PREFIX + quote(doc_id[len(DESIGN_PREFIX) :], safe="")
    return quote(doc_id, safe="")


class Database:
    """One named database on the server the HttpClient points at."""

    def __init__(self, client: HttpClient, name: str):
        self.client = client
        self.name = name

    def __repr__(self) -> str:
        return f"Database({self.name!r})"

    @property
    def uri(self) -> str:
        return "/" + quote(self.name, safe="")

    def _checked(self, response: HTTPResponse) -> Any:
        if not response.ok:
            raise DatabaseError.from_response(response)
        return response.json()

    async def create(self) -> dict[str, Any]:
        logger.debug("Creating database %s", self.name)
        return self._checked(await self.client.put(self.uri))

    async def delete(self) -> bool:
        """Delete the database. Returns False if it did not exist."""
        response = await self.client.delete(self.uri)
        if response.status == 404:
            return False
        self._checked(response)
        return True

    async def info(self) -> dict[str, Any]:
        return self._checked(await self.client.get(self.uri))

    async def save(self, doc: dict[str, Any]) -> dict[str, Any]:
        """Create or update a document, recording its new id and revision on it."""
        if "_id" in doc:
            response = await self.client.put(f"{self.uri}/{doc_path(doc['_id'])}", payload=doc)
        else:
            response = await self.client.post(self.uri, payload=doc)
        result = self._checked(response)
        doc["_id"] = result["id"]
        doc["_rev"] = result["rev"]
        return result

    async def bulk_save(self, docs: list[dict[str, Any]]) -> list[dict[str, Any]]:
        response = await self.client.post(f"{self.uri}/_bulk_docs", payload={"docs": docs})
        results = self._checked(response)
        for doc, result in zip(docs, results):
            if "rev" in result:
                doc["_id"] = result["id"]
                doc["_rev"] = result["rev"]
        return results

    async def open(self, doc_id: str) -> dict[str, Any] | None:
        """Fetch a document, or None if it does not exist."""
        response = await self.client.get(f"{self.uri}/{doc_path(doc_id)}")
        if response.status == 404:
            return None
        return self._checked(response)

    async def view(self, name: str, **params: Any) -> dict[str, Any]:
        """Query a view by "design/view" name.

        Query parameter values are JSON encoded (keys, limits, flags).
        """
        design, sep, view = name.partition("/")
        if not sep or not view:
            raise ValueError(f"View name must look like 'design/view': {name!r}")
        query = {key: json.dumps(value) for key, value in params.items()}
        path = f"{self.uri}/{DESIGN_PREFIX}{quote(design, safe='')}/_view/{quote(view, safe='')}"
        return self._checked(await self.client.get(path, params=query or None))

    async def purge(self, revs: dict[str, list[str]]) -> dict[str, Any]:
        """Remove documents and their edit history.

        Args:
            revs: Mapping of document id to the revisions to purge.
        """
        logger.debug("Purging %d document(s) from %s", len(revs), self.name)
        return self._checked(await self.client.post(f"{self.uri}/_purge", payload=revs))
