"""REPL state management."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class REPLState:
    """State for the REPL.

    The namespace is the persistent evaluation environment. ``last_value``
    mirrors the ``_`` binding inside it.
    """

    namespace: dict[str, Any] = field(default_factory=dict)
    history: list[str] = field(default_factory=list)
    last_value: Any = None

    def remember(self, value: Any) -> None:
        """Record the latest result and expose it to later input as ``_``."""
        self.last_value = value
        self.namespace["_"] = value
