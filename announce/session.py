"""Session collaborator used by the message store."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Protocol


class SessionBackend(Protocol):
    """Key/value storage scoped to one user session."""

    def get(self, key: str) -> Any: ...

    def set(self, key: str, data: Any) -> None: ...


class MappingSession:
    """Adapt a mutable mapping (e.g. Starlette's ``request.session``) to ``SessionBackend``."""

    def __init__(self, mapping: MutableMapping[str, Any]) -> None:
        self._mapping = mapping

    def get(self, key: str) -> Any:
        return self._mapping.get(key)

    def set(self, key: str, data: Any) -> None:
        self._mapping[key] = data
