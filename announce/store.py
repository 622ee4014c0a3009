"""Categorized user messages kept in the session between requests."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import partial
from typing import Any, Callable

from announce.exceptions import FormattingError
from announce.session import SessionBackend

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = ("message",)
DEFAULT_SESSION_KEY = "user_message_store"

# category -> {message text -> category}; inner dicts act as ordered sets
Collection = dict[str, dict[str, str]]


class MessageStore:
    """
    Accumulate user-facing messages by category and hand them out once.

    Messages are persisted as one blob under ``session_key`` in the given
    session backend, so they survive a redirect. Every mutating call does a
    full read-modify-write of that blob; two requests of the same session
    writing at the same time may overwrite each other.

    Any public attribute that is not a method adds a message in the category
    of the same name::

        store.success("Saved %d items", 3)  # same as store.add("success", ...)
    """

    def __init__(
        self,
        session: SessionBackend,
        categories: Iterable[str] | None = None,
        session_key: str = DEFAULT_SESSION_KEY,
    ) -> None:
        self._session = session
        self._session_key = session_key
        if categories is None:
            categories = DEFAULT_CATEGORIES
        self._categories: list[str] = list(dict.fromkeys(categories))

        messages = self._load()
        if not messages:
            self.clear()
            return
        # Categories first used in an earlier request keep their position
        for category in messages:
            if category not in self._categories:
                self._categories.append(category)
        missing = [c for c in self._categories if c not in messages]
        if missing:
            for category in missing:
                messages[category] = {}
            self._save(messages)

    def __getattr__(self, name: str) -> Callable[..., MessageStore]:
        if name.startswith("_"):
            raise AttributeError(name)
        return partial(self.add, name)

    def __repr__(self) -> str:
        return f"<MessageStore key={self._session_key!r} categories={self._categories!r}>"

    @property
    def categories(self) -> tuple[str, ...]:
        """Known categories in retrieval order."""
        return tuple(self._categories)

    def add(
        self, category: str, message: str | list[str] | tuple[str, ...], data: Any = None
    ) -> MessageStore:
        """
        Add a message to ``category``.

        ``message`` may be a list or tuple of messages, added one by one
        (``data`` is not applied to them). When ``data`` is given, ``message``
        is a printf-style template; a list or tuple supplies the positional
        arguments, anything else is the single argument.
        """
        if isinstance(message, (list, tuple)):
            for item in message:
                self.add(category, item)
            return self

        if data is not None:
            message = _format(message, data)

        messages = self._load()
        if category not in self._categories:
            logger.debug("New message category %r", category)
            self._categories.append(category)
        messages.setdefault(category, {})[message] = category
        self._save(messages)
        return self

    def clear(self, category: str | None = None) -> MessageStore:
        """Remove messages of ``category``, or of every known category."""
        messages = self._load()
        targets = self._categories if category is None else [category]
        for target in targets:
            messages[target] = {}
        self._save(messages)
        logger.debug("Cleared messages: %s", ", ".join(targets) or "-")
        return self

    def count(self, category: str | None = None) -> int:
        """Number of messages in ``category``, or in all categories."""
        messages = self._load()
        if category is not None:
            return len(messages.get(category, {}))
        return sum(len(messages.get(c, {})) for c in self._categories)

    def peek(self, category: str | None = None) -> list[str]:
        """Messages of ``category`` (or all, in category order) without removing them."""
        messages = self._load()
        if category is not None:
            return list(messages.get(category, {}))
        return [text for c in self._categories for text in messages.get(c, {})]

    def get(self, category: str | None = None) -> list[str]:
        """Same as ``peek`` but removes the returned messages."""
        result = self.peek(category)
        self.clear(category)
        return result

    def has_messages(self, category: str | None = None) -> bool:
        return self.count(category) > 0

    def _load(self) -> Collection:
        stored = self._session.get(self._session_key) or {}
        return {category: dict(texts or {}) for category, texts in stored.items()}

    def _save(self, messages: Collection) -> None:
        self._session.set(self._session_key, messages)


def _format(template: str, data: Any) -> str:
    args = tuple(data) if isinstance(data, (list, tuple)) else (data,)
    try:
        return template % args
    except (TypeError, ValueError) as exc:
        raise FormattingError(template, data) from exc
