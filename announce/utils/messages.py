"""Request-scoped access to the session message store."""

from __future__ import annotations

from typing import Any, TypedDict

from fastapi import Request

from announce.config import get_settings
from announce.session import MappingSession
from announce.store import MessageStore


class Message(TypedDict):
    level: str  # message category, e.g. info|success|warning|error
    text: str


def message_store(request: Request) -> MessageStore:
    """Return the message store for this request, creating it on first use."""
    store: MessageStore | None = getattr(request.state, "message_store", None)
    if store is None:
        settings = get_settings()
        store = MessageStore(
            MappingSession(request.session),
            categories=settings.message_categories,
            session_key=settings.message_session_key,
        )
        request.state.message_store = store
    return store


def add_message(request: Request, text: str, level: str = "message", data: Any = None) -> None:
    """Add a message to the session store."""
    message_store(request).add(level, text, data)


def pop_messages(request: Request) -> list[Message]:
    """Return and clear one-time messages for this request, grouped in category order."""
    store = message_store(request)
    if not store.has_messages():
        return []
    messages: list[Message] = [
        {"level": category, "text": text}
        for category in store.categories
        for text in store.peek(category)
    ]
    store.clear()
    return messages
