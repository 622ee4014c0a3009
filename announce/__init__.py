"""Session-backed, categorized one-time messages for web applications."""

from announce.exceptions import FormattingError
from announce.session import MappingSession, SessionBackend
from announce.store import MessageStore

__all__ = ["FormattingError", "MappingSession", "MessageStore", "SessionBackend"]
