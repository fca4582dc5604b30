from .controller import (
    EmptyMessageError,
    ReplyPendingError,
    SessionController,
    SessionError,
    SessionNotFoundError,
    summarize_title,
)
from .models import ConversationTurn, HistoryEntry, Session
from .store import HistoryStore, InMemoryHistoryStore, SqliteHistoryStore

__all__ = [
    "ConversationTurn",
    "EmptyMessageError",
    "HistoryEntry",
    "HistoryStore",
    "InMemoryHistoryStore",
    "ReplyPendingError",
    "Session",
    "SessionController",
    "SessionError",
    "SessionNotFoundError",
    "SqliteHistoryStore",
    "summarize_title",
]
