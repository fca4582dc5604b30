from __future__ import annotations

import asyncio
import json
import logging
import threading
from datetime import datetime, timedelta, timezone

from zudora.catalog.models import Catalog
from zudora.intent import replies
from zudora.intent.classifier import classify
from zudora.intent.extraction import FirstMatchExtractor, ScoreCategoryExtractor

from .models import ConversationTurn, HistoryEntry, Session
from .store import HistoryStore

logger = logging.getLogger(__name__)


class SessionError(Exception):
    pass


class SessionNotFoundError(SessionError):
    pass


class EmptyMessageError(SessionError):
    pass


class ReplyPendingError(SessionError):
    pass


def summarize_title(text: str, max_chars: int = 30) -> str:
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + "..."


class SessionController:
    """Owns the active chat sessions and the saved chat history.

    A session accepts one submission at a time: while a reply is being
    produced further submissions are rejected with ReplyPendingError.
    """

    def __init__(
        self,
        catalog: Catalog,
        history: HistoryStore,
        *,
        extractor: ScoreCategoryExtractor | None = None,
        reply_delay_s: float = 0.0,
        title_max_chars: int = 30,
        max_sessions: int = 1000,
        session_ttl_s: float = 3600.0,
    ) -> None:
        self._catalog = catalog
        self._history = history
        self._extractor = extractor or FirstMatchExtractor()
        self._reply_delay_s = max(0.0, reply_delay_s)
        self._title_max_chars = title_max_chars
        self._max_sessions = max(1, max_sessions)
        self._session_ttl = timedelta(seconds=session_ttl_s) if session_ttl_s > 0 else None
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _welcome_turn() -> ConversationTurn:
        return ConversationTurn(role="assistant", content=replies.WELCOME)

    def _evict_locked(self) -> list[str]:
        """Drop idle sessions, then the least recently active ones over the cap."""
        evicted: list[str] = []
        if self._session_ttl is not None:
            idle_before = datetime.now(timezone.utc) - self._session_ttl
            for session_id, session in list(self._sessions.items()):
                if not session.pending and session.last_active < idle_before:
                    del self._sessions[session_id]
                    evicted.append(session_id)

        overflow = len(self._sessions) - self._max_sessions + 1
        if overflow > 0:
            idle = sorted(
                (session for session in self._sessions.values() if not session.pending),
                key=lambda session: session.last_active,
            )
            for session in idle[:overflow]:
                del self._sessions[session.id]
                evicted.append(session.id)
        return evicted

    def start_session(self) -> Session:
        session = Session(messages=[self._welcome_turn()])
        with self._lock:
            evicted = self._evict_locked()
            self._sessions[session.id] = session
        if evicted:
            logger.info(json.dumps({"event": "sessions_evicted", "count": len(evicted)}))
        logger.info(json.dumps({"event": "session_started", "session_id": session.id}))
        return session

    def end_session(self, session_id: str) -> None:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                raise SessionNotFoundError(f"Unknown session '{session_id}'")
            if session.pending:
                raise ReplyPendingError("Wait for the current reply before closing this chat.")
            del self._sessions[session_id]
        logger.info(json.dumps({"event": "session_ended", "session_id": session_id}))

    @property
    def session_count(self) -> int:
        with self._lock:
            return len(self._sessions)

    def get_session(self, session_id: str) -> Session:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(f"Unknown session '{session_id}'")
        return session

    def _begin_submission(self, session_id: str, text: str | None) -> tuple[Session, ConversationTurn]:
        content = (text or "").strip()
        if not content:
            raise EmptyMessageError("Please type a message.")
        session = self.get_session(session_id)
        with self._lock:
            if session.pending:
                raise ReplyPendingError("A reply is already being prepared for this session.")
            session.pending = True
            session.touch()
            user_turn = ConversationTurn(role="user", content=content)
            session.messages.append(user_turn)
        return session, user_turn

    async def submit(self, session_id: str, text: str | None) -> tuple[ConversationTurn, ConversationTurn]:
        session, user_turn = self._begin_submission(session_id, text)
        try:
            if self._reply_delay_s:
                await asyncio.sleep(self._reply_delay_s)
            reply = classify(user_turn.content, self._catalog, self._extractor)
            assistant_turn = ConversationTurn(
                role="assistant",
                content=reply.content,
                suggestions=reply.suggestions,
            )
            with self._lock:
                session.messages.append(assistant_turn)
        except BaseException:
            # A user turn never stands without its reply.
            with self._lock:
                if user_turn in session.messages:
                    session.messages.remove(user_turn)
            raise
        finally:
            session.touch()
            session.pending = False

        logger.info(
            json.dumps(
                {
                    "event": "session_reply",
                    "session_id": session.id,
                    "intent": reply.intent,
                    "suggestions": len(reply.suggestions or []),
                    "turns": len(session.messages),
                }
            )
        )
        return user_turn, assistant_turn

    def reset_session(self, session_id: str) -> tuple[Session, HistoryEntry | None]:
        """Start a new chat in place, saving the current one to history if it has user turns."""
        session = self.get_session(session_id)
        saved: HistoryEntry | None = None
        with self._lock:
            if session.pending:
                raise ReplyPendingError("Wait for the current reply before starting a new chat.")
            user_turns = session.user_turns()
            if user_turns:
                saved = HistoryEntry(title=summarize_title(user_turns[0].content, self._title_max_chars))
            session.messages = [self._welcome_turn()]
            session.touch()
        if saved is not None:
            self._history.add(saved)
        logger.info(
            json.dumps(
                {"event": "session_reset", "session_id": session.id, "saved": saved is not None}
            )
        )
        return session, saved

    def list_history(self) -> list[HistoryEntry]:
        return self._history.entries()

    def delete_history(self) -> None:
        self._history.clear()
        logger.info(json.dumps({"event": "history_cleared"}))

    def close(self) -> None:
        close = getattr(self._history, "close", None)
        if callable(close):
            close()
