from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal
import uuid

from zudora.schemas.chat import Suggestion

Role = Literal["user", "assistant"]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class ConversationTurn:
    role: Role
    content: str
    suggestions: list[Suggestion] | None = None
    id: str = field(default_factory=_new_id)
    timestamp: datetime = field(default_factory=_utc_now)


@dataclass
class Session:
    id: str = field(default_factory=_new_id)
    messages: list[ConversationTurn] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utc_now)
    last_active: datetime = field(default_factory=_utc_now)
    pending: bool = False

    def touch(self) -> None:
        self.last_active = _utc_now()

    def user_turns(self) -> list[ConversationTurn]:
        return [turn for turn in self.messages if turn.role == "user"]


@dataclass(frozen=True)
class HistoryEntry:
    title: str
    id: str = field(default_factory=_new_id)
    timestamp: datetime = field(default_factory=_utc_now)
