from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from zudora.catalog.models import CategoryCode

Role = Literal["user", "assistant"]
IntentName = Literal["greeting", "small_talk", "suggestions", "no_match", "college_query", "help"]


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    college_name: str
    branch_name: str
    cutoff: float
    address: str


class Reply(BaseModel):
    content: str
    intent: IntentName
    suggestions: list[Suggestion] | None = None


class ChatRequest(BaseModel):
    message: str = Field(default="", max_length=2000)


class MatchResponse(BaseModel):
    score: float
    category: CategoryCode
    suggestions: list[Suggestion] = Field(default_factory=list)


class ConversationTurnOut(BaseModel):
    id: str
    role: Role
    content: str
    timestamp: datetime
    suggestions: list[Suggestion] | None = None


class SessionOut(BaseModel):
    id: str
    created_at: datetime
    pending: bool
    messages: list[ConversationTurnOut] = Field(default_factory=list)


class ExchangeOut(BaseModel):
    user: ConversationTurnOut
    assistant: ConversationTurnOut


class HistoryEntryOut(BaseModel):
    id: str
    title: str
    timestamp: datetime


class ResetOut(BaseModel):
    session: SessionOut
    saved: HistoryEntryOut | None = None
