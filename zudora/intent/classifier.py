"""Rule-based reply generation for the chat assistant.

Rules are checked in a fixed order and the first one that fires decides the
reply: greeting, small talk, score + category, college question, help.
"""

from __future__ import annotations

import hashlib
import json
import logging
import re
from enum import Enum

from zudora.catalog.models import Catalog
from zudora.core.assistant_config import get_assistant_value
from zudora.intent import replies
from zudora.intent.extraction import FirstMatchExtractor, ScoreCategoryExtractor
from zudora.matching.cutoff_matcher import match
from zudora.schemas.chat import Reply

logger = logging.getLogger("zudora.intent")


class IntentType(str, Enum):
    GREETING = "greeting"
    SMALL_TALK = "small_talk"
    SUGGESTIONS = "suggestions"
    NO_MATCH = "no_match"
    COLLEGE_QUERY = "college_query"
    HELP = "help"


def _word_pattern(tokens: list[str]) -> re.Pattern[str]:
    alternation = "|".join(re.escape(token.lower()) for token in tokens)
    return re.compile(rf"\b(?:{alternation})(?![a-z])")


_GREETING_RE = _word_pattern(get_assistant_value("intents.greeting_tokens", ["hi", "hello", "hey"]))
_SMALL_TALK_PHRASES: tuple[str, ...] = tuple(
    phrase.lower()
    for phrase in get_assistant_value("intents.small_talk_phrases", ["how are you", "how do you do"])
)
_COLLEGE_KEYWORDS: tuple[str, ...] = tuple(
    keyword.lower()
    for keyword in get_assistant_value("intents.college_keywords", ["college", "engineering", "cutoff"])
)

_default_extractor = FirstMatchExtractor()


def _short_hash(value: str) -> str:
    if not value:
        return ""
    return hashlib.sha256(value.encode("utf-8")).hexdigest()[:12]


def _log_intent(text: str, intent: IntentType, **extra: object) -> None:
    logger.debug(
        json.dumps(
            {
                "event": "intent_classified",
                "intent": intent.value,
                "message_len": len(text),
                "message_hash": _short_hash(text),
                **extra,
            }
        )
    )


def classify(
    text: str | None,
    catalog: Catalog,
    extractor: ScoreCategoryExtractor | None = None,
) -> Reply:
    lowered = (text or "").lower()

    if _GREETING_RE.search(lowered):
        _log_intent(lowered, IntentType.GREETING)
        return Reply(content=replies.GREETING, intent=IntentType.GREETING.value)

    if any(phrase in lowered for phrase in _SMALL_TALK_PHRASES):
        _log_intent(lowered, IntentType.SMALL_TALK)
        return Reply(content=replies.SMALL_TALK, intent=IntentType.SMALL_TALK.value)

    extracted = (extractor or _default_extractor).extract(lowered)
    if extracted is not None:
        suggestions = match(extracted.score, extracted.category, catalog)
        if suggestions:
            _log_intent(
                lowered,
                IntentType.SUGGESTIONS,
                score=extracted.score,
                category=extracted.category,
                results=len(suggestions),
            )
            return Reply(
                content=replies.suggestions_found(extracted.score, extracted.category, len(suggestions)),
                intent=IntentType.SUGGESTIONS.value,
                suggestions=suggestions,
            )
        _log_intent(lowered, IntentType.NO_MATCH, score=extracted.score, category=extracted.category)
        return Reply(
            content=replies.no_match(extracted.score, extracted.category),
            intent=IntentType.NO_MATCH.value,
        )

    if any(keyword in lowered for keyword in _COLLEGE_KEYWORDS):
        _log_intent(lowered, IntentType.COLLEGE_QUERY)
        return Reply(content=replies.COLLEGE_QUERY, intent=IntentType.COLLEGE_QUERY.value)

    _log_intent(lowered, IntentType.HELP)
    return Reply(content=replies.HELP, intent=IntentType.HELP.value)
