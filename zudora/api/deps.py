from __future__ import annotations

from functools import lru_cache

from zudora.catalog import Catalog, get_default_catalog
from zudora.core.config import settings
from zudora.intent.extraction import ScoreCategoryExtractor, build_extractor
from zudora.session import InMemoryHistoryStore, SessionController, SqliteHistoryStore
from zudora.session.store import HistoryStore


def get_catalog() -> Catalog:
    return get_default_catalog()


@lru_cache(maxsize=1)
def get_extractor() -> ScoreCategoryExtractor:
    return build_extractor(settings.extraction_strategy)


def _build_history_store() -> HistoryStore:
    if settings.history_backend == "memory":
        return InMemoryHistoryStore()
    return SqliteHistoryStore(settings.history_db_path)


@lru_cache(maxsize=1)
def get_session_controller() -> SessionController:
    return SessionController(
        get_default_catalog(),
        _build_history_store(),
        extractor=get_extractor(),
        reply_delay_s=settings.reply_delay_ms / 1000.0,
        title_max_chars=settings.history_title_max_chars,
        max_sessions=settings.session_max,
        session_ttl_s=settings.session_ttl_s,
    )
