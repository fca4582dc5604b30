import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from zudora.api.v1.health import router as health_router
from zudora.api.v1.chat import router as chat_router
from zudora.api.v1.colleges import router as colleges_router
from zudora.api.v1.sessions import router as sessions_router
from zudora.api.v1.voice import router as voice_router
from zudora.core.cors import cors_allowed_origins
from zudora.core.rate_limit import limiter
from zudora.core.config import settings
from zudora.core.lifespan import lifespan

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="Zudora College Assistant API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(chat_router, prefix="/v1", tags=["Chat"])
app.include_router(colleges_router, prefix="/v1", tags=["Colleges"])
app.include_router(sessions_router, prefix="/v1", tags=["Sessions"])
app.include_router(voice_router, prefix="/v1", tags=["Voice"])
