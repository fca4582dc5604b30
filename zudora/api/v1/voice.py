import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
from pydantic import BaseModel, Field

from zudora.ai import factory
from zudora.ai.errors import AIConfigurationError, AIServiceError
from zudora.ai.types import DEFAULT_VOICE_SETTINGS, VoiceSettings
from zudora.core.security import require_api_key

router = APIRouter(dependencies=[Depends(require_api_key)])
logger = logging.getLogger(__name__)

_UNAVAILABLE = {
    "completion": "AI replies are not available right now. The college suggestions still work.",
    "speech": "Voice playback is not available right now. You can keep reading the replies.",
    "voice_session": "Voice conversations are not available right now. Please use text chat.",
}


class SpeechRequest(BaseModel):
    text: str = Field(min_length=1, max_length=5000)
    voice_id: str | None = None
    model: str | None = None
    stability: float | None = Field(default=None, ge=0.0, le=1.0)
    similarity_boost: float | None = Field(default=None, ge=0.0, le=1.0)

    def voice_settings(self) -> VoiceSettings:
        return VoiceSettings(
            voice_id=self.voice_id or DEFAULT_VOICE_SETTINGS.voice_id,
            model=self.model or DEFAULT_VOICE_SETTINGS.model,
            stability=DEFAULT_VOICE_SETTINGS.stability if self.stability is None else self.stability,
            similarity_boost=(
                DEFAULT_VOICE_SETTINGS.similarity_boost
                if self.similarity_boost is None
                else self.similarity_boost
            ),
        )


class VoiceSessionRequest(BaseModel):
    assistant_id: str = Field(min_length=1, max_length=200)


class AssistRequest(BaseModel):
    message: str = Field(min_length=1, max_length=2000)


def _unavailable(capability: str, exc: Exception) -> HTTPException:
    logger.info("%s capability unavailable: %s", capability, exc)
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=_UNAVAILABLE[capability])


def _failed(capability: str, exc: Exception) -> HTTPException:
    logger.warning("%s provider failed: %s", capability, exc)
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))


@router.post("/speech")
async def synthesize_speech(payload: SpeechRequest):
    try:
        client = factory.get_speech_client()
        audio = await client.synthesize(payload.text, payload.voice_settings())
    except AIConfigurationError as exc:
        raise _unavailable("speech", exc) from exc
    except AIServiceError as exc:
        raise _failed("speech", exc) from exc
    return Response(content=audio, media_type="audio/mpeg")


@router.post("/voice/sessions")
async def start_voice_session(payload: VoiceSessionRequest):
    try:
        client = factory.get_voice_session_client()
        call_id = await client.start_session(payload.assistant_id)
    except AIConfigurationError as exc:
        raise _unavailable("voice_session", exc) from exc
    except AIServiceError as exc:
        raise _failed("voice_session", exc) from exc
    return {"call_id": call_id}


@router.post("/assist")
async def assist(payload: AssistRequest):
    try:
        client = factory.get_completion_client()
        content = await client.complete(payload.message)
    except AIConfigurationError as exc:
        raise _unavailable("completion", exc) from exc
    except AIServiceError as exc:
        raise _failed("completion", exc) from exc
    return {"content": content}
