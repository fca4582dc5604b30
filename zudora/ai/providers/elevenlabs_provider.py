from __future__ import annotations

import logging

import httpx

from zudora.ai.errors import AIConfigurationError, AIServiceError
from zudora.ai.types import DEFAULT_VOICE_SETTINGS, VoiceSettings

logger = logging.getLogger(__name__)

ELEVENLABS_BASE_URL = "https://api.elevenlabs.io"


class ElevenLabsSpeech:
    def __init__(
        self,
        api_key: str | None,
        *,
        base_url: str = ELEVENLABS_BASE_URL,
        timeout_s: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        key = (api_key or "").strip()
        if not key:
            raise AIConfigurationError("ElevenLabs API key not configured")
        self._api_key = key
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._transport = transport

    async def synthesize(self, text: str, voice: VoiceSettings = DEFAULT_VOICE_SETTINGS) -> bytes:
        url = f"{self._base_url}/v1/text-to-speech/{voice.voice_id}"
        headers = {
            "Accept": "audio/mpeg",
            "Content-Type": "application/json",
            "xi-api-key": self._api_key,
        }
        body = {
            "text": text,
            "model_id": voice.model,
            "voice_settings": {
                "stability": voice.stability,
                "similarity_boost": voice.similarity_boost,
            },
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout_s, transport=self._transport) as client:
                response = await client.post(url, headers=headers, json=body)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("ElevenLabs API error: %s", exc)
            raise AIServiceError("Failed to synthesize speech") from exc
        return response.content
