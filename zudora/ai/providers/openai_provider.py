from __future__ import annotations

import logging
from typing import Optional

from openai import AsyncOpenAI, OpenAIError

from zudora.ai.errors import AIConfigurationError, AIServiceError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are Zudora, an AI assistant specialized in Tamil Nadu Engineering Admissions (TNEA) "
    "college counseling. Help students find suitable engineering colleges based on their cutoff "
    "marks and category (OC, BC, BCM, MBC, SC, SCA, ST). Be friendly, helpful, and provide "
    "accurate information about college admissions."
)
FALLBACK_REPLY = "Sorry, I could not process your request."


class OpenAICompletion:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        max_tokens: int = 500,
        temperature: float = 0.7,
        client: Optional[AsyncOpenAI] = None,
    ):
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        if client is not None:
            self._client = client
            return
        key = (api_key or "").strip()
        if not key:
            raise AIConfigurationError("OpenAI API key not configured")
        self._client = AsyncOpenAI(api_key=key, base_url=base_url, timeout=timeout_s)

    async def complete(self, message: str) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": message},
                ],
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
        except OpenAIError as exc:
            logger.error("OpenAI API error: %s", exc)
            raise AIServiceError("Failed to process with OpenAI") from exc

        choices = getattr(response, "choices", None) or []
        if not choices:
            return FALLBACK_REPLY
        content = getattr(choices[0].message, "content", None)
        return content or FALLBACK_REPLY
