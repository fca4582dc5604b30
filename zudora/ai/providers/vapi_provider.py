from __future__ import annotations

import logging

import httpx

from zudora.ai.errors import AIConfigurationError, AIServiceError

logger = logging.getLogger(__name__)

VAPI_BASE_URL = "https://api.vapi.ai"


class VapiVoiceSession:
    def __init__(
        self,
        api_key: str | None,
        *,
        customer_number: str = "+1234567890",
        base_url: str = VAPI_BASE_URL,
        timeout_s: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        key = (api_key or "").strip()
        if not key:
            raise AIConfigurationError("Vapi API key not configured")
        self._api_key = key
        self._customer_number = customer_number
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._transport = transport

    async def start_session(self, assistant_id: str) -> str:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        body = {
            "assistantId": assistant_id,
            "customer": {"number": self._customer_number},
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout_s, transport=self._transport) as client:
                response = await client.post(f"{self._base_url}/call", headers=headers, json=body)
                data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Vapi API error: %s", exc)
            raise AIServiceError("Failed to initialize Vapi session") from exc
        if not isinstance(data, dict):
            return ""
        return str(data.get("id") or "")
