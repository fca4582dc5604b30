import os
from dataclasses import dataclass


def _env(name: str) -> str | None:
    value = (os.getenv(name) or "").strip()
    return value or None


@dataclass(frozen=True)
class AIConfig:
    openai_api_key: str | None
    openai_model: str
    openai_base_url: str | None
    elevenlabs_api_key: str | None
    vapi_api_key: str | None
    vapi_customer_number: str
    timeout_s: float


def load_ai_config() -> AIConfig:
    return AIConfig(
        openai_api_key=_env("OPENAI_API_KEY"),
        openai_model=os.getenv("AI_MODEL", "gpt-4.1-2025-04-14").strip(),
        openai_base_url=_env("OPENAI_BASE_URL"),
        elevenlabs_api_key=_env("ELEVENLABS_API_KEY"),
        vapi_api_key=_env("VAPI_API_KEY"),
        vapi_customer_number=os.getenv("VAPI_CUSTOMER_NUMBER", "+1234567890").strip(),
        timeout_s=float(os.getenv("AI_TIMEOUT_S", "30")),
    )
