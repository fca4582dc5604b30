from zudora.ai.config import load_ai_config
from zudora.ai.types import SpeechSynthesis, TextCompletion, VoiceSessionProvider

from zudora.ai.providers.openai_provider import OpenAICompletion
from zudora.ai.providers.elevenlabs_provider import ElevenLabsSpeech
from zudora.ai.providers.vapi_provider import VapiVoiceSession


def get_completion_client() -> TextCompletion:
    cfg = load_ai_config()
    return OpenAICompletion(
        model=cfg.openai_model,
        api_key=cfg.openai_api_key,
        base_url=cfg.openai_base_url,
        timeout_s=cfg.timeout_s,
    )


def get_speech_client() -> SpeechSynthesis:
    cfg = load_ai_config()
    return ElevenLabsSpeech(cfg.elevenlabs_api_key, timeout_s=cfg.timeout_s)


def get_voice_session_client() -> VoiceSessionProvider:
    cfg = load_ai_config()
    return VapiVoiceSession(
        cfg.vapi_api_key,
        customer_number=cfg.vapi_customer_number,
        timeout_s=cfg.timeout_s,
    )
