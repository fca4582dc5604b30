from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class VoiceSettings:
    voice_id: str
    model: str
    stability: float
    similarity_boost: float


DEFAULT_VOICE_SETTINGS = VoiceSettings(
    voice_id="9BWtsMINqrJLrRacOk9x",
    model="eleven_multilingual_v2",
    stability=0.5,
    similarity_boost=0.8,
)


class TextCompletion(Protocol):
    async def complete(self, message: str) -> str: ...


class SpeechSynthesis(Protocol):
    async def synthesize(self, text: str, voice: VoiceSettings = DEFAULT_VOICE_SETTINGS) -> bytes: ...


class VoiceSessionProvider(Protocol):
    async def start_session(self, assistant_id: str) -> str: ...
