"""The text-to-speech endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .endpoint import ApiRequest


class SpeechModel(str, Enum):
    TTS_1 = "tts-1"
    TTS_1_HD = "tts-1-hd"
    CANARY = "canary-tts"


class SpeechVoice(str, Enum):
    ALLOY = "alloy"
    ECHO = "echo"
    FABLE = "fable"
    ONYX = "onyx"
    NOVA = "nova"
    SHIMMER = "shimmer"


class SpeechResponseFormat(str, Enum):
    MP3 = "mp3"
    OPUS = "opus"
    AAC = "aac"
    FLAC = "flac"
    WAV = "wav"
    PCM = "pcm"


def _value(item: Any) -> Any:
    return item.value if isinstance(item, Enum) else item


@dataclass
class CreateSpeechRequest:
    """Text to speak; format defaults to mp3 and speed to 1.0 on the server."""

    model: SpeechModel | str
    input: str
    voice: SpeechVoice | str
    response_format: SpeechResponseFormat | str | None = None
    speed: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "model": _value(self.model),
            "input": self.input,
            "voice": _value(self.voice),
        }
        if self.response_format:
            out["response_format"] = _value(self.response_format)
        if self.speed:
            out["speed"] = self.speed
        return out


def create_speech(request: CreateSpeechRequest) -> ApiRequest:
    """Request spoken audio; the response body is the raw audio."""
    return ApiRequest(
        "POST",
        "/audio/speech",
        body=request.to_dict(),
        headers={"Content-Type": "application/json"},
        model=str(_value(request.model)),
    )