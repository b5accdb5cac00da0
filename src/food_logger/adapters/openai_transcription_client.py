"""OpenAI Whisper client for speech-to-text."""

from dataclasses import dataclass
from typing import Protocol

import httpx
from openai import AsyncOpenAI

from food_logger.domain.nutrition import TranscriptionResult


class TranscriptionClient(Protocol):
    """Interface for speech-to-text transcription."""

    async def transcribe(
        self,
        *,
        model: str,
        audio: bytes,
        filename: str,
        language: str | None,
    ) -> TranscriptionResult:
        """Return the transcript of an audio recording."""


@dataclass
class OpenAITranscriptionClient(TranscriptionClient):
    """Transcription client backed by the OpenAI audio API."""

    client: AsyncOpenAI

    @classmethod
    def create(
        cls, api_key: str, timeout_seconds: float
    ) -> "OpenAITranscriptionClient":
        """Create a client with its own managed httpx session."""
        http_client = httpx.AsyncClient(timeout=timeout_seconds)
        return cls(client=AsyncOpenAI(api_key=api_key, http_client=http_client))

    async def transcribe(
        self,
        *,
        model: str,
        audio: bytes,
        filename: str,
        language: str | None,
    ) -> TranscriptionResult:
        """Upload audio bytes as-is and return text plus detected language."""
        request: dict[str, object] = {
            "file": (filename, audio),
            "model": model,
            "response_format": "verbose_json",
        }
        if language:
            request["language"] = language
        transcription = await self.client.audio.transcriptions.create(**request)
        text = getattr(transcription, "text", None)
        if text is None:
            raise RuntimeError("OpenAI returned no transcription text")
        return TranscriptionResult(
            text=text, language=getattr(transcription, "language", None)
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
