"""OpenAI chat completions client for free-text generation."""

from dataclasses import dataclass
from typing import Protocol

import httpx
from openai import AsyncOpenAI


class TextGenerationClient(Protocol):
    """Interface for a model that answers one system + user message pair."""

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        system_prompt: str,
        user_message: str,
        temperature: float,
        max_tokens: int,
    ) -> str | None:
        """Return the model's raw text reply, or None when it has no content."""


@dataclass
class OpenAITextClient(TextGenerationClient):
    """Text generation client backed by OpenAI chat completions."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str, timeout_seconds: float) -> "OpenAITextClient":
        """Create a client with its own managed httpx session."""
        http_client = httpx.AsyncClient(timeout=timeout_seconds)
        return cls(client=AsyncOpenAI(api_key=api_key, http_client=http_client))

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        system_prompt: str,
        user_message: str,
        temperature: float,
        max_tokens: int,
    ) -> str | None:
        """Send a single-turn chat completion and return the reply text."""
        completion = await self.client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        if not completion.choices:
            return None
        return completion.choices[0].message.content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
