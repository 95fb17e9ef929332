"""OpenAI client for chat completions and image generation."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from cookify.services.chat import ChatClient, ChatMessage, ImageClient


@dataclass
class OpenAIClient(ChatClient, ImageClient):
    """Chat and image client backed by the OpenAI API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIClient":
        """Create an OpenAI client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def complete(
        self,
        *,
        model: str,
        messages: list[ChatMessage],
        temperature: float,
    ) -> str:
        """Call the chat completions endpoint and return the first choice."""
        response = await self.client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
        )
        if not response.choices:
            raise RuntimeError("OpenAI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise RuntimeError("OpenAI returned an empty response")
        return content

    async def generate_image(  # noqa: PLR0913
        self,
        *,
        model: str,
        prompt: str,
        size: str,
        quality: str,
        style: str,
    ) -> str:
        """Generate a single image and return its URL."""
        response = await self.client.images.generate(
            model=model,
            prompt=prompt,
            n=1,
            size=size,
            quality=quality,
            style=style,
        )
        if not response.data or not response.data[0].url:
            raise RuntimeError("OpenAI returned no image URL")
        return response.data[0].url

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
