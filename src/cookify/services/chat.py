"""Interfaces for the chat-completion and image-generation services."""

import base64
from dataclasses import dataclass
from typing import Protocol

ChatMessage = dict[str, object]


class ChatClient(Protocol):
    """Interface for chat-completion calls."""

    async def complete(
        self,
        *,
        model: str,
        messages: list[ChatMessage],
        temperature: float,
    ) -> str:
        """Return the text of the first choice."""


class ImageClient(Protocol):
    """Interface for image generation calls."""

    async def generate_image(  # noqa: PLR0913
        self,
        *,
        model: str,
        prompt: str,
        size: str,
        quality: str,
        style: str,
    ) -> str:
        """Return the URL of a generated image."""


@dataclass(frozen=True)
class ChatOptions:
    """Model parameters shared by the services that call the chat API."""

    model: str = "gpt-4o-mini"
    temperature: float = 0.7


def system_message(text: str) -> ChatMessage:
    return {"role": "system", "content": text}


def user_message(text: str) -> ChatMessage:
    return {"role": "user", "content": text}


def image_message(prompt: str, image_bytes: bytes) -> ChatMessage:
    """Build a user message carrying an inline image."""
    return {
        "role": "user",
        "content": [
            {"type": "text", "text": prompt},
            {"type": "image_url", "image_url": {"url": to_data_url(image_bytes)}},
        ],
    }


def to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
