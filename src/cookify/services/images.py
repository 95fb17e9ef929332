"""AI-generated recipe images."""

import logging
from dataclasses import dataclass

from cookify.services.chat import ImageClient
from cookify.services.formatting import truncate_text

_logger = logging.getLogger(__name__)


def build_image_prompt(title: str) -> str:
    return (
        f"A professional, appetizing food photograph of {truncate_text(title, 200)}, "
        "plated on a clean table, natural light, high detail, no text."
    )


@dataclass
class RecipeImageService:
    """Generates a picture for a recipe title."""

    client: ImageClient
    model: str = "dall-e-3"
    size: str = "1024x1024"
    quality: str = "standard"
    style: str = "natural"

    async def generate(self, title: str) -> str | None:
        """Return an image URL, or ``None`` so callers show a stock image."""
        try:
            return await self.client.generate_image(
                model=self.model,
                prompt=build_image_prompt(title),
                size=self.size,
                quality=self.quality,
                style=self.style,
            )
        except Exception:
            _logger.exception("Recipe image generation failed", extra={"title": title})
            return None
