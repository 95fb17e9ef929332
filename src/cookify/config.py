"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str
    openai_model: str = "gpt-4o-mini"
    openai_temperature: float = 0.7
    openai_image_model: str = "dall-e-3"
    openai_image_size: str = "1024x1024"
    openai_image_quality: str = "standard"
    openai_image_style: str = "natural"
    spoonacular_api_key: str
    spoonacular_base_url: str = "https://api.spoonacular.com"
    detector_strategy: Literal["mock", "vision"] = "mock"
    meal_plan_isolate_failures: bool = False
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        env_prefix="COOKIFY_",
        extra="ignore",
    )
