"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from cookify.adapters.openai_client import OpenAIClient
from cookify.adapters.recipe_api_client import HttpxRecipeApiClient
from cookify.config import Settings
from cookify.services.chat import ChatOptions
from cookify.services.detection import DetectorStrategy, FoodDetectionService
from cookify.services.favorites import FavoritesStore, InMemoryFavoritesStore
from cookify.services.generation import RecipeGenerationService
from cookify.services.images import RecipeImageService
from cookify.services.meal_plans import MealPlanService
from cookify.services.recipe_search import RecipeSearchService
from cookify.services.suggestions import RecipeQueryService, SuggestionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    recipe_search_service: RecipeSearchService
    recipe_query_service: RecipeQueryService
    recipe_generation_service: RecipeGenerationService
    meal_plan_service: MealPlanService
    suggestion_service: SuggestionService
    detection_service: FoodDetectionService
    image_service: RecipeImageService
    favorites: FavoritesStore
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    recipe_api_client = HttpxRecipeApiClient.create(
        api_key=resolved_settings.spoonacular_api_key,
        base_url=resolved_settings.spoonacular_base_url,
    )
    openai_client = OpenAIClient.create(resolved_settings.openai_api_key)
    chat_options = ChatOptions(
        model=resolved_settings.openai_model,
        temperature=resolved_settings.openai_temperature,
    )
    recipe_search_service = RecipeSearchService(recipe_api_client)
    recipe_generation_service = RecipeGenerationService(
        client=openai_client, options=chat_options
    )
    meal_plan_service = MealPlanService(
        generator=recipe_generation_service,
        isolate_failures=resolved_settings.meal_plan_isolate_failures,
    )
    recipe_query_service = RecipeQueryService(
        client=openai_client,
        search_service=recipe_search_service,
        options=chat_options,
    )
    suggestion_service = SuggestionService(client=openai_client, options=chat_options)
    detection_service = FoodDetectionService(
        strategy=DetectorStrategy(resolved_settings.detector_strategy),
        client=openai_client,
        options=chat_options,
    )
    image_service = RecipeImageService(
        client=openai_client,
        model=resolved_settings.openai_image_model,
        size=resolved_settings.openai_image_size,
        quality=resolved_settings.openai_image_quality,
        style=resolved_settings.openai_image_style,
    )

    async def close_resources() -> None:
        await recipe_api_client.close()
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        recipe_search_service=recipe_search_service,
        recipe_query_service=recipe_query_service,
        recipe_generation_service=recipe_generation_service,
        meal_plan_service=meal_plan_service,
        suggestion_service=suggestion_service,
        detection_service=detection_service,
        image_service=image_service,
        favorites=InMemoryFavoritesStore(),
        close_resources=close_resources,
    )
