"""Shared test fixtures."""

import json
import random
from dataclasses import dataclass, field

import pytest

from cookify.adapters.recipe_api_client import RecipeApiClient
from cookify.config import Settings
from cookify.containers import AppContainer
from cookify.services.chat import ChatClient, ChatMessage, ChatOptions, ImageClient
from cookify.services.detection import FoodDetectionService, MockFoodDetector
from cookify.services.favorites import InMemoryFavoritesStore
from cookify.services.generation import RecipeGenerationService
from cookify.services.images import RecipeImageService
from cookify.services.meal_plans import MealPlanService
from cookify.services.recipe_search import RecipeSearchService
from cookify.services.suggestions import RecipeQueryService, SuggestionService


def recipe_json(title: str = "Chicken rice bowl", calories: int = 500) -> dict:
    return {
        "title": title,
        "ingredients": ["chicken", "rice"],
        "macros": {"calories": calories, "protein": 40, "carbs": 50, "fat": 12},
    }


def recipes_response(count: int = 3, calories: int = 500) -> str:
    payload = [recipe_json(f"Recipe {index}", calories) for index in range(count)]
    return "Here you go:\n```json\n" + json.dumps(payload) + "\n```"


@dataclass
class FakeChatClient(ChatClient):
    """Chat client that replays scripted responses and records calls.

    A response that is an exception instance is raised instead of returned.
    When the script runs out, ``default`` is used.
    """

    responses: list[object] = field(default_factory=list)
    default: object = field(default_factory=recipes_response)
    calls: list[list[ChatMessage]] = field(default_factory=list)

    async def complete(
        self,
        *,
        model: str,
        messages: list[ChatMessage],
        temperature: float,
    ) -> str:
        self.calls.append(messages)
        response = self.responses.pop(0) if self.responses else self.default
        if isinstance(response, Exception):
            raise response
        return response


@dataclass
class FakeImageClient(ImageClient):
    url: str = "https://images.test/recipe.png"
    error: Exception | None = None
    prompts: list[str] = field(default_factory=list)

    async def generate_image(  # noqa: PLR0913
        self,
        *,
        model: str,
        prompt: str,
        size: str,
        quality: str,
        style: str,
    ) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.url


def api_recipe(recipe_id: int, title: str = "Pasta") -> dict[str, object]:
    return {
        "id": recipe_id,
        "title": title,
        "image": f"https://img.test/{recipe_id}.jpg",
        "imageType": "jpg",
        "readyInMinutes": 20,
        "servings": 2,
        "nutrition": {
            "nutrients": [
                {"name": "Calories", "amount": 412.46, "unit": "kcal"},
                {"name": "Protein", "amount": 21.04, "unit": "g"},
            ]
        },
    }


@dataclass
class FakeRecipeApiClient(RecipeApiClient):
    """Recipe API fake with in-memory responses."""

    search_results: list[dict[str, object]] = field(
        default_factory=lambda: [api_recipe(1, "Pasta"), api_recipe(2, "Salad")]
    )
    ingredient_matches: list[dict[str, object]] = field(
        default_factory=lambda: [{"id": 1}, {"id": 2}]
    )
    missing_ids: set[int] = field(default_factory=set)
    error: Exception | None = None
    search_params: list[dict[str, str]] = field(default_factory=list)
    ingredient_queries: list[list[str]] = field(default_factory=list)

    async def complex_search(
        self, params: dict[str, str], number: int = 10
    ) -> dict[str, object]:
        if self.error is not None:
            raise self.error
        self.search_params.append(params)
        return {
            "results": self.search_results,
            "totalResults": len(self.search_results),
        }

    async def find_by_ingredients(
        self, ingredients: list[str], number: int = 10
    ) -> list[dict[str, object]]:
        if self.error is not None:
            raise self.error
        self.ingredient_queries.append(ingredients)
        return self.ingredient_matches

    async def get_recipe(self, recipe_id: int) -> dict[str, object]:
        if self.error is not None:
            raise self.error
        if recipe_id in self.missing_ids:
            raise RuntimeError(f"recipe {recipe_id} not found")
        return api_recipe(recipe_id, f"Recipe {recipe_id}")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key="openai-key",
        spoonacular_api_key="spoonacular-key",
        environment="test",
    )


@pytest.fixture
def chat_client() -> FakeChatClient:
    return FakeChatClient()


@pytest.fixture
def recipe_api_client() -> FakeRecipeApiClient:
    return FakeRecipeApiClient()


@pytest.fixture
def container(
    settings: Settings,
    chat_client: FakeChatClient,
    recipe_api_client: FakeRecipeApiClient,
) -> AppContainer:
    options = ChatOptions(model=settings.openai_model)
    search_service = RecipeSearchService(recipe_api_client)
    generation_service = RecipeGenerationService(client=chat_client, options=options)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        recipe_search_service=search_service,
        recipe_query_service=RecipeQueryService(
            client=chat_client, search_service=search_service, options=options
        ),
        recipe_generation_service=generation_service,
        meal_plan_service=MealPlanService(
            generator=generation_service, rng=random.Random(7)
        ),
        suggestion_service=SuggestionService(client=chat_client, options=options),
        detection_service=FoodDetectionService(
            client=chat_client,
            options=options,
            mock=MockFoodDetector(rng=random.Random(3)),
        ),
        image_service=RecipeImageService(client=FakeImageClient()),
        favorites=InMemoryFavoritesStore(),
        close_resources=close_resources,
    )
