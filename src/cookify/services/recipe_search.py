"""Recipe search service over the third-party recipe API."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import ValidationError

from cookify.adapters.recipe_api_client import RecipeApiClient
from cookify.domain.macros import MacroTarget
from cookify.domain.recipes import Recipe

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

_logger = logging.getLogger(__name__)

# Macro field -> complexSearch bound parameter.
_MACRO_BOUNDS = {
    "calories": "maxCalories",
    "protein": "minProtein",
    "carbs": "maxCarbs",
    "fat": "maxFat",
    "sugar": "maxSugar",
    "sodium": "maxSodium",
    "fiber": "minFiber",
}


def macro_search_params(macros: MacroTarget) -> dict[str, str]:
    """Translate a macro target into complexSearch bounds."""
    params: dict[str, str] = {}
    for name, value in macros.present_fields().items():
        if value:
            params[_MACRO_BOUNDS[name]] = _format_bound(value)
    return params


def _format_bound(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


@dataclass
class RecipeSearchService:
    """Searches recipes; failures are logged and reported as empty results."""

    client: RecipeApiClient

    async def fetch_popular_recipes(self, number: int = 10) -> list[Recipe]:
        return await self._complex_search(
            {"query": "popular"}, number, action="popular recipes"
        )

    async def fetch_recipes_by_category(
        self, category: str, number: int = 10
    ) -> list[Recipe]:
        return await self._complex_search(
            {"query": category}, number, action=f"{category} recipes"
        )

    async def fetch_recipes_by_meal_type(
        self, meal_type: str, number: int = 10
    ) -> list[Recipe]:
        return await self._complex_search(
            {"type": meal_type}, number, action=f"{meal_type} recipes"
        )

    async def search_recipes(self, query: str, number: int = 10) -> list[Recipe]:
        return await self._complex_search(
            {"query": query}, number, action=f"search '{query}'"
        )

    async def search_recipes_by_macros(
        self, macros: MacroTarget, number: int = 10
    ) -> list[Recipe]:
        return await self._complex_search(
            macro_search_params(macros), number, action="macro search"
        )

    async def search_recipes_by_ingredients(
        self, ingredients: list[str], number: int = 10
    ) -> list[Recipe]:
        """Find recipes by ingredients, then load the details of every match."""
        if not ingredients:
            return []
        matches = await self._guarded(
            lambda: self.client.find_by_ingredients(ingredients, number=number),
            action="ingredient search",
        )
        if not isinstance(matches, list):
            return []
        recipe_ids = [
            match["id"]
            for match in matches
            if isinstance(match, dict) and isinstance(match.get("id"), int)
        ]
        recipes = await asyncio.gather(
            *(self.fetch_recipe_by_id(recipe_id) for recipe_id in recipe_ids)
        )
        return [recipe for recipe in recipes if recipe is not None]

    async def fetch_recipe_by_id(self, recipe_id: int) -> Recipe | None:
        """Fetch a single recipe; ``None`` when it cannot be resolved."""
        payload = await self._guarded(
            lambda: self.client.get_recipe(recipe_id),
            action=f"recipe {recipe_id}",
        )
        if not isinstance(payload, dict):
            return None
        try:
            return Recipe.model_validate(payload)
        except ValidationError:
            _logger.warning("Recipe %s has an unexpected shape", recipe_id)
            return None

    async def _complex_search(
        self, params: dict[str, str], number: int, *, action: str
    ) -> list[Recipe]:
        payload = await self._guarded(
            lambda: self.client.complex_search(params, number=number),
            action=action,
        )
        if not isinstance(payload, dict):
            return []
        return _parse_recipes(payload.get("results", []), action=action)

    async def _guarded(
        self, func: "Callable[[], Awaitable[object]]", *, action: str
    ) -> object | None:
        """Run an API call, logging and swallowing any failure."""
        try:
            return await func()
        except Exception as exc:
            _logger.warning(
                "Recipe API %s failed (status=%s): %s",
                action,
                _status_code_from_exception(exc),
                exc,
            )
            return None


def _parse_recipes(raw: object, *, action: str) -> list[Recipe]:
    if not isinstance(raw, list):
        return []
    recipes = []
    for item in raw:
        try:
            recipes.append(Recipe.model_validate(item))
        except ValidationError:
            _logger.warning("Skipping malformed recipe in %s", action)
    return recipes


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
