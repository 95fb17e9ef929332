"""Spoonacular recipe API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

_COMPLEX_SEARCH_DEFAULTS = {
    "addRecipeNutrition": "true",
    "instructionsRequired": "true",
}


class RecipeApiClient(Protocol):
    """Interface for recipe API interactions."""

    async def complex_search(
        self, params: dict[str, str], number: int = 10
    ) -> dict[str, object]:
        """Run a complex search and return raw API data."""

    async def find_by_ingredients(
        self, ingredients: list[str], number: int = 10
    ) -> list[dict[str, object]]:
        """Return lightweight matches for the given ingredients."""

    async def get_recipe(self, recipe_id: int) -> dict[str, object]:
        """Fetch a recipe with nutrition by id."""


@dataclass
class HttpxRecipeApiClient(RecipeApiClient):
    """HTTPX-backed Spoonacular client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxRecipeApiClient":
        """Create a recipe API client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def complex_search(
        self, params: dict[str, str], number: int = 10
    ) -> dict[str, object]:
        """Search recipes with nutrition and instructions included."""
        response = await self.http_client.get(
            f"{self.base_url}/recipes/complexSearch",
            params={
                "apiKey": self.api_key,
                "number": str(number),
                **_COMPLEX_SEARCH_DEFAULTS,
                **params,
            },
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def find_by_ingredients(
        self, ingredients: list[str], number: int = 10
    ) -> list[dict[str, object]]:
        """Find recipes that use the given ingredients."""
        response = await self.http_client.get(
            f"{self.base_url}/recipes/findByIngredients",
            params={
                "apiKey": self.api_key,
                "ingredients": ",".join(ingredients),
                "number": str(number),
                "ranking": "1",
                "ignorePantry": "false",
            },
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def get_recipe(self, recipe_id: int) -> dict[str, object]:
        """Fetch full recipe information."""
        response = await self.http_client.get(
            f"{self.base_url}/recipes/{recipe_id}/information",
            params={"apiKey": self.api_key, "includeNutrition": "true"},
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
