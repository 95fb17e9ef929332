"""Recipe search endpoints."""

from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel, Field, field_validator

from cookify.api.errors import get_container
from cookify.domain.macros import MacroTarget
from cookify.domain.recipes import Recipe
from cookify.services.catalog import filter_catalog
from cookify.services.formatting import format_nutrient

router = APIRouter(tags=["recipes"])

_SUMMARY_NUTRIENTS = ("Calories", "Protein", "Carbohydrates", "Fat")


class IngredientSearchRequest(BaseModel):
    ingredients: list[str] = Field(min_length=1)
    number: int = Field(default=10, ge=1, le=100)

    @field_validator("ingredients")
    @classmethod
    def _drop_blank(cls, value: list[str]) -> list[str]:
        ingredients = [item.strip() for item in value if item.strip()]
        if not ingredients:
            raise ValueError("at least one non-blank ingredient is required")
        return ingredients


class MacroSearchRequest(MacroTarget):
    number: int = Field(default=10, ge=1, le=100)


class AiSearchRequest(BaseModel):
    text: str = Field(min_length=1)


def _recipe_list(request: Request, recipes: list[Recipe]) -> dict[str, object]:
    favorites = get_container(request).favorites
    return {
        "recipes": [recipe.model_dump(mode="json") for recipe in recipes],
        "favorites": {
            recipe.id: favorites.is_favorite(recipe.id) for recipe in recipes
        },
    }


@router.get("/recipes/popular")
async def popular_recipes(request: Request, number: int = 10) -> dict[str, object]:
    """Return popular recipes."""
    service = get_container(request).recipe_search_service
    return _recipe_list(request, await service.fetch_popular_recipes(number))


@router.get("/recipes/search")
async def search_recipes(
    request: Request, query: str, number: int = 10
) -> dict[str, object]:
    """Keyword recipe search."""
    service = get_container(request).recipe_search_service
    return _recipe_list(request, await service.search_recipes(query, number))


@router.get("/recipes/categories/{category}")
async def recipes_by_category(
    category: str, request: Request, number: int = 10
) -> dict[str, object]:
    service = get_container(request).recipe_search_service
    return _recipe_list(
        request, await service.fetch_recipes_by_category(category, number)
    )


@router.get("/recipes/meal-types/{meal_type}")
async def recipes_by_meal_type(
    meal_type: str, request: Request, number: int = 10
) -> dict[str, object]:
    service = get_container(request).recipe_search_service
    return _recipe_list(
        request, await service.fetch_recipes_by_meal_type(meal_type, number)
    )


@router.post("/recipes/by-ingredients")
async def recipes_by_ingredients(
    body: IngredientSearchRequest, request: Request
) -> dict[str, object]:
    """Recipes that use the given ingredients, with full details."""
    service = get_container(request).recipe_search_service
    return _recipe_list(
        request,
        await service.search_recipes_by_ingredients(body.ingredients, body.number),
    )


@router.post("/recipes/by-macros")
async def recipes_by_macros(
    body: MacroSearchRequest, request: Request
) -> dict[str, object]:
    """Recipes within the given macro bounds."""
    service = get_container(request).recipe_search_service
    macros = MacroTarget.model_validate(body.model_dump(exclude={"number"}))
    return _recipe_list(
        request, await service.search_recipes_by_macros(macros, body.number)
    )


@router.post("/recipes/ai-search")
async def ai_search(body: AiSearchRequest, request: Request) -> dict[str, object]:
    """Search using intent extracted from free text."""
    service = get_container(request).recipe_query_service
    analyzed, recipes = await service.search(body.text)
    return {
        "analysis": analyzed.model_dump(mode="json", exclude_none=True),
        **_recipe_list(request, recipes),
    }


@router.get("/recipes/{recipe_id}")
async def recipe_detail(recipe_id: int, request: Request) -> dict[str, object]:
    """Return one recipe with a formatted nutrition summary."""
    container = get_container(request)
    recipe = await container.recipe_search_service.fetch_recipe_by_id(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    summary = {}
    for name in _SUMMARY_NUTRIENTS:
        nutrient = recipe.nutrient(name)
        if nutrient is not None:
            summary[name] = format_nutrient(nutrient.amount, nutrient.unit)
    return {
        "recipe": recipe.model_dump(mode="json"),
        "nutrition_summary": summary,
        "is_favorite": container.favorites.is_favorite(recipe.id),
    }


@router.get("/my-recipes")
async def my_recipes(q: str | None = None) -> dict[str, object]:
    """Sample recipes filtered by title or ingredient."""
    return {"recipes": [recipe.model_dump() for recipe in filter_catalog(q)]}
