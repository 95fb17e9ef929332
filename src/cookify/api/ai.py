"""Endpoints backed by the language model: generation, plans and detection."""

import logging

from fastapi import APIRouter, HTTPException, Request, UploadFile, status
from pydantic import BaseModel, Field

from cookify.api.errors import get_container, upstream_error
from cookify.domain.macros import MacroTarget
from cookify.domain.meal_plans import MealPlanDay
from cookify.domain.recipes import SimpleRecipe

router = APIRouter(tags=["ai"])
_logger = logging.getLogger(__name__)

NO_ITEMS_DETECTED = "No food items detected. Please retake the photo."


class GenerationRequest(BaseModel):
    macros: MacroTarget = Field(default_factory=MacroTarget)
    ingredients: list[str] = Field(default_factory=list)
    preference: str | None = None


class ImageRequest(BaseModel):
    title: str = Field(min_length=1)


@router.post("/ai/recipes")
async def generate_recipes(
    body: GenerationRequest, request: Request
) -> dict[str, list[SimpleRecipe]]:
    """Ask the model for three recipes matching macros and ingredients."""
    container = get_container(request)
    try:
        recipes = await container.recipe_generation_service.generate(
            body.macros, body.ingredients, body.preference
        )
    except Exception as exc:
        _logger.exception("Recipe generation failed")
        raise upstream_error(
            container, exc, "Failed to generate recipes. Please try again later."
        ) from exc
    return {"recipes": recipes}


@router.post("/ai/suggestions")
async def suggest_recipes(body: MacroTarget, request: Request) -> dict[str, list[str]]:
    """Short recipe ideas for a macro target; falls back to templates."""
    service = get_container(request).suggestion_service
    return {"suggestions": await service.suggest(body)}


@router.post("/ai/images")
async def generate_image(body: ImageRequest, request: Request) -> dict[str, str | None]:
    service = get_container(request).image_service
    return {"url": await service.generate(body.title)}


@router.post("/meal-plans")
async def generate_meal_plan(
    body: GenerationRequest, request: Request
) -> dict[str, list[MealPlanDay]]:
    """Generate a Monday-to-Sunday plan of three meals per day."""
    container = get_container(request)
    try:
        days = await container.meal_plan_service.generate_week(
            body.macros, body.ingredients, body.preference
        )
    except Exception as exc:
        _logger.exception(
            "Meal plan generation failed",
            extra={"ingredients": len(body.ingredients)},
        )
        raise upstream_error(
            container, exc, "Failed to generate meal plan. Please try again later."
        ) from exc
    return {"days": days}


@router.post("/detections")
async def detect_foods(image: UploadFile, request: Request) -> dict[str, object]:
    """Detect food items in an uploaded photo."""
    service = get_container(request).detection_service
    image_bytes = await image.read()
    if not image_bytes:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="The uploaded image is empty.",
        )
    result = await service.detect(image_bytes)
    if not result.foods:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=NO_ITEMS_DETECTED,
        )
    return result.model_dump(mode="json")
