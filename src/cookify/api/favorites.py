"""Favorite recipe endpoints."""

from fastapi import APIRouter, Request

from cookify.api.errors import get_container

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("")
async def list_favorites(request: Request) -> dict[str, object]:
    return {"favorites": get_container(request).favorites.list()}


@router.get("/{recipe_id}")
async def favorite_status(recipe_id: int, request: Request) -> dict[str, object]:
    favorites = get_container(request).favorites
    return {"recipe_id": recipe_id, "is_favorite": favorites.is_favorite(recipe_id)}


@router.post("/{recipe_id}/toggle")
async def toggle_favorite(recipe_id: int, request: Request) -> dict[str, object]:
    """Flip the favorite flag of a recipe."""
    favorites = get_container(request).favorites
    return {"recipe_id": recipe_id, "is_favorite": favorites.toggle(recipe_id)}
