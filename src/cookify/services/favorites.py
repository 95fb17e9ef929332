"""Favorite recipe tracking."""

from dataclasses import dataclass
from typing import Protocol


class FavoritesStore(Protocol):
    """Interface for storing favorite recipe ids."""

    def toggle(self, recipe_id: int) -> bool:
        """Flip the favorite flag and return the new state."""

    def is_favorite(self, recipe_id: int) -> bool:
        """Return whether the recipe is a favorite."""

    def list(self) -> list[int]:
        """Return favorite ids in the order they were added."""


@dataclass
class InMemoryFavoritesStore(FavoritesStore):
    """Favorites kept for the lifetime of the process."""

    _ids: list[int]

    def __init__(self) -> None:
        self._ids = []

    def toggle(self, recipe_id: int) -> bool:
        if recipe_id in self._ids:
            self._ids.remove(recipe_id)
            return False
        self._ids.append(recipe_id)
        return True

    def is_favorite(self, recipe_id: int) -> bool:
        return recipe_id in self._ids

    def list(self) -> list[int]:
        return list(self._ids)

