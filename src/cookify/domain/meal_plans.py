"""Meal plan domain models."""

from enum import StrEnum

from pydantic import BaseModel, Field

from cookify.domain.macros import MacroTotals
from cookify.domain.recipes import SimpleRecipe

WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class MealType(StrEnum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"


class MealPlanDay(BaseModel):
    """One weekday of generated meals with the totals actually achieved."""

    day: str
    meals: list[SimpleRecipe] = Field(default_factory=list, max_length=3)
    daily_macros: MacroTotals
    gaps: list[MealType] = Field(default_factory=list)

    @classmethod
    def from_meals(
        cls,
        day: str,
        meals: list[SimpleRecipe],
        gaps: list[MealType] | None = None,
    ) -> "MealPlanDay":
        """Build a day whose totals are the sum of the kept meals."""
        totals = MacroTotals.zero()
        for meal in meals:
            totals = totals + meal.macros
        return cls(day=day, meals=meals, daily_macros=totals, gaps=gaps or [])
