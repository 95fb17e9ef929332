"""Weekly meal plan assembly."""

import logging
import random
from dataclasses import dataclass

from cookify.domain.macros import MacroTarget
from cookify.domain.meal_plans import WEEKDAYS, MealPlanDay, MealType
from cookify.domain.recipes import SimpleRecipe
from cookify.services.allocator import allocate_meals
from cookify.services.generation import RecipeGenerationService

_logger = logging.getLogger(__name__)

MEAL_PREFERENCES = {
    MealType.BREAKFAST: "Breakfast meal with typical breakfast foods",
    MealType.LUNCH: "Lunch meal that is filling but not too heavy",
    MealType.DINNER: "Dinner meal that is hearty and satisfying",
}


def meal_preference(meal_type: MealType, preference: str | None) -> str:
    """Combine the meal-type hint with the user's own preference."""
    base = MEAL_PREFERENCES[meal_type]
    if preference and preference.strip():
        return f"{base}. {preference.strip()}"
    return base


@dataclass
class MealPlanService:
    """Builds a Monday-to-Sunday plan of three generated meals per day."""

    generator: RecipeGenerationService
    isolate_failures: bool = False
    rng: random.Random | None = None

    async def generate_week(
        self,
        daily: MacroTarget,
        ingredients: list[str],
        preference: str | None = None,
    ) -> list[MealPlanDay]:
        """Generate the week one meal at a time.

        A failed generation call aborts the whole plan unless
        ``isolate_failures`` is set, in which case the slot becomes a gap.
        """
        days = []
        for day in WEEKDAYS:
            days.append(await self._generate_day(day, daily, ingredients, preference))
        return days

    async def _generate_day(
        self,
        day: str,
        daily: MacroTarget,
        ingredients: list[str],
        preference: str | None,
    ) -> MealPlanDay:
        allocation = allocate_meals(daily, rng=self.rng)
        meals: list[SimpleRecipe] = []
        gaps: list[MealType] = []
        for meal_type, target in zip(MealType, allocation.targets(), strict=True):
            recipe = await self._generate_meal(
                day, meal_type, target, ingredients, preference
            )
            if recipe is None:
                gaps.append(meal_type)
            else:
                meals.append(recipe)
        return MealPlanDay.from_meals(day, meals, gaps)

    async def _generate_meal(  # noqa: PLR0913
        self,
        day: str,
        meal_type: MealType,
        target: MacroTarget,
        ingredients: list[str],
        preference: str | None,
    ) -> SimpleRecipe | None:
        try:
            recipes = await self.generator.generate(
                target, ingredients, meal_preference(meal_type, preference)
            )
        except Exception:
            if not self.isolate_failures:
                raise
            _logger.exception(
                "Meal generation failed",
                extra={"day": day, "meal_type": str(meal_type)},
            )
            return None
        if not recipes:
            _logger.warning("No recipe generated for %s %s", day, meal_type)
            return None
        return recipes[0]
