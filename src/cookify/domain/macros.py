"""Macronutrient models."""

from pydantic import BaseModel, Field

MACRO_FIELDS = ("calories", "protein", "carbs", "fat", "sugar", "sodium", "fiber")


class MacroTarget(BaseModel):
    """Nutritional goal for a day or a single meal; every field is optional."""

    calories: float | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    sugar: float | None = Field(default=None, ge=0)
    sodium: float | None = Field(default=None, ge=0)
    fiber: float | None = Field(default=None, ge=0)

    def present_fields(self) -> dict[str, float]:
        """Return the fields that are set, in declaration order."""
        return {
            name: value
            for name in MACRO_FIELDS
            if (value := getattr(self, name)) is not None
        }

    def is_empty(self) -> bool:
        """Return true when no macro value is set."""
        return not self.present_fields()


class MacroTotals(BaseModel):
    """Actual macros of a recipe or a day of meals."""

    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)

    @classmethod
    def zero(cls) -> "MacroTotals":
        return cls(calories=0, protein=0, carbs=0, fat=0)

    def __add__(self, other: "MacroTotals") -> "MacroTotals":
        return MacroTotals(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fat=self.fat + other.fat,
        )
