"""Recipe models for search results and generated recipes."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cookify.domain.macros import MacroTarget, MacroTotals


class Nutrient(BaseModel):
    """Single nutrient entry as reported by the recipe API."""

    name: str
    amount: float
    unit: str


class Nutrition(BaseModel):
    nutrients: list[Nutrient] = Field(default_factory=list)


class InstructionStep(BaseModel):
    number: int
    step: str


class Instructions(BaseModel):
    steps: list[InstructionStep] = Field(default_factory=list)


class RecipeIngredient(BaseModel):
    id: int | None = None
    name: str
    amount: float | None = None
    unit: str | None = None


class Recipe(BaseModel):
    """Recipe as returned by the third-party search API.

    Field names follow the API's camelCase keys through aliases so payloads
    validate as-is; unknown keys are preserved.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int
    title: str
    image: str | None = None
    image_type: str | None = Field(default=None, alias="imageType")
    ready_in_minutes: int | None = Field(default=None, alias="readyInMinutes")
    servings: int | None = None
    source_url: str | None = Field(default=None, alias="sourceUrl")
    nutrition: Nutrition | None = None
    analyzed_instructions: list[Instructions] | None = Field(
        default=None, alias="analyzedInstructions"
    )
    dish_types: list[str] | None = Field(default=None, alias="dishTypes")
    extended_ingredients: list[RecipeIngredient] | None = Field(
        default=None, alias="extendedIngredients"
    )

    def nutrient(self, name: str) -> Nutrient | None:
        """Look up a nutrient by case-insensitive name."""
        if self.nutrition is None:
            return None
        wanted = name.lower()
        for nutrient in self.nutrition.nutrients:
            if nutrient.name.lower() == wanted:
                return nutrient
        return None


class SimpleRecipe(BaseModel):
    """Recipe invented by the language model."""

    title: str = Field(min_length=1)
    ingredients: list[str] = Field(default_factory=list)
    macros: MacroTotals

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("title must not be blank")
        return stripped


class RecipeQuery(BaseModel):
    """Search intent extracted from a free-text request."""

    ingredients: list[str] = Field(default_factory=list)
    macros: MacroTarget | None = None
    query: str | None = None
