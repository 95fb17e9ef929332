"""Recipe generation with the chat-completion model."""

import logging
from dataclasses import dataclass, field

from pydantic import ValidationError

from cookify.domain.macros import MacroTarget
from cookify.domain.recipes import SimpleRecipe
from cookify.services.chat import ChatClient, ChatOptions, system_message, user_message
from cookify.services.llm_json import JsonKind, ParseError, extract_json

_logger = logging.getLogger(__name__)

RECIPES_PER_REQUEST = 3

_SYSTEM_PROMPT = (
    "You are a professional chef and nutritionist. "
    "You always answer with valid JSON and nothing else."
)

_MACRO_LABELS = {
    "calories": "{value:g} kcal",
    "protein": "{value:g}g protein",
    "carbs": "{value:g}g carbs",
    "fat": "{value:g}g fat",
    "sugar": "{value:g}g sugar",
    "sodium": "{value:g}mg sodium",
    "fiber": "{value:g}g fiber",
}


def describe_macros(macros: MacroTarget) -> str:
    """Render the set macro fields as a short human-readable list."""
    parts = [
        _MACRO_LABELS[name].format(value=value)
        for name, value in macros.present_fields().items()
    ]
    return ", ".join(parts) if parts else "no specific macro targets"


def build_recipe_prompt(
    macros: MacroTarget, ingredients: list[str], preference: str | None = None
) -> str:
    """Build the instruction asking for exactly three recipes as JSON."""
    available = ", ".join(ingredients) if ingredients else "any common ingredients"
    lines = [
        f"Create exactly {RECIPES_PER_REQUEST} different recipes.",
        f"Available ingredients: {available}.",
        "Only use the available ingredients plus basic pantry staples "
        "(salt, pepper, oil, water).",
        f"Each recipe should approximate these macros: {describe_macros(macros)}.",
    ]
    if preference and preference.strip():
        lines.append(f"Preferences: {preference.strip()}.")
    lines.append(
        f"Respond with a JSON array of exactly {RECIPES_PER_REQUEST} objects shaped "
        '{"title": string, "ingredients": [string], '
        '"macros": {"calories": number, "protein": number, '
        '"carbs": number, "fat": number}}.'
    )
    return "\n".join(lines)


def parse_recipes(text: str) -> list[SimpleRecipe]:
    """Parse model output into recipes, raising ``ParseError`` when malformed."""
    raw = extract_json(text, JsonKind.ARRAY).unwrap()
    if not isinstance(raw, list):
        raise ParseError("model response is not a JSON array")
    try:
        return [SimpleRecipe.model_validate(item) for item in raw]
    except ValidationError as exc:
        raise ParseError(f"model returned an invalid recipe: {exc}") from exc


@dataclass
class RecipeGenerationService:
    """Asks the language model for recipes matching macros and ingredients."""

    client: ChatClient
    options: ChatOptions = field(default_factory=ChatOptions)

    async def generate(
        self,
        macros: MacroTarget,
        ingredients: list[str],
        preference: str | None = None,
    ) -> list[SimpleRecipe]:
        """Return the recipes proposed by the model.

        Network failures and malformed output propagate to the caller.
        """
        messages = [
            system_message(_SYSTEM_PROMPT),
            user_message(build_recipe_prompt(macros, ingredients, preference)),
        ]
        text = await self.client.complete(
            model=self.options.model,
            messages=messages,
            temperature=self.options.temperature,
        )
        recipes = parse_recipes(text)
        _logger.info(
            "Generated %s recipes for %s ingredients", len(recipes), len(ingredients)
        )
        return recipes
