"""AI recipe suggestions and natural-language search analysis."""

import logging
from dataclasses import dataclass, field

from pydantic import ValidationError

from cookify.domain.macros import MacroTarget
from cookify.domain.recipes import Recipe, RecipeQuery
from cookify.services.chat import ChatClient, ChatOptions, system_message, user_message
from cookify.services.generation import describe_macros
from cookify.services.llm_json import JsonKind, ParseError, extract_json
from cookify.services.recipe_search import RecipeSearchService

_logger = logging.getLogger(__name__)

EMPTY_MACROS_SUGGESTION = (
    "Please enter at least one macro nutrient value to get personalized "
    "recipe suggestions."
)

SUGGESTION_COUNT = 5

HIGH_PROTEIN_G = 30
LOW_CALORIES = 400
HIGH_CALORIES = 700
LOW_CARBS_G = 30
LOW_FAT_G = 15
HIGH_FIBER_G = 8

_ANALYSIS_PROMPT = """You extract recipe search intent from user messages.
Identify:
1. Ingredients they mentioned
2. Macro nutrient requirements (calories, protein, carbs, fat, sugar, sodium, fiber)
3. Any other search terms or food types

Respond with a JSON object:
{"ingredients": [string], "macros": {"calories": number, "protein": number,
"carbs": number, "fat": number, "sugar": number, "sodium": number,
"fiber": number}, "query": string}
Omit any field the user did not mention."""


def templated_suggestions(macros: MacroTarget) -> list[str]:
    """Hand-written suggestions keyed off simple macro thresholds."""
    suggestions = []
    if macros.protein is not None and macros.protein >= HIGH_PROTEIN_G:
        suggestions.append("Grilled chicken breast with quinoa and roasted vegetables")
        suggestions.append("Greek yogurt parfait with nuts and berries")
    if macros.calories is not None and macros.calories < LOW_CALORIES:
        suggestions.append("Light garden salad with lemon vinaigrette and chickpeas")
    if macros.calories is not None and macros.calories >= HIGH_CALORIES:
        suggestions.append("Salmon rice bowl with avocado and edamame")
    if macros.carbs is not None and macros.carbs < LOW_CARBS_G:
        suggestions.append("Zucchini noodles with turkey meatballs")
    if macros.fat is not None and macros.fat < LOW_FAT_G:
        suggestions.append("Steamed white fish with jasmine rice and greens")
    if macros.fiber is not None and macros.fiber >= HIGH_FIBER_G:
        suggestions.append("Black bean and lentil chili")
    if len(suggestions) < SUGGESTION_COUNT:
        for balanced in (
            "Stir-fried tofu with brown rice and mixed vegetables",
            "Turkey and vegetable whole-wheat wrap",
            "Vegetable omelette with whole-grain toast",
            "Chickpea and spinach curry with basmati rice",
            "Baked salmon with sweet potato and green beans",
        ):
            if len(suggestions) >= SUGGESTION_COUNT:
                break
            suggestions.append(balanced)
    return suggestions[:SUGGESTION_COUNT]


@dataclass
class SuggestionService:
    """Short recipe ideas for a macro target."""

    client: ChatClient
    options: ChatOptions = field(default_factory=ChatOptions)

    async def suggest(self, macros: MacroTarget) -> list[str]:
        """Return suggestions; never raises."""
        if macros.is_empty():
            return [EMPTY_MACROS_SUGGESTION]
        prompt = (
            f"Suggest {SUGGESTION_COUNT} recipe ideas that fit these macros: "
            f"{describe_macros(macros)}. "
            "Respond with a JSON array of short recipe names only."
        )
        try:
            text = await self.client.complete(
                model=self.options.model,
                messages=[user_message(prompt)],
                temperature=self.options.temperature,
            )
            raw = extract_json(text, JsonKind.ARRAY).unwrap()
            suggestions = [
                item.strip() for item in raw if isinstance(item, str) and item.strip()
            ]
            if not suggestions:
                raise ParseError("model returned no suggestions")
        except Exception:
            _logger.exception("AI suggestions failed, using templates")
            return templated_suggestions(macros)
        return suggestions[:SUGGESTION_COUNT]


@dataclass
class RecipeQueryService:
    """Turns free-text requests into recipe searches."""

    client: ChatClient
    search_service: RecipeSearchService
    options: ChatOptions = field(default_factory=ChatOptions)

    async def analyze(self, text: str) -> RecipeQuery:
        """Extract ingredients, macros and query terms; empty on failure."""
        try:
            response = await self.client.complete(
                model=self.options.model,
                messages=[system_message(_ANALYSIS_PROMPT), user_message(text)],
                temperature=self.options.temperature,
            )
            raw = extract_json(response, JsonKind.OBJECT).unwrap()
            return RecipeQuery.model_validate(_drop_nulls(raw))
        except (ParseError, ValidationError) as exc:
            _logger.warning("Could not analyze search request: %s", exc)
        except Exception:
            _logger.exception("Search analysis request failed")
        return RecipeQuery()

    async def search(self, text: str) -> tuple[RecipeQuery, list[Recipe]]:
        """Analyze ``text`` and run the most specific matching search."""
        analyzed = await self.analyze(text)
        if analyzed.ingredients:
            recipes = await self.search_service.search_recipes_by_ingredients(
                analyzed.ingredients
            )
        elif analyzed.macros is not None and not analyzed.macros.is_empty():
            recipes = await self.search_service.search_recipes_by_macros(
                analyzed.macros
            )
        elif analyzed.query:
            recipes = await self.search_service.search_recipes_by_ingredients(
                [analyzed.query]
            )
        else:
            recipes = []
        return analyzed, recipes


def _drop_nulls(raw: object) -> object:
    """Remove ``null`` values the model emits for fields it should omit."""
    if isinstance(raw, dict):
        return {
            key: _drop_nulls(value) for key, value in raw.items() if value is not None
        }
    return raw
