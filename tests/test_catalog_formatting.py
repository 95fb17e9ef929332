"""Tests for the sample catalog and display helpers."""

from cookify.services.catalog import SAMPLE_RECIPES, filter_catalog
from cookify.services.formatting import format_nutrient, truncate_text


def test_empty_query_returns_everything() -> None:
    assert len(filter_catalog(None)) == len(SAMPLE_RECIPES)
    assert len(filter_catalog("  ")) == len(SAMPLE_RECIPES)


def test_query_matches_ingredients_case_insensitively() -> None:
    titles = [recipe.title for recipe in filter_catalog("garlic")]

    assert titles == ["Grilled Lemon Chicken", "Beef Stir Fry"]


def test_format_nutrient_rounds_to_one_decimal() -> None:
    assert format_nutrient(12.345, "g") == "12.3g"
    assert format_nutrient(400.0, "kcal") == "400kcal"


def test_truncate_text() -> None:
    assert truncate_text("short", 10) == "short"
    assert truncate_text("a long recipe title", 6) == "a long..."
