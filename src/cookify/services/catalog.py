"""Built-in sample recipes shown on the "my recipes" page."""

from pydantic import BaseModel

from cookify.domain.macros import MacroTotals


class CatalogRecipe(BaseModel):
    id: int
    title: str
    image: str
    ready_in_minutes: int
    servings: int
    ingredients: list[str]
    macros: MacroTotals


def _recipe(  # noqa: PLR0913
    recipe_id: int,
    title: str,
    image: str,
    minutes: int,
    servings: int,
    ingredients: list[str],
    macros: tuple[float, float, float, float],
) -> CatalogRecipe:
    calories, protein, carbs, fat = macros
    return CatalogRecipe(
        id=recipe_id,
        title=title,
        image=image,
        ready_in_minutes=minutes,
        servings=servings,
        ingredients=ingredients,
        macros=MacroTotals(calories=calories, protein=protein, carbs=carbs, fat=fat),
    )


SAMPLE_RECIPES = (
    _recipe(
        1,
        "Classic Spaghetti Bolognese",
        "/assets/spaghetti.png",
        30,
        2,
        ["Spaghetti", "Ground beef", "Tomato sauce", "Onion"],
        (450, 30, 60, 15),
    ),
    _recipe(
        2,
        "Grilled Lemon Chicken",
        "/assets/grilled-lemon-chicken.png",
        25,
        2,
        ["Chicken breast", "Lemon", "Olive oil", "Garlic"],
        (380, 35, 5, 20),
    ),
    _recipe(
        3,
        "Avocado Toast Deluxe",
        "/assets/avocado-toast.png",
        10,
        1,
        ["Bread", "Avocado", "Egg", "Chili flakes"],
        (300, 12, 28, 18),
    ),
    _recipe(
        4,
        "Quinoa Salad Bowl",
        "/assets/quinoa.png",
        20,
        2,
        ["Quinoa", "Cucumber", "Cherry tomatoes", "Feta"],
        (280, 10, 40, 8),
    ),
    _recipe(
        5,
        "Beef Stir Fry",
        "/assets/beef-stir-fry.png",
        25,
        2,
        ["Beef", "Broccoli", "Soy sauce", "Garlic"],
        (520, 40, 35, 22),
    ),
    _recipe(
        6,
        "Veggie Omelette",
        "/assets/veggie-omelette.png",
        15,
        1,
        ["Eggs", "Spinach", "Bell pepper", "Cheese"],
        (260, 18, 5, 18),
    ),
    _recipe(
        7,
        "Berry Smoothie",
        "/assets/berry-smoothie.png",
        5,
        1,
        ["Berries", "Banana", "Yogurt", "Honey"],
        (190, 8, 35, 3),
    ),
    _recipe(
        8,
        "Mediterranean Salad",
        "/assets/mediterranean-salad.png",
        15,
        2,
        ["Lettuce", "Olives", "Feta", "Cucumber"],
        (230, 9, 12, 17),
    ),
)


def filter_catalog(query: str | None) -> list[CatalogRecipe]:
    """Return sample recipes whose title or ingredients contain ``query``."""
    needle = (query or "").strip().lower()
    return [
        recipe
        for recipe in SAMPLE_RECIPES
        if needle in f"{recipe.title} {' '.join(recipe.ingredients)}".lower()
    ]
