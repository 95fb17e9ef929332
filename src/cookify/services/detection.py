"""Food detection from photos."""

import logging
import random
import time
from dataclasses import dataclass, field
from enum import StrEnum

from pydantic import BaseModel, Field, ValidationError

from cookify.domain.detection import (
    BoundingBox,
    DetectedFoodItem,
    DetectionSource,
    FoodDetectionResult,
    ImageSize,
)
from cookify.services.chat import ChatClient, ChatOptions, image_message
from cookify.services.llm_json import JsonKind, extract_json

_logger = logging.getLogger(__name__)


class FoodCategory(StrEnum):
    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    MEAT = "meat"
    DAIRY = "dairy"
    GRAIN = "grain"
    HERB = "herb"
    PANTRY = "pantry"
    CONDIMENT = "condiment"


# name -> (category, aliases)
FOOD_TABLE: dict[str, tuple[FoodCategory, tuple[str, ...]]] = {
    "tomato": (FoodCategory.VEGETABLE, ("tomatoes", "cherry tomato", "roma tomato")),
    "onion": (FoodCategory.VEGETABLE, ("onions", "red onion", "white onion")),
    "garlic": (FoodCategory.VEGETABLE, ("garlic cloves", "garlic bulb")),
    "bell pepper": (FoodCategory.VEGETABLE, ("bell peppers", "red pepper")),
    "carrot": (FoodCategory.VEGETABLE, ("carrots",)),
    "broccoli": (FoodCategory.VEGETABLE, ("broccoli florets",)),
    "spinach": (FoodCategory.VEGETABLE, ("baby spinach", "spinach leaves")),
    "lettuce": (FoodCategory.VEGETABLE, ("iceberg lettuce", "romaine lettuce")),
    "cucumber": (FoodCategory.VEGETABLE, ("cucumbers",)),
    "potato": (FoodCategory.VEGETABLE, ("potatoes", "russet potato")),
    "apple": (FoodCategory.FRUIT, ("apples", "green apple")),
    "banana": (FoodCategory.FRUIT, ("bananas",)),
    "orange": (FoodCategory.FRUIT, ("oranges", "mandarin orange")),
    "lemon": (FoodCategory.FRUIT, ("lemons", "lime")),
    "strawberry": (FoodCategory.FRUIT, ("strawberries",)),
    "grape": (FoodCategory.FRUIT, ("grapes", "red grapes")),
    "chicken breast": (FoodCategory.MEAT, ("chicken breasts", "boneless chicken")),
    "ground beef": (FoodCategory.MEAT, ("beef", "hamburger meat")),
    "salmon": (FoodCategory.MEAT, ("salmon fillet",)),
    "bacon": (FoodCategory.MEAT, ("bacon strips",)),
    "pork chop": (FoodCategory.MEAT, ("pork chops", "pork")),
    "milk": (FoodCategory.DAIRY, ("whole milk", "skim milk")),
    "cheese": (FoodCategory.DAIRY, ("cheddar cheese", "mozzarella cheese")),
    "butter": (FoodCategory.DAIRY, ("unsalted butter", "salted butter")),
    "yogurt": (FoodCategory.DAIRY, ("greek yogurt", "plain yogurt")),
    "eggs": (FoodCategory.DAIRY, ("egg", "chicken eggs")),
    "rice": (FoodCategory.GRAIN, ("white rice", "brown rice", "jasmine rice")),
    "pasta": (FoodCategory.GRAIN, ("spaghetti", "penne pasta", "fettuccine")),
    "bread": (FoodCategory.GRAIN, ("white bread", "sourdough bread")),
    "basil": (FoodCategory.HERB, ("fresh basil", "basil leaves")),
    "parsley": (FoodCategory.HERB, ("fresh parsley",)),
    "cilantro": (FoodCategory.HERB, ("fresh cilantro", "coriander")),
    "rosemary": (FoodCategory.HERB, ("fresh rosemary", "rosemary sprigs")),
    "olive oil": (FoodCategory.PANTRY, ("extra virgin olive oil",)),
    "salt": (FoodCategory.PANTRY, ("table salt", "sea salt")),
    "pepper": (FoodCategory.PANTRY, ("black pepper", "ground pepper")),
    "flour": (FoodCategory.PANTRY, ("all purpose flour", "bread flour")),
    "sugar": (FoodCategory.PANTRY, ("white sugar", "granulated sugar")),
    "ketchup": (FoodCategory.CONDIMENT, ("tomato ketchup",)),
    "mustard": (FoodCategory.CONDIMENT, ("yellow mustard", "dijon mustard")),
    "mayonnaise": (FoodCategory.CONDIMENT, ("mayo",)),
    "soy sauce": (FoodCategory.CONDIMENT, ()),
}

_CATEGORY_INDEX: dict[str, FoodCategory] = {}
for _name, (_category, _aliases) in FOOD_TABLE.items():
    _CATEGORY_INDEX[_name] = _category
    for _alias in _aliases:
        _CATEGORY_INDEX.setdefault(_alias, _category)

UNKNOWN_CATEGORY = "unknown"

_MOCK_IMAGE_SIZE = ImageSize(width=1920, height=1080)

VISION_PROMPT = (
    "Identify every food item visible in this photo. "
    'Respond only with JSON shaped {"foods": [{"name": string, '
    '"count": integer, "confidence": number between 0 and 1}]}. '
    "Use short common ingredient names."
)


def categorize(name: str) -> str:
    """Map a food name to its category, ``unknown`` when not in the table."""
    key = name.strip().lower().replace("_", " ")
    category = _CATEGORY_INDEX.get(key)
    return str(category) if category else UNKNOWN_CATEGORY


class DetectorStrategy(StrEnum):
    MOCK = "mock"
    VISION = "vision"


class _VisionFood(BaseModel):
    name: str = Field(min_length=1)
    count: int = Field(default=1, ge=1)
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)


class _VisionPayload(BaseModel):
    foods: list[_VisionFood]


@dataclass
class MockFoodDetector:
    """Random stand-in for a real food recognition model."""

    rng: random.Random = field(default_factory=random.Random)
    min_items: int = 3
    max_items: int = 10

    def detect(self) -> list[DetectedFoodItem]:
        """Return distinct random foods ordered by descending confidence."""
        names = list(FOOD_TABLE)
        amount = self.rng.randint(self.min_items, min(self.max_items, len(names)))
        foods = [
            DetectedFoodItem(
                name=name,
                quantity=self.rng.randint(1, 5),
                confidence=self.rng.uniform(0.70, 0.95),
                category=str(FOOD_TABLE[name][0]),
                bounding_box=self._random_box(),
            )
            for name in self.rng.sample(names, amount)
        ]
        foods.sort(key=lambda item: item.confidence, reverse=True)
        return foods

    def _random_box(self) -> BoundingBox:
        return BoundingBox(
            x=self.rng.uniform(0.0, 0.8),
            y=self.rng.uniform(0.0, 0.8),
            width=self.rng.uniform(0.1, 0.3),
            height=self.rng.uniform(0.1, 0.3),
        )


@dataclass
class FoodDetectionService:
    """Detects foods in an image; never raises.

    The vision strategy degrades to the mock detector on any failure and
    tags the result with ``mock-fallback`` so callers can tell.
    """

    strategy: DetectorStrategy = DetectorStrategy.MOCK
    client: ChatClient | None = None
    options: ChatOptions = field(default_factory=ChatOptions)
    mock: MockFoodDetector = field(default_factory=MockFoodDetector)

    async def detect(self, image_bytes: bytes) -> FoodDetectionResult:
        started = time.perf_counter()
        if self.strategy is DetectorStrategy.VISION and self.client is not None:
            foods = await self._detect_with_vision(image_bytes)
            if foods is not None:
                return FoodDetectionResult(
                    foods=foods,
                    processing_time_ms=_elapsed_ms(started),
                    image_size=ImageSize(width=0, height=0),
                    source=DetectionSource.VISION_MODEL,
                )
            source = DetectionSource.MOCK_FALLBACK
        else:
            source = DetectionSource.MOCK
        return FoodDetectionResult(
            foods=self.mock.detect(),
            processing_time_ms=_elapsed_ms(started),
            image_size=_MOCK_IMAGE_SIZE,
            source=source,
        )

    async def _detect_with_vision(
        self, image_bytes: bytes
    ) -> list[DetectedFoodItem] | None:
        try:
            text = await self.client.complete(
                model=self.options.model,
                messages=[image_message(VISION_PROMPT, image_bytes)],
                temperature=self.options.temperature,
            )
        except Exception:
            _logger.exception("Vision detection request failed")
            return None
        extraction = extract_json(text, JsonKind.OBJECT)
        if not extraction.ok:
            _logger.warning("Vision detection unparseable: %s", extraction.error)
            return None
        try:
            payload = _VisionPayload.model_validate(extraction.value)
            foods = [
                DetectedFoodItem(
                    name=food.name,
                    quantity=food.count,
                    confidence=food.confidence,
                    category=categorize(food.name),
                )
                for food in payload.foods
            ]
        except ValidationError:
            _logger.warning("Vision detection returned an unexpected shape")
            return None
        foods.sort(key=lambda item: item.confidence, reverse=True)
        return foods


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
