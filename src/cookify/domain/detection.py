"""Models for photo-based food detection."""

from dataclasses import dataclass, field
from enum import StrEnum

from pydantic import BaseModel, Field

from cookify.domain.ingredients import IngredientEntry, Unit


class DetectionSource(StrEnum):
    """Provenance of a detection result."""

    VISION_MODEL = "vision-model"
    MOCK = "mock"
    MOCK_FALLBACK = "mock-fallback"


class BoundingBox(BaseModel):
    """Item location as fractions of the image dimensions."""

    x: float = Field(ge=0.0, le=1.0)
    y: float = Field(ge=0.0, le=1.0)
    width: float = Field(gt=0.0, le=1.0)
    height: float = Field(gt=0.0, le=1.0)


class DetectedFoodItem(IngredientEntry):
    """Ingredient guessed from an image."""

    confidence: float = Field(ge=0.0, le=1.0)
    category: str = "unknown"
    bounding_box: BoundingBox | None = None


class ImageSize(BaseModel):
    width: int = Field(ge=0)
    height: int = Field(ge=0)


class FoodDetectionResult(BaseModel):
    """Detected items together with how they were produced."""

    foods: list[DetectedFoodItem] = Field(default_factory=list)
    processing_time_ms: int = Field(default=0, ge=0)
    image_size: ImageSize = Field(
        default_factory=lambda: ImageSize(width=0, height=0)
    )
    source: DetectionSource


@dataclass
class DetectionReview:
    """Editable copy of detected items, reviewed before use as ingredients."""

    items: list[DetectedFoodItem] = field(default_factory=list)

    @classmethod
    def from_result(cls, result: FoodDetectionResult) -> "DetectionReview":
        return cls(items=list(result.foods))

    def rename(self, index: int, name: str) -> None:
        self.items[index] = DetectedFoodItem.model_validate(
            {**self.items[index].model_dump(), "name": name}
        )

    def recount(self, index: int, quantity: float, unit: Unit | None = None) -> None:
        current = self.items[index]
        self.items[index] = DetectedFoodItem.model_validate(
            {
                **current.model_dump(),
                "quantity": quantity,
                "unit": unit or current.unit,
            }
        )

    def remove(self, index: int) -> None:
        del self.items[index]

    def add(
        self,
        name: str,
        quantity: float = 1,
        unit: Unit = Unit.COUNT,
        category: str = "unknown",
    ) -> None:
        """Add a user-entered item; manual entries carry full confidence."""
        self.items.append(
            DetectedFoodItem(
                name=name,
                quantity=quantity,
                unit=unit,
                confidence=1.0,
                category=category,
            )
        )

    def to_ingredients(self) -> list[str]:
        """Promote the reviewed items to plain ingredient strings."""
        return [item.display() for item in self.items]
