"""Ingredient entries and the form state used to collect them."""

from dataclasses import dataclass, field
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class Unit(StrEnum):
    COUNT = "count"
    GRAMS = "g"


class IngredientEntry(BaseModel):
    """A named ingredient with an amount."""

    name: str = Field(min_length=1)
    quantity: float = Field(default=1, gt=0)
    unit: Unit = Unit.COUNT

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("ingredient name must not be empty")
        return stripped

    def display(self) -> str:
        """Render the entry the way it is sent to the recipe generator."""
        quantity = _format_quantity(self.quantity)
        if self.unit is Unit.GRAMS:
            return f"{quantity} {self.unit} {self.name}"
        if self.quantity != 1:
            return f"{quantity} {self.name}"
        return self.name


def _format_quantity(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


class DuplicatePolicy(StrEnum):
    """How repeated entries are handled when typed into the form."""

    ALLOW = "allow"
    SKIP_CONSECUTIVE = "skip_consecutive"
    SKIP_ANY = "skip_any"


@dataclass
class IngredientList:
    """Ordered list of typed ingredient names."""

    duplicate_policy: DuplicatePolicy = DuplicatePolicy.SKIP_CONSECUTIVE
    items: list[str] = field(default_factory=list)

    def add(self, text: str) -> bool:
        """Add a trimmed entry; return whether it was added."""
        value = text.strip()
        if not value:
            return False
        if self.duplicate_policy is DuplicatePolicy.SKIP_CONSECUTIVE:
            if self.items and self.items[-1].lower() == value.lower():
                return False
        elif self.duplicate_policy is DuplicatePolicy.SKIP_ANY:
            if value.lower() in {item.lower() for item in self.items}:
                return False
        self.items.append(value)
        return True

    def remove(self, index: int) -> None:
        del self.items[index]

    def submit(self, pending: str = "") -> list[str]:
        """Return the list to send downstream, including any unsent text."""
        self.add(pending)
        return list(self.items)
