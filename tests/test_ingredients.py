"""Tests for ingredient entry and detection review."""

import pytest
from pydantic import ValidationError

from cookify.domain.detection import (
    BoundingBox,
    DetectedFoodItem,
    DetectionReview,
    DetectionSource,
    FoodDetectionResult,
)
from cookify.domain.ingredients import (
    DuplicatePolicy,
    IngredientEntry,
    IngredientList,
    Unit,
)


def test_manual_entries_keep_insertion_order() -> None:
    form = IngredientList()

    form.add("chicken")
    form.add("rice")

    assert form.submit() == ["chicken", "rice"]


def test_consecutive_duplicates_are_skipped() -> None:
    form = IngredientList()

    assert form.add("chicken")
    assert not form.add(" Chicken ")
    form.add("rice")
    form.add("chicken")

    assert form.submit() == ["chicken", "rice", "chicken"]


def test_duplicate_policies() -> None:
    allow = IngredientList(duplicate_policy=DuplicatePolicy.ALLOW)
    unique = IngredientList(duplicate_policy=DuplicatePolicy.SKIP_ANY)
    for text in ["egg", "egg", "milk", "egg"]:
        allow.add(text)
        unique.add(text)

    assert allow.submit() == ["egg", "egg", "milk", "egg"]
    assert unique.submit() == ["egg", "milk"]


def test_submit_includes_pending_text_and_ignores_blanks() -> None:
    form = IngredientList()
    form.add("   ")
    form.add("tomato")
    form.remove(0)

    assert form.submit("  basil ") == ["basil"]


def test_entry_display_formats() -> None:
    assert IngredientEntry(name="rice", quantity=200, unit=Unit.GRAMS).display() == (
        "200 g rice"
    )
    assert IngredientEntry(name="egg", quantity=3).display() == "3 egg"
    assert IngredientEntry(name="lemon").display() == "lemon"


def test_entry_validation() -> None:
    with pytest.raises(ValidationError):
        IngredientEntry(name="   ")
    with pytest.raises(ValidationError):
        IngredientEntry(name="egg", quantity=0)


def test_detection_review_edits_before_promotion() -> None:
    result = FoodDetectionResult(
        foods=[
            DetectedFoodItem(
                name="tomato", quantity=2, confidence=0.9, category="vegetable"
            ),
            DetectedFoodItem(name="bacon", quantity=1, confidence=0.8, category="meat"),
        ],
        source=DetectionSource.MOCK,
    )
    review = DetectionReview.from_result(result)

    review.rename(0, "cherry tomato")
    review.recount(0, 250, Unit.GRAMS)
    review.remove(1)
    review.add("basil")

    assert review.to_ingredients() == ["250 g cherry tomato", "basil"]
    assert review.items[1].confidence == 1.0
    assert result.foods[1].name == "bacon"


def test_detection_review_rejects_empty_rename() -> None:
    review = DetectionReview(
        items=[DetectedFoodItem(name="egg", confidence=0.7)]
    )

    with pytest.raises(ValidationError):
        review.rename(0, " ")
    assert review.items[0].name == "egg"


def test_detection_review_keeps_bounding_box_through_edits() -> None:
    box = BoundingBox(x=0.1, y=0.2, width=0.25, height=0.15)
    review = DetectionReview(
        items=[DetectedFoodItem(name="egg", confidence=0.7, bounding_box=box)]
    )

    review.rename(0, "duck egg")
    review.recount(0, 2)

    assert review.items[0].bounding_box == box


def test_bounding_box_is_fractional() -> None:
    with pytest.raises(ValidationError):
        BoundingBox(x=1.5, y=0.2, width=0.25, height=0.15)
