"""Tests for the meal share allocator."""

import logging
import random

import pytest

from cookify.domain.macros import MacroTarget
from cookify.services.allocator import ShareBands, allocate_meals, draw_shares


class _UpperBoundRng:
    """Always draws the top of each band."""

    def uniform(self, low: float, high: float) -> float:
        return high


def test_accepted_draw_respects_every_band() -> None:
    (breakfast, lunch, dinner), used_fallback = draw_shares(_UpperBoundRng())

    assert not used_fallback
    assert 0.20 <= breakfast <= 0.25
    assert 0.30 <= lunch <= 0.35
    assert 0.35 <= dinner <= 0.40
    assert breakfast + lunch + dinner == pytest.approx(1.0)


def test_shares_stay_in_bands_across_draws() -> None:
    bands = ShareBands(dinner=(0.39, 0.51))
    rng = random.Random(42)

    for _ in range(200):
        (breakfast, lunch, dinner), used_fallback = draw_shares(rng, bands)
        assert not used_fallback
        assert 0.20 <= breakfast <= 0.25
        assert 0.30 <= lunch <= 0.35
        assert 0.39 <= dinner <= 0.51
        assert breakfast + lunch + dinner == pytest.approx(1.0)


def test_exhausted_sampling_uses_fixed_split() -> None:
    bands = ShareBands(dinner=(0.90, 0.95))

    shares, used_fallback = draw_shares(random.Random(1), bands, max_attempts=5)

    assert used_fallback
    assert shares == pytest.approx((0.225, 0.325, 0.45))
    assert sum(shares) == pytest.approx(1.0)


def test_exhausted_sampling_is_logged_as_warning(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(logging.getLogger("cookify"), "propagate", True)
    bands = ShareBands(dinner=(0.90, 0.95))

    with caplog.at_level(logging.WARNING, logger="cookify.services.allocator"):
        draw_shares(random.Random(1), bands, max_attempts=5)

    assert any(
        record.levelno == logging.WARNING and "exhausted" in record.getMessage()
        for record in caplog.records
    )


def test_allocation_rounds_each_present_field() -> None:
    daily = MacroTarget(calories=2000, protein=150)

    allocation = allocate_meals(daily, rng=_UpperBoundRng())

    assert allocation.breakfast.calories == 500
    assert allocation.lunch.calories == 700
    assert allocation.dinner.calories == 800
    assert allocation.breakfast.protein == round(150 * 0.25)
    total = sum(target.calories for target in allocation.targets())
    assert abs(total - 2000) <= 2


def test_allocation_keeps_field_coverage() -> None:
    daily = MacroTarget(calories=1800, fat=60, fiber=30)

    allocation = allocate_meals(daily, rng=random.Random(5))

    for target in allocation.targets():
        assert set(target.present_fields()) == {"calories", "fat", "fiber"}
        assert target.protein is None
        assert target.sugar is None


def test_allocation_of_empty_target_is_empty() -> None:
    allocation = allocate_meals(MacroTarget(), rng=random.Random(5))

    assert all(target.is_empty() for target in allocation.targets())
