"""Split a daily macro target into breakfast, lunch and dinner targets."""

import logging
import random
from dataclasses import dataclass

from cookify.domain.macros import MacroTarget

_logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 1000
_FALLBACK_SPLIT = (0.225, 0.325, 0.45)


@dataclass(frozen=True)
class ShareBands:
    """Inclusive bounds for each meal's share of the day."""

    breakfast: tuple[float, float] = (0.20, 0.25)
    lunch: tuple[float, float] = (0.30, 0.35)
    dinner: tuple[float, float] = (0.35, 0.40)


DEFAULT_BANDS = ShareBands()


@dataclass(frozen=True)
class MealAllocation:
    """Per-meal targets and the shares used to compute them."""

    breakfast: MacroTarget
    lunch: MacroTarget
    dinner: MacroTarget
    shares: tuple[float, float, float]
    used_fallback: bool = False

    def targets(self) -> tuple[MacroTarget, MacroTarget, MacroTarget]:
        return self.breakfast, self.lunch, self.dinner


def draw_shares(
    rng: random.Random | None = None,
    bands: ShareBands = DEFAULT_BANDS,
    max_attempts: int = MAX_ATTEMPTS,
) -> tuple[tuple[float, float, float], bool]:
    """Sample meal shares; return them with a flag telling if the fallback was used.

    Breakfast and lunch are drawn uniformly from their bands and dinner takes
    the remainder. Draws whose dinner share leaves its band are rejected.
    """
    source = rng or random.Random()
    for _ in range(max_attempts):
        breakfast = source.uniform(*bands.breakfast)
        lunch = source.uniform(*bands.lunch)
        dinner = 1 - breakfast - lunch
        if bands.dinner[0] <= dinner <= bands.dinner[1]:
            return (breakfast, lunch, dinner), False

    total = sum(_FALLBACK_SPLIT)
    breakfast, lunch, dinner = (share / total for share in _FALLBACK_SPLIT)
    _logger.warning(
        "Meal share sampling exhausted after %s attempts, using fixed split",
        max_attempts,
    )
    return (breakfast, lunch, dinner), True


def allocate_meals(
    daily: MacroTarget,
    rng: random.Random | None = None,
    bands: ShareBands = DEFAULT_BANDS,
    max_attempts: int = MAX_ATTEMPTS,
) -> MealAllocation:
    """Divide every macro present in ``daily`` across the three meals."""
    shares, used_fallback = draw_shares(rng, bands, max_attempts)
    present = daily.present_fields()
    breakfast, lunch, dinner = (
        MacroTarget(**{name: round(value * share) for name, value in present.items()})
        for share in shares
    )
    return MealAllocation(
        breakfast=breakfast,
        lunch=lunch,
        dinner=dinner,
        shares=shares,
        used_fallback=used_fallback,
    )
