"""Current nutrient intake from logged food entries."""

import logging
from collections.abc import Sequence

from diet_analyzer.domain.nutrition import NutrientIntake
from diet_analyzer.domain.profile import FoodEntry

PLACEHOLDER_INTAKE = NutrientIntake(
    calories=1500,
    protein=120,
    carbs=100,
    fat=50,
    fiber=15,
)

_logger = logging.getLogger(__name__)


def aggregate_intake(food_entries: Sequence[FoodEntry]) -> NutrientIntake:
    """Return the intake for the logged entries.

    Entries are not looked up yet; every request gets the same placeholder
    intake until per-item nutrient summation is wired to a food data provider.
    """
    _logger.debug("Aggregating intake for %s food entries", len(food_entries))
    return PLACEHOLDER_INTAKE
