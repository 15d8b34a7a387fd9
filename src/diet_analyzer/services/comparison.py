"""Comparison of nutrient intake against targets."""

from diet_analyzer.domain.nutrition import (
    ComparisonEntry,
    NutrientIntake,
    NutrientStatus,
    NutrientTargets,
)

ADEQUATE_PERCENTAGE = 90.0
PARTIAL_PERCENTAGE = 50.0


def classify_percentage(percentage: float) -> NutrientStatus:
    """Map a percentage of target to its adequacy status."""
    if percentage >= ADEQUATE_PERCENTAGE:
        return NutrientStatus.ADEQUATE
    if percentage >= PARTIAL_PERCENTAGE:
        return NutrientStatus.PARTIAL
    return NutrientStatus.DEFICIENT


def compare_with_targets(
    intake: NutrientIntake, targets: NutrientTargets
) -> dict[str, ComparisonEntry]:
    """Compare intake with targets, in target order.

    Nutrients without a positive intake or a positive target get no entry.
    """
    current_values = intake.as_dict()
    result: dict[str, ComparisonEntry] = {}
    for nutrient, target in targets.as_dict().items():
        current = current_values.get(nutrient)
        if not current or current <= 0 or target <= 0:
            continue
        percentage = current / target * 100
        result[nutrient] = ComparisonEntry(
            target=target,
            current=current,
            percentage=percentage,
            status=classify_percentage(percentage),
        )
    return result
