"""Tests for intake aggregation and target comparison."""

import pytest

from diet_analyzer.domain.nutrition import NutrientAmounts, NutrientStatus
from diet_analyzer.domain.profile import FoodEntry, UserProfile
from diet_analyzer.services.comparison import classify_percentage, compare_with_targets
from diet_analyzer.services.intake import PLACEHOLDER_INTAKE, aggregate_intake
from diet_analyzer.services.targets import calculate_targets


def test_intake_is_placeholder_regardless_of_entries() -> None:
    entries = [FoodEntry(name="Salmon", amount=200, unit="g")]

    assert aggregate_intake(entries) == PLACEHOLDER_INTAKE
    assert aggregate_intake([]) == PLACEHOLDER_INTAKE
    assert PLACEHOLDER_INTAKE.as_dict() == {
        "calories": 1500,
        "protein": 120,
        "carbs": 100,
        "fat": 50,
        "fiber": 15,
    }


@pytest.mark.parametrize(
    ("percentage", "expected"),
    [
        (0.0, NutrientStatus.DEFICIENT),
        (49.999, NutrientStatus.DEFICIENT),
        (50.0, NutrientStatus.PARTIAL),
        (89.999, NutrientStatus.PARTIAL),
        (90.0, NutrientStatus.ADEQUATE),
        (250.0, NutrientStatus.ADEQUATE),
    ],
)
def test_classify_percentage_boundaries(
    percentage: float, expected: NutrientStatus
) -> None:
    assert classify_percentage(percentage) is expected


def test_compare_placeholder_intake_with_balanced_targets(
    profile: UserProfile,
) -> None:
    targets = calculate_targets(profile, 3, "balanced")

    comparison = compare_with_targets(PLACEHOLDER_INTAKE, targets)

    assert list(comparison) == ["calories", "protein", "carbs", "fat", "fiber"]
    protein = comparison["protein"]
    assert protein.percentage == pytest.approx(120 / targets.protein * 100)
    assert protein.percentage == pytest.approx(69.6, abs=0.05)
    assert protein.status is NutrientStatus.PARTIAL
    assert comparison["carbs"].percentage == pytest.approx(29.0, abs=0.05)
    assert comparison["carbs"].status is NutrientStatus.DEFICIENT
    assert comparison["calories"].percentage == pytest.approx(54.4, abs=0.05)
    assert comparison["calories"].status is NutrientStatus.PARTIAL
    assert comparison["fiber"].percentage == pytest.approx(60.0)
    assert comparison["fat"].current == 50


def test_compare_skips_zero_intake_and_zero_target() -> None:
    intake = NutrientAmounts(calories=2000, protein=0, carbs=50, fat=40, fiber=30)
    targets = NutrientAmounts(calories=2000, protein=100, carbs=0, fat=80, fiber=25)

    comparison = compare_with_targets(intake, targets)

    assert set(comparison) == {"calories", "fat", "fiber"}
    assert comparison["calories"].status is NutrientStatus.ADEQUATE
    assert comparison["fat"].percentage == 50.0
    assert comparison["fat"].status is NutrientStatus.PARTIAL
    assert all(entry.percentage >= 0 for entry in comparison.values())
