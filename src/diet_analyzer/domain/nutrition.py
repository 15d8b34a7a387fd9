"""Nutrient amounts, comparison results and the combined nutrition data."""

from dataclasses import asdict, dataclass
from enum import StrEnum

from diet_analyzer.domain.profile import UserProfile


@dataclass(frozen=True)
class NutrientAmounts:
    """Daily amounts per nutrient: kcal for calories, grams otherwise."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float

    def as_dict(self) -> dict[str, float]:
        """Return amounts keyed by nutrient name in canonical order."""
        return asdict(self)


NutrientTargets = NutrientAmounts
NutrientIntake = NutrientAmounts


class NutrientStatus(StrEnum):
    """Adequacy of an intake relative to its target."""

    ADEQUATE = "ADEQUATE"
    PARTIAL = "PARTIAL"
    DEFICIENT = "DEFICIENT"


@dataclass(frozen=True)
class ComparisonEntry:
    """Intake of one nutrient compared with its target."""

    target: float
    current: float
    percentage: float
    status: NutrientStatus


@dataclass(frozen=True)
class NutritionalData:
    """Everything computed for a request before the analysis step."""

    targets: NutrientTargets
    current_intake: NutrientIntake
    comparison: dict[str, ComparisonEntry]
    user_info: UserProfile
    dietary_goal: object
