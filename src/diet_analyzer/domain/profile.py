"""User profile and analysis request models."""

from enum import StrEnum
from typing import Any

from pydantic import ConfigDict, Field

from diet_analyzer.domain.models import CamelModel


class Gender(StrEnum):
    """Biological sex used by the BMR equation."""

    MALE = "male"
    FEMALE = "female"


class WeightUnit(StrEnum):
    """Units accepted for body weight."""

    KG = "kg"
    LB = "lb"


class HeightUnit(StrEnum):
    """Units accepted for body height."""

    CM = "cm"
    FT = "ft"


class DietaryGoal(StrEnum):
    """Dietary goals with a known macro split."""

    HIGH_PROTEIN_LOW_CARB = "high-protein-low-carb"
    KETO = "keto"
    BALANCED = "balanced"
    LOW_FAT = "low-fat"
    PLANT_BASED = "plant-based"


class UserProfile(CamelModel):
    """Body measurements and demographics of the person being analyzed."""

    model_config = ConfigDict(frozen=True)

    age: int = Field(gt=0)
    gender: Gender
    weight: float = Field(gt=0)
    weight_unit: WeightUnit = WeightUnit.KG
    height: float = Field(gt=0)
    height_unit: HeightUnit = HeightUnit.CM


class FoodEntry(CamelModel):
    """A logged food item as submitted by the client."""

    model_config = ConfigDict(extra="allow")

    name: str
    amount: float | None = Field(default=None, ge=0)
    unit: str | None = None
    fdc_id: int | None = None


class AnalysisRequest(CamelModel):
    """Inbound request for a full diet analysis."""

    user_info: UserProfile
    activity_level: Any = None
    dietary_goal: Any = None
    food_entries: list[FoodEntry] = Field(default_factory=list)
