"""Energy expenditure and nutrient target estimation."""

from diet_analyzer.domain.nutrition import NutrientTargets
from diet_analyzer.domain.profile import Gender, HeightUnit, UserProfile, WeightUnit
from diet_analyzer.reference_data import (
    ACTIVITY_MULTIPLIERS,
    DEFAULT_ACTIVITY_MULTIPLIER,
    DEFAULT_DIETARY_GOAL,
    FIBER_TARGET_G,
    MACRO_SPLITS,
    MacroSplit,
)

KG_PER_LB = 0.453592
CM_PER_FT = 30.48

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


def weight_in_kg(profile: UserProfile) -> float:
    """Return body weight in kilograms."""
    if profile.weight_unit is WeightUnit.LB:
        return profile.weight * KG_PER_LB
    return profile.weight


def height_in_cm(profile: UserProfile) -> float:
    """Return height in centimeters; feet are read as decimal feet."""
    if profile.height_unit is HeightUnit.FT:
        return profile.height * CM_PER_FT
    return profile.height


def calculate_bmr(profile: UserProfile) -> float:
    """Basal metabolic rate in kcal/day (Mifflin-St Jeor)."""
    base = 10 * weight_in_kg(profile) + 6.25 * height_in_cm(profile) - 5 * profile.age
    if profile.gender is Gender.MALE:
        return base + 5
    return base - 161


def activity_multiplier(activity_level: object) -> float:
    """Return the TDEE multiplier for an activity level, 1.2 when unknown."""
    level = _as_activity_level(activity_level)
    if level is None:
        return DEFAULT_ACTIVITY_MULTIPLIER
    return ACTIVITY_MULTIPLIERS.get(level, DEFAULT_ACTIVITY_MULTIPLIER)


def _as_activity_level(value: object) -> int | None:
    """Read an integral activity level from an int, float or numeric string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isascii() and stripped.isdecimal():
            return int(stripped)
    return None


def macro_split(dietary_goal: object) -> MacroSplit:
    """Return the macro split for a goal, the balanced split when unknown."""
    default = MACRO_SPLITS[DEFAULT_DIETARY_GOAL]
    if not isinstance(dietary_goal, str):
        return default
    return MACRO_SPLITS.get(dietary_goal, default)


def calculate_tdee(profile: UserProfile, activity_level: object) -> float:
    """Total daily energy expenditure in kcal/day."""
    return calculate_bmr(profile) * activity_multiplier(activity_level)


def calculate_targets(
    profile: UserProfile,
    activity_level: object,
    dietary_goal: object,
) -> NutrientTargets:
    """Compute daily calorie, macro and fiber targets."""
    tdee = calculate_tdee(profile, activity_level)
    split = macro_split(dietary_goal)
    return NutrientTargets(
        calories=tdee,
        protein=tdee * split.protein / KCAL_PER_G_PROTEIN,
        carbs=tdee * split.carbs / KCAL_PER_G_CARBS,
        fat=tdee * split.fat / KCAL_PER_G_FAT,
        fiber=FIBER_TARGET_G,
    )
