"""Static nutrition reference tables."""

from dataclasses import dataclass
from types import MappingProxyType

from diet_analyzer.domain.profile import DietaryGoal


@dataclass(frozen=True)
class MacroSplit:
    """Fractions of daily energy taken from each macronutrient."""

    protein: float
    carbs: float
    fat: float


NUTRIENT_KEYS: tuple[str, ...] = ("calories", "protein", "carbs", "fat", "fiber")

# Sedentary through extremely active.
ACTIVITY_MULTIPLIERS = MappingProxyType(
    {
        1: 1.2,
        2: 1.375,
        3: 1.55,
        4: 1.725,
        5: 1.9,
    }
)
DEFAULT_ACTIVITY_MULTIPLIER = 1.2

MACRO_SPLITS = MappingProxyType(
    {
        DietaryGoal.HIGH_PROTEIN_LOW_CARB: MacroSplit(
            protein=0.35, carbs=0.2, fat=0.45
        ),
        DietaryGoal.KETO: MacroSplit(protein=0.2, carbs=0.05, fat=0.75),
        DietaryGoal.BALANCED: MacroSplit(protein=0.25, carbs=0.5, fat=0.25),
        DietaryGoal.LOW_FAT: MacroSplit(protein=0.3, carbs=0.55, fat=0.15),
        DietaryGoal.PLANT_BASED: MacroSplit(protein=0.2, carbs=0.6, fat=0.2),
    }
)
DEFAULT_DIETARY_GOAL = DietaryGoal.BALANCED

FIBER_TARGET_G = 25.0

GOAL_DISPLAY_NAMES = MappingProxyType(
    {
        DietaryGoal.HIGH_PROTEIN_LOW_CARB: "High-Protein, Low-Carb Diet",
        DietaryGoal.KETO: "Ketogenic Diet",
        DietaryGoal.BALANCED: "Balanced Diet",
        DietaryGoal.LOW_FAT: "Low-Fat Diet",
        DietaryGoal.PLANT_BASED: "Plant-Based Diet",
    }
)
CUSTOM_DIET_NAME = "Custom Diet"

NUTRIENT_DISPLAY_NAMES = MappingProxyType(
    {
        "calories": "Calories",
        "protein": "Protein",
        "carbs": "Carbohydrates",
        "fat": "Fat",
        "fiber": "Fiber",
    }
)

NUTRIENT_UNITS = MappingProxyType(
    {
        "calories": "",
        "protein": "g",
        "carbs": "g",
        "fat": "g",
        "fiber": "g",
    }
)

REPORT_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Macronutrients", NUTRIENT_KEYS),
)

FOOD_SUGGESTIONS = MappingProxyType(
    {
        "protein": ("Chicken breast", "Greek yogurt", "Eggs", "Lentils", "Tuna"),
        "carbs": (
            "Brown rice",
            "Sweet potatoes",
            "Oats",
            "Quinoa",
            "Whole grain bread",
        ),
        "fat": ("Avocados", "Olive oil", "Nuts", "Seeds", "Fatty fish"),
        "fiber": ("Beans", "Broccoli", "Apples", "Chia seeds", "Whole grains"),
    }
)
GENERIC_FOOD_SUGGESTIONS: tuple[str, ...] = (
    "Consult a nutritional guide for food sources",
)
