"""Report assembly from nutrition data and analysis."""

from diet_analyzer.domain.analysis import Analysis
from diet_analyzer.domain.nutrition import ComparisonEntry, NutritionalData
from diet_analyzer.domain.report import (
    NutrientCategory,
    NutrientRow,
    Report,
    ReportAnalysis,
)
from diet_analyzer.reference_data import (
    CUSTOM_DIET_NAME,
    GOAL_DISPLAY_NAMES,
    NUTRIENT_DISPLAY_NAMES,
    NUTRIENT_UNITS,
    REPORT_CATEGORIES,
)
from diet_analyzer.services.formatting import round_half_up

REPORT_TITLE_PREFIX = "Complete Nutritional Profile for"
CURRENT_DIET_PLACEHOLDER = "Current diet items would be listed here based on user input"
# Fixed guidance string; not derived from the computed carbs target.
CARBS_TARGET_TEXT = "50-100g (12-25% of calories)"
TARGET_RANGE_NOTES = {
    "protein": "30-40% of calories",
    "fat": "40-50% of calories",
}


def build_report(data: NutritionalData, analysis: Analysis) -> Report:
    """Merge the comparison table and analysis into a display-ready report."""
    return Report(
        title=f"{REPORT_TITLE_PREFIX} {format_dietary_goal(data.dietary_goal)}",
        current_diet=CURRENT_DIET_PLACEHOLDER,
        nutrients=_nutrient_categories(data.comparison),
        analysis=ReportAnalysis(
            strengths=list(analysis.strengths),
            deficiencies=list(analysis.deficiencies),
        ),
        recommendations=list(analysis.recommendations),
        summary=analysis.summary,
    )


def format_dietary_goal(dietary_goal: object) -> str:
    """Return the display name of a dietary goal."""
    if not isinstance(dietary_goal, str):
        return CUSTOM_DIET_NAME
    return GOAL_DISPLAY_NAMES.get(dietary_goal, CUSTOM_DIET_NAME)


def format_nutrient_name(nutrient: str) -> str:
    """Return the display name of a nutrient, or the capitalized key."""
    return NUTRIENT_DISPLAY_NAMES.get(nutrient, nutrient[:1].upper() + nutrient[1:])


def nutrient_unit(nutrient: str) -> str:
    """Return the unit suffix shown after a nutrient amount."""
    return NUTRIENT_UNITS.get(nutrient, "")


def format_target(nutrient: str, target: float) -> str:
    """Format a target value with nutrient-specific context."""
    if nutrient == "carbs":
        return CARBS_TARGET_TEXT
    note = TARGET_RANGE_NOTES.get(nutrient)
    if note:
        low = round_half_up(target * 0.9)
        high = round_half_up(target * 1.1)
        return f"{low}-{high}g ({note})"
    return f"{round_half_up(target)}{nutrient_unit(nutrient)}"


def _nutrient_categories(
    comparison: dict[str, ComparisonEntry],
) -> list[NutrientCategory]:
    return [
        NutrientCategory(
            category=category,
            items=[
                _nutrient_row(nutrient, comparison[nutrient])
                for nutrient in nutrients
                if nutrient in comparison
            ],
        )
        for category, nutrients in REPORT_CATEGORIES
    ]


def _nutrient_row(nutrient: str, entry: ComparisonEntry) -> NutrientRow:
    return NutrientRow(
        name=format_nutrient_name(nutrient),
        target=format_target(nutrient, entry.target),
        amount=f"~{round_half_up(entry.current)}{nutrient_unit(nutrient)}",
        percent_of_target=f"{round_half_up(entry.percentage)}%",
        status=entry.status,
    )
