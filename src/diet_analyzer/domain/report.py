"""Display-ready diet report models."""

from diet_analyzer.domain.analysis import Recommendation
from diet_analyzer.domain.models import CamelModel
from diet_analyzer.domain.nutrition import NutrientStatus


class NutrientRow(CamelModel):
    """One formatted row of the nutrient table."""

    name: str
    target: str
    amount: str
    percent_of_target: str
    status: NutrientStatus


class NutrientCategory(CamelModel):
    """Group of nutrient rows shown under a heading."""

    category: str
    items: list[NutrientRow]


class ReportAnalysis(CamelModel):
    """Strengths and deficiencies section of the report."""

    strengths: list[str]
    deficiencies: list[str]


class Report(CamelModel):
    """Final report returned to the caller."""

    title: str
    current_diet: str
    nutrients: list[NutrientCategory]
    analysis: ReportAnalysis
    recommendations: list[Recommendation]
    summary: str
