"""Models for natural-language diet analysis results."""

from pydantic import BaseModel, Field, field_validator


class Recommendation(BaseModel):
    """Suggested change for a single nutrient."""

    nutrient: str
    suggestion: str
    options: list[str] = Field(default_factory=list)


class Analysis(BaseModel):
    """Structured analysis of a diet, whichever way it was produced."""

    strengths: list[str] = Field(default_factory=list)
    deficiencies: list[str] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)
    summary: str = ""

    @field_validator("strengths", "deficiencies", "recommendations", mode="before")
    @classmethod
    def _none_as_empty_list(cls, value: object) -> object:
        return [] if value is None else value

    @field_validator("summary", mode="before")
    @classmethod
    def _none_as_empty_summary(cls, value: object) -> object:
        return "" if value is None else value
