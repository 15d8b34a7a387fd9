"""Diet analysis via a text-generation model with local fallbacks."""

import asyncio
import json
import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from diet_analyzer.domain.analysis import Analysis, Recommendation
from diet_analyzer.domain.nutrition import (
    ComparisonEntry,
    NutrientStatus,
    NutritionalData,
)
from diet_analyzer.reference_data import FOOD_SUGGESTIONS, GENERIC_FOOD_SUGGESTIONS
from diet_analyzer.services.formatting import round_half_up

SYSTEM_PROMPT = (
    "You are a nutritional analysis assistant specialized in diet optimization. "
    "Provide detailed, actionable recommendations based on nutritional data."
)

OUTPUT_INSTRUCTIONS = """Please provide:
1. A list of strengths in the current diet (what's good)
2. A list of deficiencies or concerns (what needs improvement)
3. Specific food recommendations to address deficiencies
4. A short summary paragraph

Format your response as a JSON object with these keys: strengths, deficiencies, \
recommendations, summary
For each recommendation, include: nutrient, suggestion, and options \
(array of specific food suggestions)."""

FALLBACK_SUMMARY = (
    "This analysis provides basic guidance based on your nutritional data. "
    "Consider these recommendations as a starting point for improving your diet."
)
NUTRIENT_OPTION = "Add foods rich in this nutrient"
GENERAL_OPTION = "Follow this recommendation"
GENERAL_NUTRIENT = "general"

_ANALYSIS_KEYS = frozenset({"strengths", "deficiencies", "recommendations", "summary"})
_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)
_SECTION_HEADER = re.compile(
    r"^\s*(?:#{1,6}\s*)?(?:\d+[.)]\s*)?(?:\*\*)?"
    r"(strengths|deficiencies|recommendations|summary)\b"
    r"(?:[^:\n]{0,40}:|\**\s*$)\**\s*(.*)$",
    re.IGNORECASE,
)
_BULLET = re.compile(r"^\s*[-•*]\s+(.*\S)")

_logger = logging.getLogger(__name__)


class AnalysisClient(Protocol):
    """Interface for the text-generation model."""

    async def generate(self, *, system_prompt: str, prompt: str) -> str:
        """Return the raw generated text for a prompt."""


@dataclass(frozen=True)
class Parsed:
    """A structured analysis is available."""

    analysis: Analysis


@dataclass(frozen=True)
class NeedsExtraction:
    """The model answered, but not with a parseable analysis object."""

    raw_text: str


@dataclass(frozen=True)
class Failed:
    """The model could not be reached or did not answer in time."""

    reason: str


AnalysisOutcome = Parsed | NeedsExtraction | Failed


@dataclass
class AnalysisService:
    """Produces an Analysis, falling back to local rules when the model fails."""

    client: AnalysisClient
    timeout_seconds: float = 30.0
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def analyze(self, data: NutritionalData) -> Analysis:
        """Analyze nutrition data; never raises except on cancellation."""
        outcome = await self._request_analysis(build_analysis_prompt(data))
        if isinstance(outcome, NeedsExtraction):
            _logger.warning("Analysis response was not JSON, extracting sections")
            outcome = Parsed(extract_analysis_from_text(outcome.raw_text))
        elif isinstance(outcome, Failed):
            _logger.warning("Using rule-based analysis: %s", outcome.reason)
            outcome = Parsed(build_fallback_analysis(data.comparison))
        return outcome.analysis

    async def _request_analysis(self, prompt: str) -> AnalysisOutcome:
        """Call the model with a timeout and a short retry."""
        attempt = 0
        while True:
            try:
                raw_text = await asyncio.wait_for(
                    self.client.generate(system_prompt=SYSTEM_PROMPT, prompt=prompt),
                    timeout=self.timeout_seconds,
                )
            except Exception as exc:
                attempt += 1
                _logger.warning(
                    "Analysis request failed (attempt %s/%s): %r",
                    attempt,
                    self.retry_attempts + 1,
                    exc,
                )
                if attempt > self.retry_attempts:
                    return Failed(reason=f"{type(exc).__name__}: {exc}")
                await asyncio.sleep(self.retry_delay_seconds)
                continue
            return parse_analysis_response(raw_text)


def build_analysis_prompt(data: NutritionalData) -> str:
    """Render the user profile and comparison table as a model prompt."""
    profile = data.user_info
    targets = data.targets.as_dict()
    lines = [
        "Analyze the following diet information and provide specific recommendations:",
        "",
        "User Profile:",
        f"- Age: {profile.age}",
        f"- Gender: {profile.gender}",
        f"- Diet Goal: {data.dietary_goal or 'unspecified'}",
        "",
        "Current Nutritional Intake:",
    ]
    for nutrient, amount in data.current_intake.as_dict().items():
        line = f"- {nutrient}: {amount:.1f}"
        target = targets.get(nutrient)
        if target:
            line += f" (Target: {target:.1f})"
        lines.append(line)

    lines += ["", "Comparison Results:"]
    for nutrient, entry in data.comparison.items():
        lines.append(
            f"- {nutrient}: {entry.current:.1f} vs target of {entry.target:.1f} "
            f"({entry.percentage:.1f}%, Status: {entry.status})"
        )

    lines += ["", OUTPUT_INSTRUCTIONS]
    return "\n".join(lines)


def parse_analysis_response(raw_text: str) -> Parsed | NeedsExtraction:
    """Parse the response as JSON, then the outermost braces inside it."""
    for candidate in _json_candidates(raw_text):
        try:
            return Parsed(_load_analysis(candidate))
        except (ValueError, ValidationError) as exc:
            _logger.debug("Analysis JSON candidate rejected: %s", exc)
    return NeedsExtraction(raw_text=raw_text)


def _json_candidates(raw_text: str) -> Iterator[str]:
    yield raw_text
    match = _JSON_OBJECT.search(raw_text)
    if match and match.group(0) != raw_text:
        yield match.group(0)


def _load_analysis(text: str) -> Analysis:
    data = json.loads(text)
    if not isinstance(data, dict) or not _ANALYSIS_KEYS & data.keys():
        raise ValueError("response is not an analysis object")
    try:
        return Analysis.model_validate(data)
    except ValidationError as exc:
        _logger.warning(
            "Analysis JSON has %s invalid fields, keeping the valid ones",
            exc.error_count(),
        )
    return _salvage_analysis(data)


def _salvage_analysis(data: dict[str, object]) -> Analysis:
    """Build an analysis from the well-formed parts of a JSON object."""
    summary = data.get("summary")
    return Analysis(
        strengths=_string_items(data.get("strengths")),
        deficiencies=_string_items(data.get("deficiencies")),
        recommendations=_recommendation_items(data.get("recommendations")),
        summary=summary if isinstance(summary, str) else "",
    )


def _string_items(value: object) -> list[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _recommendation_items(value: object) -> list[Recommendation]:
    if not isinstance(value, list):
        return []
    recommendations = []
    for item in value:
        if isinstance(item, str):
            recommendations.append(
                Recommendation(
                    nutrient=GENERAL_NUTRIENT,
                    suggestion=item,
                    options=[GENERAL_OPTION],
                )
            )
            continue
        try:
            recommendations.append(Recommendation.model_validate(item))
        except ValidationError:
            _logger.debug("Dropping malformed recommendation: %r", item)
    return recommendations


def extract_analysis_from_text(text: str) -> Analysis:
    """Extract an analysis from prose with labeled sections and bullet lists."""
    sections = _split_sections(text)
    return Analysis(
        strengths=_bullets(sections.get("strengths", [])),
        deficiencies=_bullets(sections.get("deficiencies", [])),
        recommendations=[
            _recommendation_from_bullet(item)
            for item in _bullets(sections.get("recommendations", []))
        ],
        summary=" ".join(sections.get("summary", [])),
    )


def _split_sections(text: str) -> dict[str, list[str]]:
    """Group non-empty lines under the most recent section header."""
    sections: dict[str, list[str]] = {}
    current: list[str] | None = None
    for line in text.splitlines():
        header = _SECTION_HEADER.match(line)
        if header:
            current = sections.setdefault(header.group(1).lower(), [])
            inline = header.group(2).strip()
            if inline:
                current.append(inline)
            continue
        stripped = line.strip()
        if current is not None and stripped:
            current.append(stripped)
    return sections


def _bullets(lines: list[str]) -> list[str]:
    items = []
    for line in lines:
        match = _BULLET.match(line)
        if match:
            items.append(match.group(1).strip())
    return items


def _recommendation_from_bullet(item: str) -> Recommendation:
    nutrient, separator, suggestion = item.partition(":")
    if separator:
        return Recommendation(
            nutrient=nutrient.strip(" *"),
            suggestion=suggestion.strip(),
            options=[NUTRIENT_OPTION],
        )
    return Recommendation(
        nutrient=GENERAL_NUTRIENT,
        suggestion=item,
        options=[GENERAL_OPTION],
    )


def build_fallback_analysis(comparison: Mapping[str, ComparisonEntry]) -> Analysis:
    """Rule-based analysis derived only from the comparison statuses."""
    strengths: list[str] = []
    deficiencies: list[str] = []
    recommendations: list[Recommendation] = []
    for nutrient, entry in comparison.items():
        label = nutrient[:1].upper() + nutrient[1:]
        percent = round_half_up(entry.percentage)
        if entry.status is NutrientStatus.ADEQUATE:
            strengths.append(f"{label}: Meeting targets at {percent}%")
        elif entry.status is NutrientStatus.DEFICIENT:
            deficiencies.append(f"{label}: Only at {percent}% of target")
            recommendations.append(
                Recommendation(
                    nutrient=nutrient,
                    suggestion=(
                        f"Increase {nutrient} intake to reach target of "
                        f"{round_half_up(entry.target)} per day"
                    ),
                    options=food_suggestions(nutrient),
                )
            )

    return Analysis(
        strengths=strengths,
        deficiencies=deficiencies,
        recommendations=recommendations,
        summary=FALLBACK_SUMMARY,
    )


def food_suggestions(nutrient: str) -> list[str]:
    """Return example foods for a nutrient."""
    return list(FOOD_SUGGESTIONS.get(nutrient, GENERIC_FOOD_SUGGESTIONS))
