"""End-to-end diet analysis pipeline."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import ValidationError

from diet_analyzer.domain.nutrition import NutritionalData
from diet_analyzer.domain.profile import AnalysisRequest
from diet_analyzer.domain.report import Report
from diet_analyzer.errors import InputError
from diet_analyzer.services.analysis import AnalysisService
from diet_analyzer.services.comparison import compare_with_targets
from diet_analyzer.services.intake import aggregate_intake
from diet_analyzer.services.reports import build_report
from diet_analyzer.services.targets import calculate_targets

_logger = logging.getLogger(__name__)


def parse_request(payload: Mapping[str, object]) -> AnalysisRequest:
    """Validate a raw request payload."""
    try:
        return AnalysisRequest.model_validate(payload)
    except ValidationError as exc:
        raise InputError(
            "Invalid input",
            errors=exc.errors(
                include_url=False, include_context=False, include_input=False
            ),
        ) from exc


def calculate_nutrition(request: AnalysisRequest) -> NutritionalData:
    """Compute targets, intake and their comparison for a request."""
    targets = calculate_targets(
        request.user_info, request.activity_level, request.dietary_goal
    )
    current_intake = aggregate_intake(request.food_entries)
    comparison = compare_with_targets(current_intake, targets)
    return NutritionalData(
        targets=targets,
        current_intake=current_intake,
        comparison=comparison,
        user_info=request.user_info,
        dietary_goal=request.dietary_goal,
    )


@dataclass
class DietAnalysisService:
    """Runs nutrition calculation, analysis and report assembly."""

    analysis_service: AnalysisService

    async def analyze(self, payload: AnalysisRequest | Mapping[str, object]) -> Report:
        """Return a report for the request or raise InputError."""
        request = (
            payload if isinstance(payload, AnalysisRequest) else parse_request(payload)
        )
        data = calculate_nutrition(request)
        _logger.info(
            "Analyzing diet: goal=%s nutrients=%s",
            request.dietary_goal,
            len(data.comparison),
        )
        analysis = await self.analysis_service.analyze(data)
        return build_report(data, analysis)
