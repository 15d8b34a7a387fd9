"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from diet_analyzer.adapters.openai_analysis_client import OpenAIAnalysisClient
from diet_analyzer.config import Settings
from diet_analyzer.services.analysis import AnalysisService
from diet_analyzer.services.pipeline import DietAnalysisService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analysis_service: AnalysisService
    diet_analysis_service: DietAnalysisService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    openai_client = OpenAIAnalysisClient.create(
        resolved_settings.openai_api_key,
        resolved_settings.openai_model,
        temperature=resolved_settings.openai_temperature,
        store=resolved_settings.openai_store,
        timeout_seconds=resolved_settings.analysis_timeout_seconds,
    )
    analysis_service = AnalysisService(
        client=openai_client,
        timeout_seconds=resolved_settings.analysis_timeout_seconds,
        retry_attempts=resolved_settings.analysis_retry_attempts,
        retry_delay_seconds=resolved_settings.analysis_retry_delay_seconds,
    )
    diet_analysis_service = DietAnalysisService(analysis_service=analysis_service)

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        analysis_service=analysis_service,
        diet_analysis_service=diet_analysis_service,
        close_resources=close_resources,
    )
