"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import pytest

from diet_analyzer.config import Settings
from diet_analyzer.containers import AppContainer
from diet_analyzer.domain.profile import AnalysisRequest, UserProfile
from diet_analyzer.services.analysis import AnalysisClient, AnalysisService
from diet_analyzer.services.pipeline import DietAnalysisService, calculate_nutrition

CANNED_ANALYSIS: dict[str, object] = {
    "strengths": ["Protein intake is solid", "Fat intake is moderate"],
    "deficiencies": ["Carbohydrates are well below target"],
    "recommendations": [
        {
            "nutrient": "carbs",
            "suggestion": "Add a whole-grain side to lunch and dinner",
            "options": ["Brown rice", "Oats"],
        }
    ],
    "summary": "A protein-forward diet that needs more complex carbohydrates.",
}

CANNED_PROSE = """Here is my assessment of your diet.

Strengths:
- Protein intake is close to target
- Fat intake is steady

Deficiencies:
- Carbohydrates are far below target
- Fiber is low
• Total calories are under your needs

Recommendations:
- Carbs: add oats and brown rice to meals
- Drink more water through the day

Summary:
Overall a reasonable start that needs more whole grains.
"""


@dataclass
class FakeAnalysisClient(AnalysisClient):
    """Fake analysis client returning a fixed response."""

    response: str = field(default_factory=lambda: json.dumps(CANNED_ANALYSIS))
    prompts: list[str] = field(default_factory=list)

    async def generate(self, *, system_prompt: str, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.response


@dataclass
class FailingAnalysisClient(AnalysisClient):
    """Fake analysis client that always raises."""

    error: Exception = field(default_factory=lambda: ConnectionError("offline"))
    calls: int = 0

    async def generate(self, *, system_prompt: str, prompt: str) -> str:
        self.calls += 1
        raise self.error


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(
        age=30,
        gender="male",
        weight=80,
        weight_unit="kg",
        height=180,
        height_unit="cm",
    )


@pytest.fixture
def analysis_payload() -> dict[str, object]:
    return {
        "userInfo": {
            "age": 30,
            "gender": "male",
            "weight": 80,
            "weightUnit": "kg",
            "height": 180,
            "heightUnit": "cm",
        },
        "activityLevel": 3,
        "dietaryGoal": "balanced",
        "foodEntries": [{"name": "Oatmeal", "amount": 80, "unit": "g"}],
    }


@pytest.fixture
def nutritional_data(analysis_payload: dict[str, object]):
    return calculate_nutrition(AnalysisRequest.model_validate(analysis_payload))


@pytest.fixture
def analysis_client() -> FakeAnalysisClient:
    return FakeAnalysisClient()


@pytest.fixture
def container(
    settings: Settings, analysis_client: FakeAnalysisClient
) -> AppContainer:
    analysis_service = AnalysisService(
        client=analysis_client,
        timeout_seconds=1.0,
        retry_attempts=0,
        retry_delay_seconds=0,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        analysis_service=analysis_service,
        diet_analysis_service=DietAnalysisService(analysis_service=analysis_service),
        close_resources=close_resources,
    )
