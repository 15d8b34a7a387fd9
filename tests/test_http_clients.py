"""Tests for the OpenAI-backed analysis client."""

import asyncio
import json

import httpx
import openai
import pytest

from diet_analyzer.adapters.openai_analysis_client import OpenAIAnalysisClient
from diet_analyzer.domain.nutrition import NutritionalData
from diet_analyzer.services.analysis import FALLBACK_SUMMARY, AnalysisService
from tests.conftest import CANNED_ANALYSIS


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str) -> None:
        self.responses = _FakeResponses(output_text)


def _responses_payload(text: str) -> dict[str, object]:
    return {
        "id": "resp_123",
        "object": "response",
        "created_at": 1700000000,
        "model": "gpt-4o",
        "status": "completed",
        "parallel_tool_calls": False,
        "tool_choice": "auto",
        "tools": [],
        "output": [
            {
                "type": "message",
                "id": "msg_123",
                "status": "completed",
                "role": "assistant",
                "content": [
                    {"type": "output_text", "text": text, "annotations": []}
                ],
            }
        ],
    }


def test_openai_client_sends_json_request() -> None:
    fake = _FakeOpenAI(json.dumps(CANNED_ANALYSIS))
    client = OpenAIAnalysisClient(client=fake, model="gpt-4o", temperature=0.2)

    result = asyncio.run(client.generate(system_prompt="Be brief", prompt="Analyze"))

    assert json.loads(result) == CANNED_ANALYSIS
    payload = fake.responses.last_payload
    assert payload is not None
    assert payload["model"] == "gpt-4o"
    assert payload["instructions"] == "Be brief"
    assert payload["input"] == "Analyze"
    assert payload["temperature"] == 0.2
    assert payload["text"] == {"format": {"type": "json_object"}}
    assert payload["store"] is False


def test_openai_client_rejects_empty_output() -> None:
    client = OpenAIAnalysisClient(client=_FakeOpenAI(""), model="gpt-4o")

    with pytest.raises(RuntimeError):
        asyncio.run(client.generate(system_prompt="s", prompt="p"))


def test_openai_client_over_http_transport() -> None:
    seen: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/responses")
        seen.append(json.loads(request.content.decode()))
        return httpx.Response(
            200, json=_responses_payload(json.dumps(CANNED_ANALYSIS))
        )

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = OpenAIAnalysisClient.create(
        "key", "gpt-4o", temperature=0.3, http_client=http_client
    )

    result = asyncio.run(client.generate(system_prompt="sys", prompt="prompt"))

    assert json.loads(result) == CANNED_ANALYSIS
    assert seen[0]["model"] == "gpt-4o"
    assert seen[0]["temperature"] == 0.3


def test_openai_client_raises_on_server_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": {"message": "boom"}})

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = OpenAIAnalysisClient.create("key", "gpt-4o", http_client=http_client)

    with pytest.raises(openai.APIStatusError):
        asyncio.run(client.generate(system_prompt="sys", prompt="prompt"))


def test_service_falls_back_when_openai_rejects_key(
    nutritional_data: NutritionalData,
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": {"message": "invalid api key"}})

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = OpenAIAnalysisClient.create("bad-key", "gpt-4o", http_client=http_client)
    service = AnalysisService(client=client, retry_attempts=0)

    analysis = asyncio.run(service.analyze(nutritional_data))

    assert analysis.summary == FALLBACK_SUMMARY
