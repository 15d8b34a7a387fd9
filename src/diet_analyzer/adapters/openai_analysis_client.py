"""OpenAI Responses API client for diet analysis."""

from dataclasses import dataclass

import httpx
from openai import AsyncOpenAI

from diet_analyzer.services.analysis import AnalysisClient


@dataclass
class OpenAIAnalysisClient(AnalysisClient):
    """Analysis client backed by OpenAI Responses API."""

    client: AsyncOpenAI
    model: str
    temperature: float = 0.3
    store: bool = False

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        api_key: str,
        model: str,
        *,
        temperature: float = 0.3,
        store: bool = False,
        timeout_seconds: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> "OpenAIAnalysisClient":
        """Create an OpenAI analysis client.

        Retries are left to the analysis service.
        """
        client = AsyncOpenAI(
            api_key=api_key,
            timeout=httpx.Timeout(timeout_seconds),
            max_retries=0,
            http_client=http_client,
        )
        return cls(client=client, model=model, temperature=temperature, store=store)

    async def generate(self, *, system_prompt: str, prompt: str) -> str:
        """Request a JSON-object answer and return its raw text."""
        response = await self.client.responses.create(
            model=self.model,
            instructions=system_prompt,
            input=prompt,
            temperature=self.temperature,
            text={"format": {"type": "json_object"}},
            store=self.store,
        )
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return output_text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
