"""Diet analysis API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

from fastapi import APIRouter, Body, Request

from diet_analyzer.domain.report import Report

if TYPE_CHECKING:
    from diet_analyzer.containers import AppContainer

router = APIRouter(prefix="/api", tags=["analyze"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "API is running"}


@router.post("/analyze", response_model=Report)
async def analyze_diet(
    request: Request, payload: Annotated[dict[str, Any], Body()]
) -> Report:
    """Analyze a user's diet and return the formatted report."""
    container: AppContainer = request.app.state.container
    return await container.diet_analysis_service.analyze(payload)
