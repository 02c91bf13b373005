"""Pydantic response schemas for the Insight Prioritizer API."""

from __future__ import annotations

from src.extraction.models import CamelModel, Insight


class NormalizeResponse(CamelModel):
    """Response body for the /api/normalize endpoint."""

    filename: str
    transcript_format: str
    characters: int
    text: str


class AnalyzeResponse(CamelModel):
    """Response body for the /api/analyze endpoint.

    ``insights`` is already ranked, best first.
    """

    filename: str
    transcript_format: str
    insight_count: int
    insights: list[Insight]
