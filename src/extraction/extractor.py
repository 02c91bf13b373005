"""Gemini-powered extraction of scored social-content insights from a transcript."""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from src.config import Settings, settings
from src.errors import AnalysisServiceError, MalformedInsightPayload
from src.extraction.models import Insight
from src.extraction.ranker import rank

logger = logging.getLogger(__name__)

# Response schema for Gemini structured output (OpenAPI subset, camelCase keys).
INSIGHT_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "required": [
            "id",
            "summary",
            "suggestedHook",
            "category",
            "informativeScore",
            "inspiringScore",
            "viralScore",
            "linkedinScore",
            "carouselSlides",
        ],
        "properties": {
            "id": {"type": "STRING"},
            "summary": {"type": "STRING"},
            "suggestedHook": {"type": "STRING"},
            "category": {"type": "STRING"},
            "informativeScore": {"type": "NUMBER"},
            "inspiringScore": {"type": "NUMBER"},
            "viralScore": {"type": "NUMBER"},
            "linkedinScore": {"type": "NUMBER"},
            "carouselSlides": {
                "type": "ARRAY",
                "items": {
                    "type": "OBJECT",
                    "required": ["title", "content"],
                    "properties": {
                        "title": {"type": "STRING"},
                        "content": {"type": "STRING"},
                    },
                },
            },
        },
    },
}

_PROMPT_TEMPLATE = """\
Analyze the following transcript content. Extract the top 5-8 distinct, high-impact insights \
that would make for compelling social media content.
For each insight, provide:
- A summary of the core idea
- A suggested hook for a post
- A category (e.g., Growth, Tech, Wellness, Business)
- Scores from 1 to 10 for: Informative, Inspiring, Viral, and LinkedIn suitability.
- A 3-5 slide visual carousel outline (title and content for each slide) that breaks down \
the insight for a LinkedIn/Instagram carousel.

Content to analyze:
{transcript}"""

_INSIGHT_LIST = TypeAdapter(list[Insight])


def build_prompt(transcript: str, max_chars: int) -> str:
    """Build the analysis prompt, truncating the transcript to *max_chars*."""
    return _PROMPT_TEMPLATE.format(transcript=transcript[:max_chars])


def decode_insights(payload: str | None) -> list[Insight]:
    """Decode a Gemini JSON response into unranked insights.

    A missing or empty payload means the model found nothing and decodes to
    ``[]``. Any ``totalScore`` the model sent is dropped unvalidated;
    :func:`rank` computes it.

    Raises:
        MalformedInsightPayload: Invalid JSON, not an array, or an element
            missing a required field / carrying a non-numeric or non-finite score.
    """
    if not payload or not payload.strip():
        payload = "[]"

    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        logger.exception("Gemini response is not valid JSON")
        raise MalformedInsightPayload() from exc

    if isinstance(data, list):
        for item in data:
            if isinstance(item, dict):
                item.pop("totalScore", None)
                item.pop("total_score", None)

    try:
        return _INSIGHT_LIST.validate_python(data)
    except ValidationError as exc:
        logger.exception("Failed to parse Gemini response (%d errors)", exc.error_count())
        raise MalformedInsightPayload() from exc


def analyze_transcript(
    transcript: str,
    client: Any,
    config: Settings | None = None,
) -> list[Insight]:
    """Extract insights from a cleaned transcript with Gemini and rank them.

    Args:
        transcript: Normalized transcript text.
        client: A ``google.genai.Client`` (see :class:`GeminiClientFactory`).
        config: Settings for model name and truncation; defaults to app settings.

    Returns:
        Insights sorted by ``total_score`` descending.

    Raises:
        AnalysisServiceError: The Gemini call failed.
        MalformedInsightPayload: The response could not be decoded.
    """
    config = config or settings

    try:
        response = client.models.generate_content(
            model=config.gemini_model,
            contents=build_prompt(transcript, config.max_transcript_chars),
            config={
                "response_mime_type": "application/json",
                "response_schema": INSIGHT_RESPONSE_SCHEMA,
            },
        )
    except Exception as exc:
        logger.exception("Gemini request failed")
        raise AnalysisServiceError(f"Insight analysis service unavailable: {exc}") from exc

    insights = decode_insights(response.text)
    logger.info("Gemini returned %d insights", len(insights))
    return rank(insights)
