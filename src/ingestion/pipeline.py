"""End-to-end prioritization pipeline: load -> normalize -> analyze -> rank."""

from __future__ import annotations

import logging

from src.config import Settings, settings
from src.extraction.client import GeminiClientFactory
from src.extraction.extractor import analyze_transcript
from src.extraction.models import Insight
from src.ingestion.loader import load_transcript, transcript_format
from src.ingestion.normalizer import normalize

logger = logging.getLogger(__name__)


def prioritize_file(
    filename: str,
    raw: bytes,
    api_key: str,
    client_factory: GeminiClientFactory,
    config: Settings | None = None,
) -> list[Insight]:
    """Full pipeline for one uploaded transcript file.

    Args:
        filename: Original upload filename.
        raw: Raw file bytes.
        api_key: Gemini API key for this request.
        client_factory: Caller-owned factory used to obtain the Gemini client.
        config: Settings override; defaults to the app settings.

    Returns:
        Ranked insights, best first.

    Raises:
        TranscriptError: The file was rejected or could not be decoded.
        AnalysisError: No key, provider failure, or an undecodable response.
    """
    config = config or settings

    # 1. Load
    text = load_transcript(filename, raw, config)

    # 2. Normalize
    cleaned = normalize(text)
    logger.info(
        "Normalized %s (%s): %d -> %d characters",
        filename,
        transcript_format(filename),
        len(text),
        len(cleaned),
    )

    # 3. Analyze + rank
    client = client_factory.get(api_key)
    insights = analyze_transcript(cleaned, client, config)
    logger.info("Prioritized %d insights for %s", len(insights), filename)
    return insights
