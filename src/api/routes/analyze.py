"""Analyze endpoint: upload a transcript and get ranked social-content insights."""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Header, Request, UploadFile

from src.api.errors import to_http_exception
from src.api.models import AnalyzeResponse
from src.config import settings
from src.errors import InsightPrioritizerError
from src.extraction.client import GeminiClientFactory
from src.ingestion.loader import transcript_format
from src.ingestion.pipeline import prioritize_file

logger = logging.getLogger(__name__)

router = APIRouter()


def get_client_factory(request: Request) -> GeminiClientFactory:
    """Return the Gemini client factory owned by the running app."""
    factory: GeminiClientFactory = request.app.state.client_factory
    return factory


@router.post("/api/analyze", response_model=AnalyzeResponse)
async def analyze(
    file: Annotated[UploadFile, File(...)],
    client_factory: Annotated[GeminiClientFactory, Depends(get_client_factory)],
    x_gemini_api_key: Annotated[str | None, Header()] = None,
) -> AnalyzeResponse:
    """Run the full pipeline on an uploaded transcript.

    The Gemini key comes from the ``X-Gemini-Api-Key`` header when present,
    otherwise from ``GEMINI_API_KEY``. Returns 501 when neither is set, 502
    when Gemini's response cannot be decoded (retry advised) and 503 when the
    Gemini call itself fails.
    """
    raw = await file.read()
    filename = file.filename or ""
    api_key = x_gemini_api_key or settings.gemini_api_key

    try:
        # The Gemini SDK call is blocking; run it off the event loop.
        insights = await asyncio.to_thread(
            prioritize_file, filename, raw, api_key, client_factory
        )
    except InsightPrioritizerError as exc:
        logger.info("Analysis of %s failed: %s", filename, exc.message)
        raise to_http_exception(exc) from exc

    return AnalyzeResponse(
        filename=filename,
        transcript_format=transcript_format(filename),
        insight_count=len(insights),
        insights=insights,
    )
