"""Normalize endpoint: return the cleaned transcript without calling Gemini."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, File, UploadFile

from src.api.errors import to_http_exception
from src.api.models import NormalizeResponse
from src.errors import TranscriptError
from src.ingestion.loader import load_transcript, transcript_format
from src.ingestion.normalizer import normalize

router = APIRouter()


@router.post("/api/normalize", response_model=NormalizeResponse)
async def normalize_transcript(file: Annotated[UploadFile, File(...)]) -> NormalizeResponse:
    """Upload a .vtt/.md/.txt transcript and get back only its spoken text."""
    raw = await file.read()
    filename = file.filename or ""

    try:
        text = load_transcript(filename, raw)
    except TranscriptError as exc:
        raise to_http_exception(exc) from exc

    cleaned = normalize(text)
    return NormalizeResponse(
        filename=filename,
        transcript_format=transcript_format(filename),
        characters=len(cleaned),
        text=cleaned,
    )
