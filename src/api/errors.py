"""Map service error kinds onto HTTP status codes."""

from __future__ import annotations

from fastapi import HTTPException

from src.errors import (
    AnalysisServiceError,
    FileTooLargeError,
    InsightPrioritizerError,
    MalformedInsightPayload,
    MissingApiKeyError,
    TranscriptDecodeError,
    UnsupportedFileTypeError,
)

_STATUS_BY_ERROR: dict[type[InsightPrioritizerError], int] = {
    UnsupportedFileTypeError: 415,
    FileTooLargeError: 413,
    TranscriptDecodeError: 400,
    MissingApiKeyError: 501,  # graceful degradation when no key is configured
    MalformedInsightPayload: 502,
    AnalysisServiceError: 503,  # not the client's fault: auth, network, provider outage
}


def to_http_exception(exc: InsightPrioritizerError) -> HTTPException:
    """Convert a service error to an HTTPException carrying its user-facing message."""
    status_code = 500
    for error_cls, code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_cls):
            status_code = code
            break
    return HTTPException(status_code=status_code, detail=exc.message)
