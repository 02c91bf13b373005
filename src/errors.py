"""Error kinds raised at the file-ingestion and AI-analysis boundaries.

Every error carries a message that is safe to show to the end user. The API
layer maps each kind to a single HTTP status (see ``src.api.errors``).
"""

from __future__ import annotations


class InsightPrioritizerError(Exception):
    """Base class for all user-facing errors raised by the service."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ---------------------------------------------------------------------------
# Upstream: file ingestion
# ---------------------------------------------------------------------------


class TranscriptError(InsightPrioritizerError):
    """The uploaded file could not be turned into transcript text."""


class UnsupportedFileTypeError(TranscriptError):
    """The file extension is not on the allow-list."""


class FileTooLargeError(TranscriptError):
    """The file exceeds the configured byte-size ceiling."""


class TranscriptDecodeError(TranscriptError):
    """The file bytes are not valid UTF-8 text."""


# ---------------------------------------------------------------------------
# Downstream: AI analysis
# ---------------------------------------------------------------------------


class AnalysisError(InsightPrioritizerError):
    """The transcript could not be analysed into insights."""


class MissingApiKeyError(AnalysisError):
    """No Gemini API key was supplied or configured."""


class MalformedInsightPayload(AnalysisError):
    """The AI response could not be decoded into the insight shape."""

    DEFAULT_MESSAGE = "The AI provided an unexpected response format. Please try again."

    def __init__(self, message: str = DEFAULT_MESSAGE) -> None:
        super().__init__(message)


class AnalysisServiceError(AnalysisError):
    """The Gemini call itself failed (transport, auth, quota, provider outage)."""
