"""Turn uploaded file bytes into transcript text (allow-list, size ceiling, decode)."""

from __future__ import annotations

from src.config import Settings, settings
from src.errors import FileTooLargeError, TranscriptDecodeError, UnsupportedFileTypeError

# Normalization is format-blind; the format is only reported back to callers.
_FORMAT_MAP = {"vtt": "vtt", "md": "markdown", "txt": "text"}


def file_extension(filename: str) -> str:
    """Return the lower-cased text after the final ``.``, or ``""``."""
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def transcript_format(filename: str) -> str:
    """Map a filename to ``"vtt"``, ``"markdown"`` or ``"text"``."""
    return _FORMAT_MAP.get(file_extension(filename), "text")


def load_transcript(filename: str, raw: bytes, config: Settings | None = None) -> str:
    """Validate an uploaded transcript file and decode it to text.

    Args:
        filename: Original upload filename (only the extension is used).
        raw: Raw file bytes.
        config: Settings to validate against; defaults to the app settings.

    Returns:
        The decoded file contents.

    Raises:
        UnsupportedFileTypeError: Extension is not in ``allowed_extensions``.
        FileTooLargeError: ``raw`` exceeds ``max_upload_bytes``.
        TranscriptDecodeError: ``raw`` is not valid UTF-8.
    """
    config = config or settings

    ext = file_extension(filename)
    allowed = [e.lower() for e in config.allowed_extensions]
    if ext not in allowed:
        supported = ", ".join(f".{e}" for e in allowed)
        raise UnsupportedFileTypeError(
            f"Unsupported file type {filename!r}. Supported: {supported}."
        )

    # Size is checked before decoding so oversized uploads are never decoded.
    if len(raw) > config.max_upload_bytes:
        raise FileTooLargeError(
            f"File too large. Maximum size is {config.max_upload_bytes // (1024 * 1024)} MB."
        )

    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise TranscriptDecodeError(
            f"Could not read {filename!r}: the file is not valid UTF-8 text."
        ) from exc
