"""Gemini client factory keyed by API key."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from google import genai

from src.errors import MissingApiKeyError

logger = logging.getLogger(__name__)


class GeminiClientFactory:
    """Build or reuse a Gemini client for a given API key.

    Holds at most one client: asking for the same key returns the cached
    client, asking for a different key replaces it. The factory is owned by
    its caller (the FastAPI app keeps one on ``app.state``) rather than living
    at module level, so tests and sessions get isolated instances.
    """

    def __init__(self, client_cls: Callable[..., Any] = genai.Client) -> None:
        self._client_cls = client_cls
        self._client: Any = None
        self._api_key = ""
        self._lock = threading.Lock()

    def get(self, api_key: str) -> Any:
        """Return a client authenticated with *api_key*.

        Raises:
            MissingApiKeyError: If *api_key* is empty.
        """
        if not api_key:
            raise MissingApiKeyError(
                "Insight analysis requires a Gemini API key, but none was supplied or configured."
            )

        with self._lock:
            if self._client is None or api_key != self._api_key:
                logger.info("Creating Gemini client")
                self._client = self._client_cls(api_key=api_key)
                self._api_key = api_key
            return self._client
