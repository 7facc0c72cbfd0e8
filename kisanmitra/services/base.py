"""Client protocols and the error hierarchy shared by the AI services."""

from __future__ import annotations

from typing import Any, Optional, Protocol


class ChatCompletions(Protocol):
    def create(self, **kwargs: Any) -> Any:
        ...


class _ChatNamespace(Protocol):
    completions: ChatCompletions


class ChatClient(Protocol):
    """Anything shaped like ``openai.OpenAI`` for chat completions."""

    chat: _ChatNamespace


class HttpSession(Protocol):
    """The slice of ``requests.Session`` used by the vision service."""

    def post(self, url: str, **kwargs: Any) -> Any:
        ...


class KisanMitraError(Exception):
    """Base class for errors raised by the KisanMitra services."""


class GeminiConfigurationError(KisanMitraError, ValueError):
    """Raised when no usable Gemini API key is configured."""


class GeminiAPIError(KisanMitraError, RuntimeError):
    """Raised for non-success HTTP statuses and transport failures."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GeminiEmptyResponseError(KisanMitraError, ValueError):
    """Raised when a successful response carries no completion text."""
