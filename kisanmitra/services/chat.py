"""Gemini chat client answering farmers' free-text questions."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..config import AssistantConfig
from ..types import ChatReply
from ..utils.language import DEFAULT_LANGUAGE, detect_language
from ..utils.prompts import load_prompt
from ..utils.run_logger import RunLogger, new_run_id
from .base import ChatClient, GeminiConfigurationError

logger = logging.getLogger(__name__)

EMPTY_REPLY = "I'm sorry, I couldn't generate a response."
UNAVAILABLE_REPLY = "Sorry, the AI service is currently unavailable. "

SUGGESTIONS: Dict[str, List[str]] = {
    "en": ["🌾 How to prepare soil?", "🌱 Best seeds", "🛡️ Pest control", "☁️ Weather"],
    "hi": ["🌾 मिट्टी कैसे तैयार करें?", "🌱 बेहतर बीज", "🛡️ कीट नियंत्रण", "☁️ मौसम"],
    "te": ["🌾 మట్టిని ఎలా సిద్ధం చేయాలి?", "🌱 ఉత్తమ విత్తనాలు", "🛡️ తెగులు నివారణ", "☁️ మార్పులు"],
}


def suggestions_for(ui_language: str) -> List[str]:
    """Return a fresh copy of the follow-up prompts for ``ui_language``."""
    return list(SUGGESTIONS.get(ui_language, SUGGESTIONS[DEFAULT_LANGUAGE]))


class ChatService:
    """Sends chat messages to Gemini and never raises past ``send_message``.

    Every failure, including a missing API key, is turned into a displayable
    apology so the UI always receives a :class:`ChatReply`.
    """

    step_name = "chat"

    def __init__(
        self,
        config: AssistantConfig,
        client: Optional[ChatClient] = None,
        run_logger: Optional[RunLogger] = None,
    ) -> None:
        self._config = config
        self._client = client
        if run_logger is None and config.runs_dir:
            run_logger = RunLogger(config.runs_dir)
        self._run_logger = run_logger

    def send_message(self, message: str, ui_language: str = DEFAULT_LANGUAGE) -> ChatReply:
        """Return Gemini's reply plus language-specific follow-up suggestions."""
        try:
            text = self._generate(message)
        except Exception as exc:  # noqa: BLE001 - chat surfaces every failure as a reply
            logger.exception("Gemini chat request failed")
            return ChatReply(reply=UNAVAILABLE_REPLY + str(exc), suggestions=[])

        logger.info("Gemini chat response received (%d chars)", len(text or ""))
        return ChatReply(reply=text or EMPTY_REPLY, suggestions=suggestions_for(ui_language))

    def _generate(self, message: str) -> str | None:
        client = self._resolve_client()
        system_prompt = load_prompt("chat_system").strip()
        run_id = new_run_id(self.step_name) if self._run_logger else None
        if run_id:
            self._run_logger.log_prompt(run_id, self.step_name, f"{system_prompt}\n\n---\n\n{message}")

        response = client.chat.completions.create(
            model=self._config.gemini_model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": message},
            ],
            timeout=self._config.timeout,
        )
        text = self._extract_text(response)
        if run_id:
            self._run_logger.log_response(run_id, self.step_name, {"text": text})
        return text

    def _resolve_client(self) -> ChatClient:
        if not self._config.is_gemini_configured:
            raise GeminiConfigurationError(
                "Gemini API key not configured. Please add GEMINI_API_KEY to your .env file"
            )
        if self._client is not None:
            return self._client
        try:
            from openai import OpenAI  # type: ignore
        except ImportError as exc:  # pragma: no cover
            raise RuntimeError(
                "openai package is required for Gemini chat calls. Install via `pip install openai`."
            ) from exc
        self._client = OpenAI(api_key=self._config.gemini_api_key, base_url=self._config.chat_api_url)
        return self._client

    @staticmethod
    def _extract_text(response) -> str | None:
        """Extract assistant text content from OpenAI-compatible responses."""
        choices = getattr(response, "choices", None)
        if not choices and isinstance(response, dict):
            choices = response.get("choices")
        if isinstance(choices, list) and choices:
            choice = choices[0]
            message = getattr(choice, "message", None)
            if message is None and isinstance(choice, dict):
                message = choice.get("message")
            if message:
                content = getattr(message, "content", None)
                if content is None and isinstance(message, dict):
                    content = message.get("content")
                if isinstance(content, str):
                    return content
        return None


__all__ = ["ChatService", "SUGGESTIONS", "detect_language", "suggestions_for"]
