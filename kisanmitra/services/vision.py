"""Gemini Vision client diagnosing cotton plant diseases from photos."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import requests

from ..config import AssistantConfig
from ..types import VisionDiagnosis
from ..utils.files import encode_image
from ..utils.prompts import load_prompt
from ..utils.run_logger import RunLogger, new_run_id
from .base import GeminiAPIError, GeminiConfigurationError, GeminiEmptyResponseError, HttpSession

logger = logging.getLogger(__name__)

HEALTHY_PLANT_NAME = "Healthy Cotton Plant"
DEFAULT_CONFIDENCE = 0.85

GENERATION_CONFIG = {
    "temperature": 0.7,
    "maxOutputTokens": 8192,
    "topP": 0.95,
}

LANGUAGE_INSTRUCTIONS = {
    "hi": "\n\nहिंदी में पूरा जवाब दें। सभी दवाओं के नाम और मात्रा बताएं।",
    "te": "\n\nతెలుగులో పూర్తి సమాధానం ఇవ్వండి। అన్ని మందుల వివరాలు ఇవ్వండి।",
}

# Labels may be wrapped in markdown emphasis, e.g. "**Confidence: 92%**".
_STATUS_PATTERN = re.compile(r"Disease Status:[ \t]*\**[ \t]*([^*\n]+)", re.IGNORECASE)
_DISEASE_PATTERN = re.compile(r"Specific Disease:[ \t]*\**[ \t]*([^*\n]+)", re.IGNORECASE)
_CONFIDENCE_PATTERN = re.compile(r"Confidence:[ \t]*\**[ \t]*(\d+)[ \t]*%?", re.IGNORECASE)


@dataclass(slots=True)
class ParsedAnalysis:
    """Fields extracted from the free-text analysis."""

    disease: str
    confidence: float
    is_healthy: bool


def build_vision_prompt(language: str = "en") -> str:
    """Render the diagnosis instructions, asking for a Hindi or Telugu answer when requested."""
    instruction = LANGUAGE_INSTRUCTIONS.get(language, "")
    return load_prompt("vision_diagnosis", {"language_instruction": instruction}).strip()


def extract_health_status(text: str) -> bool:
    """True when the ``Disease Status`` field mentions "healthy"; False if absent."""
    match = _STATUS_PATTERN.search(text)
    status = match.group(1).strip().lower() if match else ""
    return "healthy" in status


def extract_disease_name(text: str) -> str:
    """Return the ``Specific Disease`` value, normalising "none"/"healthy" answers."""
    match = _DISEASE_PATTERN.search(text)
    disease = match.group(1).strip() if match else ""
    lowered = disease.lower()
    if "none" in lowered or "healthy" in lowered:
        return HEALTHY_PLANT_NAME
    return disease


def extract_confidence(text: str) -> float:
    """Return the ``Confidence`` percentage as a fraction, defaulting to 0.85."""
    match = _CONFIDENCE_PATTERN.search(text)
    if not match:
        return DEFAULT_CONFIDENCE
    return min(int(match.group(1)), 100) / 100


def parse_vision_response(text: str) -> ParsedAnalysis:
    """Run every field extractor; a missing field only selects its default."""
    return ParsedAnalysis(
        disease=extract_disease_name(text),
        confidence=extract_confidence(text),
        is_healthy=extract_health_status(text),
    )


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


class VisionDiagnosisService:
    """Analyses plant photos with the Gemini generateContent REST endpoint.

    Unlike :class:`~kisanmitra.services.chat.ChatService` this service raises:
    configuration, HTTP and empty-response failures each have their own
    exception type.
    """

    step_name = "vision"

    def __init__(
        self,
        config: AssistantConfig,
        session: Optional[HttpSession] = None,
        run_logger: Optional[RunLogger] = None,
    ) -> None:
        self._config = config
        self._owns_session = session is None
        self._session = session or requests.Session()
        if run_logger is None and config.runs_dir:
            run_logger = RunLogger(config.runs_dir)
        self._run_logger = run_logger

    def close(self) -> None:
        """Close the HTTP session if this service created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "VisionDiagnosisService":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def is_configured(self) -> bool:
        """Report whether a usable API key is present."""
        return self._config.is_gemini_configured

    def analyze_image(
        self,
        image: str | Path | bytes,
        language: str = "en",
        mime_type: Optional[str] = None,
    ) -> VisionDiagnosis:
        """Diagnose ``image`` and return the parsed result with the raw analysis."""
        if not self.is_configured():
            raise GeminiConfigurationError(
                "Gemini API key not configured. Please add GEMINI_API_KEY to your .env file"
            )

        payload_b64, resolved_mime = encode_image(image, mime_type)
        logger.info("Image encoded to base64 (%d chars, %s)", len(payload_b64), resolved_mime)

        prompt = build_vision_prompt(language)
        body = {
            "contents": [
                {
                    "parts": [
                        {"text": prompt},
                        {"inline_data": {"mime_type": resolved_mime, "data": payload_b64}},
                    ],
                },
            ],
            "generationConfig": dict(GENERATION_CONFIG),
        }

        run_id = new_run_id(self.step_name) if self._run_logger else None
        if run_id:
            self._run_logger.log_prompt(run_id, self.step_name, prompt)

        data = self._post(body)
        if run_id:
            self._run_logger.log_response(run_id, self.step_name, data)

        analysis_text = self._extract_text(data)
        if not analysis_text:
            raise GeminiEmptyResponseError("No response from Gemini Vision API")
        logger.info("Gemini analysis received (%d chars)", len(analysis_text))

        parsed = parse_vision_response(analysis_text)
        return VisionDiagnosis(
            disease=parsed.disease,
            confidence=parsed.confidence,
            is_healthy=parsed.is_healthy,
            full_analysis=analysis_text,
        )

    def check_connection(self) -> bool:
        """Send a tiny prompt to the endpoint; never raises."""
        if not self.is_configured():
            return False
        try:
            response = self._session.post(
                self._config.vision_endpoint,
                params={"key": self._config.gemini_api_key},
                json={"contents": [{"parts": [{"text": "Hello"}]}]},
                timeout=self._config.timeout,
            )
            return _is_success(response.status_code)
        except Exception:  # noqa: BLE001 - diagnostics only
            logger.exception("Gemini connection test failed")
            return False

    def _post(self, body: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = self._session.post(
                self._config.vision_endpoint,
                params={"key": self._config.gemini_api_key},
                json=body,
                timeout=self._config.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Gemini API request failed: %s", exc)
            raise GeminiAPIError(f"Gemini API request failed: {exc}") from exc

        logger.info("Gemini API response status: %s", response.status_code)
        if not _is_success(response.status_code):
            error_message = self._extract_error_message(response)
            logger.error("Gemini API error: %s %s", response.status_code, error_message)
            raise GeminiAPIError(
                f"Gemini API error: {response.status_code} - {error_message or 'Unknown error'}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise GeminiEmptyResponseError("No response from Gemini Vision API") from exc

    @staticmethod
    def _extract_error_message(response) -> str | None:
        try:
            data = response.json()
        except ValueError:
            return None
        error = data.get("error") if isinstance(data, dict) else None
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        return None

    @staticmethod
    def _extract_text(data) -> str | None:
        """Return ``candidates[0].content.parts[0].text`` if present."""
        if not isinstance(data, dict):
            return None
        candidates = data.get("candidates")
        if not isinstance(candidates, list) or not candidates:
            return None
        content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
            return None
        text = parts[0].get("text")
        return text if isinstance(text, str) else None


__all__ = [
    "DEFAULT_CONFIDENCE",
    "HEALTHY_PLANT_NAME",
    "ParsedAnalysis",
    "VisionDiagnosisService",
    "build_vision_prompt",
    "extract_confidence",
    "extract_disease_name",
    "extract_health_status",
    "parse_vision_response",
]
