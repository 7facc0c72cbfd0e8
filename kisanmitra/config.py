"""Configuration container for the KisanMitra AI services."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import ClassVar

from dotenv import load_dotenv

PLACEHOLDER_API_KEY = "your_gemini_api_key_here"
DEFAULT_MODEL = "gemini-3-flash-preview"
DEFAULT_VISION_API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
DEFAULT_CHAT_API_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


@dataclass(slots=True)
class AssistantConfig:
    """Explicit configuration handed to every service at construction time."""

    env_prefix: ClassVar[str] = "KISANMITRA_"

    gemini_api_key: str | None = None
    gemini_model: str = DEFAULT_MODEL
    vision_api_url: str = DEFAULT_VISION_API_URL
    chat_api_url: str = DEFAULT_CHAT_API_URL
    runs_dir: str | None = None
    timeout: float | None = None

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "AssistantConfig":
        """Create a config object populated from ``.env`` and environment variables."""
        load_dotenv(dotenv_path)
        prefix = cls.env_prefix
        timeout = os.getenv(f"{prefix}TIMEOUT")
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY"),
            gemini_model=os.getenv(f"{prefix}GEMINI_MODEL", DEFAULT_MODEL),
            vision_api_url=os.getenv(f"{prefix}VISION_API_URL", DEFAULT_VISION_API_URL),
            chat_api_url=os.getenv(f"{prefix}CHAT_API_URL", DEFAULT_CHAT_API_URL),
            runs_dir=os.getenv(f"{prefix}RUNS_DIR") or None,
            timeout=float(timeout) if timeout else None,
        )

    @property
    def is_gemini_configured(self) -> bool:
        """True when a usable (non-empty, non-placeholder) API key is present."""
        return bool(self.gemini_api_key) and self.gemini_api_key != PLACEHOLDER_API_KEY

    @property
    def vision_endpoint(self) -> str:
        """The generateContent URL with the configured model filled in."""
        return self.vision_api_url.format(model=self.gemini_model)
