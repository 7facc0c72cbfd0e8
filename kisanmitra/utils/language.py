"""UI language helpers."""

from __future__ import annotations

import re
from typing import Mapping, TypeVar

SUPPORTED_LANGUAGES = ("en", "hi", "te")
DEFAULT_LANGUAGE = "en"

_DEVANAGARI = re.compile("[\u0900-\u097F]")
_TELUGU = re.compile("[\u0C00-\u0C7F]")

T = TypeVar("T")


def detect_language(text: str) -> str:
    """Classify ``text`` as ``hi``, ``te`` or ``en`` by Unicode script.

    Any Devanagari character wins over Telugu; text with neither is English.
    """
    if _DEVANAGARI.search(text or ""):
        return "hi"
    if _TELUGU.search(text or ""):
        return "te"
    return DEFAULT_LANGUAGE


def localize(value: Mapping[str, T], language: str) -> T:
    """Pick the ``language`` variant of a localized value, falling back to English."""
    if language in value:
        return value[language]
    return value[DEFAULT_LANGUAGE]


__all__ = ["DEFAULT_LANGUAGE", "SUPPORTED_LANGUAGES", "detect_language", "localize"]
