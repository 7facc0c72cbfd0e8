"""Prompt templates shipped in ``kisanmitra/prompts``."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Mapping

PROMPTS_DIR = Path(__file__).resolve().parent.parent / "prompts"
_PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}")


@lru_cache(maxsize=None)
def _read_template(name: str) -> str:
    path = PROMPTS_DIR / f"{name}.txt"
    if not path.is_file():
        raise FileNotFoundError(f"Unknown prompt template {name!r} (looked for {path})")
    return path.read_text(encoding="utf-8")


def load_prompt(name: str, variables: Mapping[str, object] | None = None) -> str:
    """Return prompt ``name`` with every ``{{ placeholder }}`` filled from ``variables``.

    Placeholders missing from ``variables`` render as empty strings, so optional
    sections (such as a language suffix) simply disappear.
    """
    variables = variables or {}

    def _replace(match: re.Match[str]) -> str:
        value = variables.get(match.group(1))
        return "" if value is None else str(value)

    return _PLACEHOLDER_PATTERN.sub(_replace, _read_template(name))


__all__ = ["load_prompt", "PROMPTS_DIR"]
