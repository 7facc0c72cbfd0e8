"""Tests for environment-driven configuration."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from kisanmitra.config import DEFAULT_MODEL, PLACEHOLDER_API_KEY, AssistantConfig


class AssistantConfigTest(unittest.TestCase):
    def test_from_env_reads_variables(self) -> None:
        env = {
            "GEMINI_API_KEY": "abc",
            "KISANMITRA_GEMINI_MODEL": "gemini-test",
            "KISANMITRA_TIMEOUT": "12.5",
        }
        with tempfile.TemporaryDirectory() as tmp, mock.patch.dict(os.environ, env, clear=True):
            config = AssistantConfig.from_env(str(Path(tmp) / "missing.env"))

        self.assertEqual(config.gemini_api_key, "abc")
        self.assertEqual(config.gemini_model, "gemini-test")
        self.assertEqual(config.timeout, 12.5)
        self.assertIsNone(config.runs_dir)
        self.assertIn("gemini-test:generateContent", config.vision_endpoint)

    def test_from_env_loads_dotenv_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp, mock.patch.dict(os.environ, {}, clear=True):
            dotenv = Path(tmp) / ".env"
            dotenv.write_text("GEMINI_API_KEY=from-file\n", encoding="utf-8")
            config = AssistantConfig.from_env(str(dotenv))

        self.assertEqual(config.gemini_api_key, "from-file")
        self.assertEqual(config.gemini_model, DEFAULT_MODEL)
        self.assertIsNone(config.timeout)

    def test_placeholder_counts_as_unconfigured(self) -> None:
        self.assertFalse(AssistantConfig().is_gemini_configured)
        self.assertFalse(AssistantConfig(gemini_api_key="").is_gemini_configured)
        self.assertFalse(AssistantConfig(gemini_api_key=PLACEHOLDER_API_KEY).is_gemini_configured)
        self.assertTrue(AssistantConfig(gemini_api_key="real-key").is_gemini_configured)


if __name__ == "__main__":
    unittest.main()
