"""Tests for the prompt template loader."""

from __future__ import annotations

import unittest

from kisanmitra.utils.prompts import load_prompt


class LoadPromptTest(unittest.TestCase):
    def test_unfilled_placeholder_renders_empty(self) -> None:
        self.assertNotIn("{{", load_prompt("vision_diagnosis"))

    def test_placeholder_is_filled(self) -> None:
        rendered = load_prompt("vision_diagnosis", {"language_instruction": "\n\nANSWER IN FRENCH"})
        self.assertTrue(rendered.rstrip().endswith("ANSWER IN FRENCH"))

    def test_unknown_template(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_prompt("does_not_exist")


if __name__ == "__main__":
    unittest.main()
