"""Tests for image encoding helpers."""

from __future__ import annotations

import base64
import tempfile
import unittest
from io import BytesIO
from pathlib import Path

from PIL import Image

from kisanmitra.utils.files import encode_image, split_data_uri


def _png_bytes() -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (2, 2), color=(200, 180, 40)).save(buffer, format="PNG")
    return buffer.getvalue()


class DataUriTest(unittest.TestCase):
    def test_split_data_uri(self) -> None:
        self.assertEqual(split_data_uri("data:image/png;base64,AAAA"), ("image/png", "AAAA"))

    def test_plain_base64_is_untouched(self) -> None:
        self.assertEqual(split_data_uri("AAAA"), (None, "AAAA"))


class EncodeImageTest(unittest.TestCase):
    def test_bytes_are_base64_encoded(self) -> None:
        payload, mime = encode_image(b"\x00\x01leaf")
        self.assertEqual(base64.b64decode(payload), b"\x00\x01leaf")
        self.assertEqual(mime, "image/jpeg")

    def test_explicit_mime_wins(self) -> None:
        _, mime = encode_image("data:image/png;base64,AAAA", mime_type="image/heic")
        self.assertEqual(mime, "image/heic")

    def test_non_image_extension_is_sniffed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            for name in ("upload.bin", "leaf.txt", "leaf"):
                with self.subTest(name=name):
                    path = Path(tmp) / name
                    path.write_bytes(_png_bytes())
                    _, mime = encode_image(path)
                    self.assertEqual(mime, "image/png")

    def test_unrecognised_file_defaults_to_jpeg(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "notes.txt"
            path.write_text("not a photo", encoding="utf-8")
            _, mime = encode_image(path)
        self.assertEqual(mime, "image/jpeg")

    def test_image_extension_is_trusted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "leaf.gif"
            path.write_bytes(_png_bytes())
            _, mime = encode_image(path)
        self.assertEqual(mime, "image/gif")


if __name__ == "__main__":
    unittest.main()
