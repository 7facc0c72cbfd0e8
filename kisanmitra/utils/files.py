"""File and image encoding helpers shared by the services."""

from __future__ import annotations

import base64
import json
import mimetypes
from io import BytesIO
from pathlib import Path
from typing import Any, Optional, Tuple

from PIL import Image, UnidentifiedImageError

DEFAULT_IMAGE_MIME = "image/jpeg"


def ensure_dir(path: str | Path) -> Path:
    """Create the directory if it does not exist."""
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def read_binary(path: str | Path) -> bytes:
    """Read binary content from a file."""
    with open(path, "rb") as handle:
        return handle.read()


def write_text(path: str | Path, content: str) -> Path:
    """Write UTF-8 text to disk."""
    target = Path(path)
    ensure_dir(target.parent)
    target.write_text(content, encoding="utf-8")
    return target


def write_json(path: str | Path, data: Any) -> Path:
    """Serialize a Python object as JSON to disk."""
    payload = json.dumps(data, indent=2, ensure_ascii=False)
    return write_text(path, payload)


def b64encode(data: bytes) -> str:
    """Encode bytes to a base64 string without newlines."""
    return base64.b64encode(data).decode("utf-8")


def split_data_uri(value: str) -> Tuple[Optional[str], str]:
    """Split ``data:<mime>;base64,<payload>`` into ``(mime, payload)``.

    Strings without a data-URI prefix are returned unchanged with no MIME.
    """
    if not value.startswith("data:") or "," not in value:
        return None, value
    header, payload = value.split(",", 1)
    mime = header[len("data:"):].split(";", 1)[0] or None
    return mime, payload


def sniff_image_mime(data: bytes) -> Optional[str]:
    """Return the MIME type Pillow detects for ``data``, if any."""
    try:
        with Image.open(BytesIO(data)) as image:
            fmt = image.format
    except (UnidentifiedImageError, OSError):
        return None
    if not fmt:
        return None
    return Image.MIME.get(fmt)


def encode_image(image: str | Path | bytes, mime_type: Optional[str] = None) -> Tuple[str, str]:
    """Return ``(base64_payload, mime_type)`` for an image path, bytes, or data URI."""
    if isinstance(image, str) and image.startswith("data:"):
        uri_mime, payload = split_data_uri(image)
        return payload, mime_type or uri_mime or DEFAULT_IMAGE_MIME

    if isinstance(image, (bytes, bytearray)):
        binary = bytes(image)
        return b64encode(binary), mime_type or sniff_image_mime(binary) or DEFAULT_IMAGE_MIME

    binary = read_binary(image)
    if not mime_type:
        guessed, _ = mimetypes.guess_type(str(image))
        if guessed and guessed.startswith("image/"):
            mime_type = guessed
        else:
            mime_type = sniff_image_mime(binary)
    return b64encode(binary), mime_type or DEFAULT_IMAGE_MIME
