"""
Utility functions for Viral Creative Lab.
"""

from __future__ import annotations
import base64
import io
import json
import logging
import os
from typing import Any, Tuple

import requests
from PIL import Image

from .config import SAMPLE_IMAGE_URL

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Return a namespaced logger, configuring the package handler once.

    Args:
        name: Short module name, e.g. "video_director"
    """
    root = logging.getLogger("creative_lab")
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(os.getenv("CREATIVE_LAB_LOG_LEVEL", "INFO").upper())
        root.propagate = False
    return root.getChild(name)


logger = get_logger("utils")


def load_image_bytes(file) -> Tuple[bytes, str]:
    """
    Load and convert uploaded file to PNG bytes.

    Args:
        file: Streamlit UploadedFile object, path, or binary file-like

    Returns:
        Tuple of (image_bytes, mime_type)
    """
    image = Image.open(file).convert("RGB")
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue(), "image/png"


def to_data_url(data: bytes, mime: str = "image/png") -> str:
    """Embed raw bytes as a base64 data URL."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime};base64,{encoded}"


def split_data_url(value: str) -> Tuple[str, str]:
    """
    Split a data URL into (base64_payload, mime_type).

    A bare base64 string is returned unchanged with an image/png mime.
    """
    if value.startswith("data:") and "," in value:
        header, payload = value.split(",", 1)
        mime = header[len("data:"):].split(";", 1)[0] or "image/png"
        return payload, mime
    return value, "image/png"


def data_url_to_bytes(value: str) -> Tuple[bytes, str]:
    """Decode a data URL (or bare base64 string) to (bytes, mime_type)."""
    payload, mime = split_data_url(value)
    return base64.b64decode(payload), mime


def parse_json_blob(blob: str) -> Any:
    """
    Parse JSON from a string, stripping code fences.

    Args:
        blob: String potentially containing JSON with markdown code fences

    Returns:
        Parsed value or None if parsing fails
    """
    if not blob:
        return None
    text = blob.strip()
    if text.startswith("```"):
        parts = text.split("```")
        if len(parts) >= 2:
            text = parts[1].strip()
    if text.lower().startswith("json"):
        text = text[4:].strip()
    try:
        return json.loads(text)
    except ValueError:
        return None


def fetch_sample_image(url: str = SAMPLE_IMAGE_URL, timeout: int = 30) -> str:
    """
    Download the sample product photo and return it as a PNG data URL.

    Raises:
        requests.RequestException: on any network or HTTP error
    """
    logger.info(f"Fetching sample image from {url}")
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    image_bytes, mime = load_image_bytes(io.BytesIO(resp.content))
    return to_data_url(image_bytes, mime)
