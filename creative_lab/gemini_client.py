"""
Gemini API client initialization and configuration.
"""

from __future__ import annotations
import os
from typing import Optional

from google import genai
from google.genai import types as genai_types

from .config import (
    DEFAULT_ANALYSIS_MODEL,
    DEFAULT_IMAGE_MODEL,
    DEFAULT_TEXT_MODEL,
    DEFAULT_VIDEO_MODEL,
)
from .errors import MissingApiKeyError


def get_api_key() -> Optional[str]:
    """
    Read the provider API key from the environment.

    Returns:
        The first non-empty key among GEMINI_API_KEY, GOOGLE_GENAI_API_KEY
        and API_KEY, or None
    """
    for name in ("GEMINI_API_KEY", "GOOGLE_GENAI_API_KEY", "API_KEY"):
        value = os.getenv(name, "").strip()
        if value:
            return value
    return None


def get_genai_client(api_key: Optional[str] = None) -> "genai.Client":
    """
    Initialize and return Gemini API client.

    Args:
        api_key: Key linked at runtime; falls back to the environment

    Returns:
        genai.Client instance

    Raises:
        MissingApiKeyError: if no key is available
    """
    key = api_key or get_api_key()
    if not key:
        raise MissingApiKeyError(
            "No Gemini API key configured. Set GEMINI_API_KEY in your environment or .env file."
        )
    return genai.Client(api_key=key)


def get_thinking_config():
    """
    Get thinking configuration from environment variable.

    Returns:
        ThinkingConfig instance or None if not configured
    """
    budget = os.getenv("GEMINI_THINK_BUDGET")
    if not budget:
        return None
    try:
        return genai_types.ThinkingConfig(thinking_budget=int(budget))
    except ValueError:
        return None


def get_analysis_model() -> str:
    return os.getenv("GEMINI_ANALYSIS_MODEL", DEFAULT_ANALYSIS_MODEL)


def get_image_model() -> str:
    return os.getenv("GEMINI_IMAGE_MODEL", DEFAULT_IMAGE_MODEL)


def get_text_model() -> str:
    return os.getenv("GEMINI_TEXT_MODEL", DEFAULT_TEXT_MODEL)


def get_video_model() -> str:
    return os.getenv("VEO_MODEL", DEFAULT_VIDEO_MODEL)
