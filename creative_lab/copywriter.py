"""
Copywriter - viral script and B-roll concept generation.
"""

from __future__ import annotations
from typing import List, Optional

from google.genai import types as genai_types

from .config import BROLL_RESPONSE_SCHEMA, BROLL_SCENE_COUNT, ProductAnalysis
from .errors import ProviderError
from .gemini_client import get_genai_client, get_text_model, get_thinking_config
from .prompts import build_broll_prompt, build_script_prompt
from .utils import get_logger, parse_json_blob

logger = get_logger("copywriter")

SCRIPT_FALLBACK = "Failed to generate script."


def write_viral_script(
    analysis: ProductAnalysis,
    client=None,
    api_key: Optional[str] = None,
) -> str:
    """
    Write a 15-second hook / value / CTA script for short-form video.

    Returns:
        Script text, or SCRIPT_FALLBACK when the model returns no text
    """
    client = client or get_genai_client(api_key)
    model_name = get_text_model()
    logger.info(f"Writing script for '{analysis.product_name}' with {model_name}")
    try:
        response = client.models.generate_content(
            model=model_name,
            contents=build_script_prompt(analysis),
            config=genai_types.GenerateContentConfig(
                thinking_config=get_thinking_config(),
            ),
        )
    except Exception as exc:
        logger.error(f"Script request failed: {exc}")
        raise ProviderError(f"Script writing failed: {exc}") from exc

    text = (response.text or "").strip()
    logger.info(f"Script received ({len(text)} chars)")
    return text or SCRIPT_FALLBACK


def ideate_broll(
    analysis: ProductAnalysis,
    client=None,
    api_key: Optional[str] = None,
) -> List[str]:
    """
    Generate short B-roll scene prompts for a separate video-generation step.

    Returns:
        Up to BROLL_SCENE_COUNT prompts; [] if the response is malformed
    """
    client = client or get_genai_client(api_key)
    model_name = get_text_model()
    logger.info(f"Ideating B-roll for '{analysis.product_name}' with {model_name}")
    try:
        response = client.models.generate_content(
            model=model_name,
            contents=build_broll_prompt(analysis),
            config=genai_types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=BROLL_RESPONSE_SCHEMA,
            ),
        )
    except Exception as exc:
        logger.error(f"B-roll request failed: {exc}")
        raise ProviderError(f"B-roll ideation failed: {exc}") from exc

    parsed = parse_json_blob(response.text or "")
    if not isinstance(parsed, list):
        logger.warning("B-roll response was not a JSON array, returning no concepts")
        return []
    concepts = [item.strip() for item in parsed if isinstance(item, str) and item.strip()]
    return concepts[:BROLL_SCENE_COUNT]
