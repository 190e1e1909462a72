"""
Product Analyst - Multi-modal product photo analysis using Gemini.
"""

from __future__ import annotations
from typing import Optional

from google.genai import types as genai_types

from .config import ANALYSIS_RESPONSE_SCHEMA, DEFAULT_ANALYST_PROMPT, ProductAnalysis
from .errors import AnalysisError, ProviderError
from .gemini_client import get_analysis_model, get_genai_client
from .utils import data_url_to_bytes, get_logger, parse_json_blob

logger = get_logger("product_analyst")


def analyze_product_image(
    image: str,
    client=None,
    api_key: Optional[str] = None,
) -> ProductAnalysis:
    """
    Identify name, type, materials, colors and audience of a product photo.

    Args:
        image: Data URL or bare base64 payload of the photo
        client: Optional pre-built genai.Client
        api_key: Linked key, used when no client is given

    Returns:
        ProductAnalysis

    Raises:
        ProviderError: if the provider call fails
        AnalysisError: if the response is not a complete analysis object
    """
    client = client or get_genai_client(api_key)
    image_bytes, mime = data_url_to_bytes(image)
    image_part = genai_types.Part.from_bytes(data=image_bytes, mime_type=mime)

    model_name = get_analysis_model()
    logger.info(f"Analyzing product image ({len(image_bytes)} bytes) with {model_name}")
    try:
        response = client.models.generate_content(
            model=model_name,
            contents=[image_part, DEFAULT_ANALYST_PROMPT],
            config=genai_types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=ANALYSIS_RESPONSE_SCHEMA,
            ),
        )
    except Exception as exc:
        logger.error(f"Product analysis request failed: {exc}")
        raise ProviderError(f"Product analysis failed: {exc}") from exc

    text = response.text or ""
    logger.info(f"Product analyst response received ({len(text)} chars)")

    parsed = parse_json_blob(text)
    if not isinstance(parsed, dict):
        raise AnalysisError("Analysis response was not a JSON object")
    try:
        return ProductAnalysis.from_dict(parsed)
    except KeyError as exc:
        raise AnalysisError(f"Analysis response missing field: {exc.args[0]}") from exc
