"""
Lifestyle photo generator - places the product in an aspirational scene.
"""

from __future__ import annotations
import base64
from typing import Optional

from google.genai import types as genai_types

from .config import LIFESTYLE_ASPECT_RATIO, ProductAnalysis
from .errors import NoImageGeneratedError, ProviderError
from .gemini_client import get_genai_client, get_image_model
from .prompts import build_lifestyle_prompt
from .utils import data_url_to_bytes, get_logger, to_data_url

logger = get_logger("lifestyle_image")


def _first_inline_image(response) -> Optional[bytes]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    for part in getattr(content, "parts", None) or []:
        inline = getattr(part, "inline_data", None)
        if inline is not None and inline.data:
            data = inline.data
            # The SDK hands back raw bytes; older payloads carry base64 text
            return data if isinstance(data, bytes) else base64.b64decode(data)
    return None


def generate_lifestyle_image(
    image: str,
    analysis: ProductAnalysis,
    client=None,
    api_key: Optional[str] = None,
) -> str:
    """
    Render the product in a lifestyle setting.

    Returns:
        PNG data URL of the generated image

    Raises:
        ProviderError: if the provider call fails
        NoImageGeneratedError: if the response carries no image data
    """
    client = client or get_genai_client(api_key)
    image_bytes, mime = data_url_to_bytes(image)

    model_name = get_image_model()
    logger.info(f"Generating lifestyle image for '{analysis.product_name}' with {model_name}")
    try:
        response = client.models.generate_content(
            model=model_name,
            contents=[
                genai_types.Part.from_bytes(data=image_bytes, mime_type=mime),
                build_lifestyle_prompt(analysis),
            ],
            config=genai_types.GenerateContentConfig(
                image_config=genai_types.ImageConfig(aspect_ratio=LIFESTYLE_ASPECT_RATIO),
            ),
        )
    except Exception as exc:
        logger.error(f"Lifestyle image request failed: {exc}")
        raise ProviderError(f"Lifestyle image generation failed: {exc}") from exc

    generated = _first_inline_image(response)
    if not generated:
        logger.warning("Image model returned no inline image data")
        raise NoImageGeneratedError("No image generated")

    logger.info(f"Lifestyle image received ({len(generated)} bytes)")
    return to_data_url(generated, "image/png")
