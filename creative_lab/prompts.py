"""
Prompt builders for the asset generators.

Each builder takes a ProductAnalysis and returns the instruction text sent to
the provider alongside (optionally) the product photo.
"""

from __future__ import annotations

import re
from typing import List

from .config import BROLL_SCENE_COUNT, ProductAnalysis


def _clean(value: str) -> str:
    cleaned = value.replace("\n", " ").replace("\r", " ")
    return re.sub(r"\s{2,}", " ", cleaned).strip()


def _join(items: List[str], sep: str = ", ") -> str:
    return sep.join(_clean(i) for i in items if isinstance(i, str) and i.strip())


def build_lifestyle_prompt(analysis: ProductAnalysis) -> str:
    return (
        "Professional e-commerce lifestyle photography. "
        f"Place the {_clean(analysis.product_name)} ({_clean(analysis.product_type)}) "
        "prominently in a high-end, aspirational environment.\n"
        "Settings: Use soft cinematic lighting, depth of field, and a modern aesthetic.\n"
        f"The environment should complement its materials ({_join(analysis.materials)}) "
        f"and colors ({_join(analysis.primary_colors)}).\n"
        "Ensure the product looks sharp and integrated into the scene.\n"
        "NO text, NO logos, NO distorted features. High resolution."
    )


def build_video_prompt(analysis: ProductAnalysis) -> str:
    return (
        f"A professional 1080p commercial video showcasing {_clean(analysis.product_name)}. "
        "The camera moves in a smooth cinematic orbit around the product. "
        f"Soft studio lighting highlights the {_join(analysis.materials, ' and ')} textures. "
        f"High-end lifestyle background matching {_join(analysis.primary_colors, ' and ')} palette."
    )


def build_script_prompt(analysis: ProductAnalysis) -> str:
    hero_material = analysis.materials[0] if analysis.materials else "quality materials"
    return f"""You are a viral TikTok marketing expert specializing in direct-to-consumer products.
Product: {_clean(analysis.product_name)}
Audience: {_clean(analysis.target_audience)}
Colors/Vibe: {_join(analysis.primary_colors)}

Write a high-energy 15-second script.
Structure:
1. THE HOOK (0-3s): Stop the scroll with a relatable problem or shocking statement.
2. THE VALUE (3-10s): Rapid-fire features using text-overlays. Mention the {_clean(hero_material)}.
3. THE CTA (10-15s): Urgency and clear instruction to buy.

Use emojis, TikTok slang (e.g., 'Pov', 'Game changer', 'Obsessed'), and include [Visual Directions] in brackets."""


def build_broll_prompt(analysis: ProductAnalysis) -> str:
    return f"""Generate {BROLL_SCENE_COUNT} highly descriptive 5-second B-roll scene prompts for an AI video generator like Veo.
Focus on the textures and details of the {_clean(analysis.product_name)}.
Scene 1: Close-up macro shot of texture.
Scene 2: Interaction or lifestyle movement.
Scene 3: Atmospheric lighting or dynamic angle.
Return as a JSON array of {BROLL_SCENE_COUNT} strings."""
