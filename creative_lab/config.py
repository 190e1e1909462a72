"""
Configuration, constants, and data models for Viral Creative Lab.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# ---------- Data Models ----------
@dataclass(frozen=True)
class ProductAnalysis:
    """Structured product metadata returned by the analysis model."""
    product_name: str
    product_type: str
    materials: List[str] = field(default_factory=list)
    primary_colors: List[str] = field(default_factory=list)
    target_audience: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "ProductAnalysis":
        """Build from the provider's camelCase JSON payload."""
        return cls(
            product_name=str(data["productName"]).strip(),
            product_type=str(data["productType"]).strip(),
            materials=[str(m) for m in data.get("materials") or []],
            primary_colors=[str(c) for c in data.get("primaryColors") or []],
            target_audience=str(data.get("targetAudience") or "").strip(),
        )

    def to_dict(self) -> dict:
        return {
            "productName": self.product_name,
            "productType": self.product_type,
            "materials": list(self.materials),
            "primaryColors": list(self.primary_colors),
            "targetAudience": self.target_audience,
        }


@dataclass
class CreativeAssets:
    """Generated artifacts for one campaign. Every slot is independent."""
    original_image: Optional[str] = None
    lifestyle_image: Optional[str] = None
    tiktok_script: Optional[str] = None
    broll_concepts: Optional[List[str]] = None
    product_video: Optional[bytes] = None


class ActionState(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class Action(str, Enum):
    ANALYZE = "analyzing"
    GENERATE_IMAGE = "generating_image"
    WRITE_SCRIPT = "writing_script"
    IDEATE_BROLL = "ideating_broll"
    GENERATE_VIDEO = "generating_video"


@dataclass(frozen=True)
class LoadingState:
    """Busy flags for the UI, one per action."""
    analyzing: bool = False
    generating_image: bool = False
    writing_script: bool = False
    ideating_broll: bool = False
    generating_video: bool = False


# ---------- Credits ----------
STARTING_CREDITS = 3
UPGRADED_CREDITS = 99

# ---------- Provider Models ----------
DEFAULT_ANALYSIS_MODEL = "gemini-3-flash-preview"
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"
DEFAULT_TEXT_MODEL = "gemini-3-pro-preview"
DEFAULT_VIDEO_MODEL = "veo-3.1-fast-generate-preview"

LIFESTYLE_ASPECT_RATIO = "1:1"
VIDEO_RESOLUTION = "720p"
VIDEO_ASPECT_RATIO = "9:16"

# Seconds between video operation status checks
VIDEO_POLL_INTERVAL = 8

VIDEO_INIT_MESSAGE = "Initializing Video Engine..."
VIDEO_STATUS_MESSAGES = [
    "Analyzing product geometry...",
    "Simulating cinematic lighting...",
    "Extrapolating lifestyle environment...",
    "Rendering high-fidelity frames...",
    "Applying professional color grade...",
    "Finalizing export bitrate...",
]

BROLL_SCENE_COUNT = 3

SAMPLE_IMAGE_URL = (
    "https://images.unsplash.com/photo-1542291026-7eec264c27ff"
    "?auto=format&fit=crop&q=80&w=1000"
)
BILLING_DOCS_URL = "https://ai.google.dev/gemini-api/docs/billing"

# Substring the provider returns when a linked key is no longer valid
EXPIRED_CREDENTIAL_MARKER = "Requested entity was not found"

# ---------- Response Schemas ----------
ANALYSIS_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "productName": {"type": "STRING"},
        "productType": {"type": "STRING"},
        "materials": {"type": "ARRAY", "items": {"type": "STRING"}},
        "primaryColors": {"type": "ARRAY", "items": {"type": "STRING"}},
        "targetAudience": {"type": "STRING"},
    },
    "required": ["productName", "productType", "materials", "primaryColors", "targetAudience"],
}

BROLL_RESPONSE_SCHEMA = {
    "type": "ARRAY",
    "items": {"type": "STRING"},
}


DEFAULT_ANALYST_PROMPT = (
    "Analyze this product image. Identify the product name, type, key materials, "
    "primary colors, and its likely target audience. Output this as a JSON object."
)
