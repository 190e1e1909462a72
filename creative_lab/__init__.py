"""
Viral Creative Lab - Modular Components

This package contains the core modules for the Viral Creative Lab:
- config: Configuration, constants, and data models
- errors: Exception types raised by the provider plumbing
- utils: Helper functions (logging, image loading, data URLs)
- gemini_client: Gemini API client initialization
- product_analyst: product photo analysis (multimodal)
- lifestyle_image: lifestyle photo generation
- copywriter: viral script and B-roll concepts
- video_director: Veo hero video submission, polling and download
- session: CampaignSession, the UI state behind app.py
- brief: Markdown / PDF campaign brief export
"""

# Lazy imports to avoid circular dependencies and hot-reload issues
__all__ = [
    # Config
    "ProductAnalysis",
    "CreativeAssets",
    "LoadingState",
    "Action",
    "ActionState",
    "SAMPLE_IMAGE_URL",
    "BILLING_DOCS_URL",
    # Utils
    "load_image_bytes",
    "to_data_url",
    "data_url_to_bytes",
    # Gemini Client
    "get_genai_client",
    "get_api_key",
    # Agents
    "analyze_product_image",
    "generate_lifestyle_image",
    "write_viral_script",
    "ideate_broll",
    "generate_product_video",
    # Session
    "CampaignSession",
    "CampaignServices",
    # Brief
    "build_campaign_brief",
    "render_pdf",
    "pdf_for_brief",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies and streamlit hot-reload issues."""
    if name in __all__:
        # Import on-demand to avoid module initialization issues
        if name in ("ProductAnalysis", "CreativeAssets", "LoadingState", "Action", "ActionState", "SAMPLE_IMAGE_URL", "BILLING_DOCS_URL"):
            from .config import ProductAnalysis, CreativeAssets, LoadingState, Action, ActionState, SAMPLE_IMAGE_URL, BILLING_DOCS_URL
            return locals()[name]
        elif name in ("load_image_bytes", "to_data_url", "data_url_to_bytes"):
            from .utils import load_image_bytes, to_data_url, data_url_to_bytes
            return locals()[name]
        elif name in ("get_genai_client", "get_api_key"):
            from .gemini_client import get_genai_client, get_api_key
            return locals()[name]
        elif name == "analyze_product_image":
            from .product_analyst import analyze_product_image
            return analyze_product_image
        elif name == "generate_lifestyle_image":
            from .lifestyle_image import generate_lifestyle_image
            return generate_lifestyle_image
        elif name in ("write_viral_script", "ideate_broll"):
            from .copywriter import write_viral_script, ideate_broll
            return locals()[name]
        elif name == "generate_product_video":
            from .video_director import generate_product_video
            return generate_product_video
        elif name in ("CampaignSession", "CampaignServices"):
            from .session import CampaignSession, CampaignServices
            return locals()[name]
        elif name in ("build_campaign_brief", "render_pdf", "pdf_for_brief"):
            from .brief import build_campaign_brief, render_pdf, pdf_for_brief
            return locals()[name]
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
