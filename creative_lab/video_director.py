"""
Video Director - Submit a Veo hero-video job, poll it, and download the MP4.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Optional

import requests
from google.genai import types as genai_types

from .config import (
    VIDEO_ASPECT_RATIO,
    VIDEO_INIT_MESSAGE,
    VIDEO_POLL_INTERVAL,
    VIDEO_RESOLUTION,
    VIDEO_STATUS_MESSAGES,
    ProductAnalysis,
)
from .errors import VideoGenerationError
from .gemini_client import get_api_key, get_genai_client, get_video_model
from .prompts import build_video_prompt
from .utils import data_url_to_bytes, get_logger

logger = get_logger("video_director")

DOWNLOAD_TIMEOUT = 120


class VideoJobState(str, Enum):
    SUBMITTED = "submitted"
    POLLING = "polling"
    DONE = "done"
    FAILED = "failed"


def generate_product_video(
    image: str,
    analysis: ProductAnalysis,
    on_status: Optional[Callable[[str], None]] = None,
    client=None,
    api_key: Optional[str] = None,
    poll_interval: float = VIDEO_POLL_INTERVAL,
    sleep: Callable[[float], None] = time.sleep,
    on_state: Optional[Callable[[VideoJobState], None]] = None,
) -> bytes:
    """
    Generate the hero video for a product and return the MP4 bytes.

    The status check loop has no iteration cap: it runs until the provider
    reports the operation done or a call raises.

    Args:
        image: Data URL or bare base64 payload of the product photo
        analysis: ProductAnalysis for the photo
        on_status: Receives human-readable progress messages
        client: Optional pre-built genai.Client
        api_key: Linked key; also used to authenticate the download
        poll_interval: Seconds between status checks
        sleep: Sleep function used between status checks
        on_state: Receives VideoJobState transitions

    Raises:
        VideoGenerationError: if the finished operation carries no video URI
        Exception: any provider or network error, unchanged
    """
    def report(msg: str) -> None:
        if on_status:
            on_status(msg)

    def transition(state: VideoJobState) -> None:
        logger.info(f"Video job state: {state.value}")
        if on_state:
            on_state(state)

    key = api_key or get_api_key()
    client = client or get_genai_client(key)
    image_bytes, mime = data_url_to_bytes(image)

    report(VIDEO_INIT_MESSAGE)
    try:
        operation = client.models.generate_videos(
            model=get_video_model(),
            prompt=build_video_prompt(analysis),
            image=genai_types.Image(image_bytes=image_bytes, mime_type=mime),
            config=genai_types.GenerateVideosConfig(
                number_of_videos=1,
                resolution=VIDEO_RESOLUTION,
                aspect_ratio=VIDEO_ASPECT_RATIO,
            ),
        )
        transition(VideoJobState.SUBMITTED)

        msg_idx = 0
        while not operation.done:
            if msg_idx == 0:
                transition(VideoJobState.POLLING)
            report(VIDEO_STATUS_MESSAGES[msg_idx % len(VIDEO_STATUS_MESSAGES)])
            msg_idx += 1
            sleep(poll_interval)
            operation = client.operations.get(operation)

        uri = _extract_video_uri(operation)
        if not uri:
            raise VideoGenerationError("Video generation failed - no URI")

        logger.info(f"Video ready after {msg_idx} status checks, downloading")
        video_bytes = _download_video(uri, key)
    except Exception:
        transition(VideoJobState.FAILED)
        raise

    transition(VideoJobState.DONE)
    return video_bytes


def _extract_video_uri(operation) -> Optional[str]:
    """Return the URI of the first generated video, if any."""
    response = getattr(operation, "response", None)
    videos = getattr(response, "generated_videos", None) or []
    if not videos:
        return None
    video = getattr(videos[0], "video", None)
    return getattr(video, "uri", None)


def _download_video(uri: str, api_key: Optional[str]) -> bytes:
    """Fetch the finished video file; the provider requires the key on the URL."""
    params = {"key": api_key} if api_key else None
    resp = requests.get(uri, params=params, timeout=DOWNLOAD_TIMEOUT)
    resp.raise_for_status()
    logger.info(f"Video downloaded ({len(resp.content)} bytes)")
    return resp.content
