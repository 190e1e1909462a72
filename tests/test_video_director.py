from types import SimpleNamespace

import pytest
import requests

from creative_lab import video_director
from creative_lab.config import VIDEO_INIT_MESSAGE, VIDEO_POLL_INTERVAL, VIDEO_STATUS_MESSAGES
from creative_lab.errors import VideoGenerationError
from creative_lab.video_director import VideoJobState, generate_product_video

from conftest import FakeClient, video_operation

VIDEO_URI = "https://generativelanguage.googleapis.com/v1beta/files/abc:download?alt=media"


@pytest.fixture
def downloads(monkeypatch):
    seen = []

    def fake_get(url, params=None, timeout=None):
        seen.append({"url": url, "params": params, "timeout": timeout})
        return SimpleNamespace(content=b"mp4-bytes", raise_for_status=lambda: None)

    monkeypatch.setattr(video_director.requests, "get", fake_get)
    return seen


def _run(client, **kwargs):
    statuses, states, sleeps = [], [], []
    result = generate_product_video(
        "data:image/png;base64,aGVsbG8=",
        kwargs.pop("analysis"),
        on_status=statuses.append,
        on_state=states.append,
        client=client,
        api_key="paid-key",
        sleep=sleeps.append,
        **kwargs,
    )
    return result, statuses, states, sleeps


def test_polls_until_done_and_downloads(mug_analysis, downloads):
    client = FakeClient(
        operation=video_operation(False),
        operations=[video_operation(False), video_operation(False), video_operation(True, VIDEO_URI)],
    )

    result, statuses, states, sleeps = _run(client, analysis=mug_analysis)

    assert result == b"mp4-bytes"
    assert statuses == [VIDEO_INIT_MESSAGE] + VIDEO_STATUS_MESSAGES[:3]
    assert sleeps == [VIDEO_POLL_INTERVAL] * 3
    assert client.operations.calls == 3
    assert states == [VideoJobState.SUBMITTED, VideoJobState.POLLING, VideoJobState.DONE]
    assert downloads == [{"url": VIDEO_URI, "params": {"key": "paid-key"}, "timeout": video_director.DOWNLOAD_TIMEOUT}]


def test_submission_uses_fixed_resolution_and_aspect_ratio(mug_analysis, downloads):
    client = FakeClient(operation=video_operation(True, VIDEO_URI))

    _run(client, analysis=mug_analysis)

    call = client.models.video_calls[0]
    assert call["config"].number_of_videos == 1
    assert call["config"].resolution == "720p"
    assert call["config"].aspect_ratio == "9:16"
    assert call["image"].image_bytes == b"hello"
    assert "Ceramic Mug" in call["prompt"]
    assert "stoneware and glaze" in call["prompt"]


def test_status_messages_rotate_and_wrap(mug_analysis, downloads):
    polls = len(VIDEO_STATUS_MESSAGES) + 2
    client = FakeClient(
        operation=video_operation(False),
        operations=[video_operation(False)] * (polls - 1) + [video_operation(True, VIDEO_URI)],
    )

    _, statuses, _, _ = _run(client, analysis=mug_analysis)

    shown = statuses[1:]
    assert len(shown) == polls
    assert shown[len(VIDEO_STATUS_MESSAGES)] == VIDEO_STATUS_MESSAGES[0]
    assert shown[-1] == VIDEO_STATUS_MESSAGES[1]


def test_missing_uri_fails(mug_analysis, downloads):
    client = FakeClient(operation=video_operation(False), operations=[video_operation(True)])

    states = []
    with pytest.raises(VideoGenerationError, match="no URI"):
        generate_product_video(
            "aGVsbG8=", mug_analysis, client=client, api_key="k", sleep=lambda s: None, on_state=states.append
        )
    assert states[-1] is VideoJobState.FAILED
    assert downloads == []


def test_network_errors_propagate(mug_analysis, monkeypatch):
    def broken_get(url, params=None, timeout=None):
        raise requests.ConnectionError("reset")

    monkeypatch.setattr(video_director.requests, "get", broken_get)
    client = FakeClient(operation=video_operation(True, VIDEO_URI))

    with pytest.raises(requests.ConnectionError):
        generate_product_video("aGVsbG8=", mug_analysis, client=client, api_key="k", sleep=lambda s: None)


def test_submission_errors_propagate_unchanged(mug_analysis):
    client = FakeClient(error=RuntimeError("404 NOT_FOUND. Requested entity was not found."))
    with pytest.raises(RuntimeError, match="Requested entity was not found"):
        generate_product_video("aGVsbG8=", mug_analysis, client=client, api_key="k", sleep=lambda s: None)
