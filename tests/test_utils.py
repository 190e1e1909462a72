import base64
import io
from types import SimpleNamespace

import pytest
import requests

from creative_lab import utils
from creative_lab.utils import (
    data_url_to_bytes,
    load_image_bytes,
    parse_json_blob,
    split_data_url,
    to_data_url,
)


def test_data_url_keeps_mime_and_payload(png_bytes):
    url = to_data_url(png_bytes, "image/jpeg")
    assert url.startswith("data:image/jpeg;base64,")
    data, mime = data_url_to_bytes(url)
    assert data == png_bytes
    assert mime == "image/jpeg"


def test_bare_base64_is_accepted(png_bytes):
    payload = base64.b64encode(png_bytes).decode("ascii")
    assert split_data_url(payload) == (payload, "image/png")
    assert data_url_to_bytes(payload)[0] == png_bytes


def test_load_image_bytes_normalizes_to_png():
    buf = io.BytesIO()
    from PIL import Image

    Image.new("RGBA", (4, 4), (0, 0, 0, 0)).save(buf, format="PNG")
    buf.seek(0)
    data, mime = load_image_bytes(buf)
    assert mime == "image/png"
    assert data.startswith(b"\x89PNG")


@pytest.mark.parametrize(
    "blob, expected",
    [
        ('{"a": 1}', {"a": 1}),
        ('```json\n["x", "y"]\n```', ["x", "y"]),
        ("not json", None),
        ("", None),
    ],
)
def test_parse_json_blob(blob, expected):
    assert parse_json_blob(blob) == expected


def test_fetch_sample_image_returns_png_data_url(monkeypatch, png_bytes):
    seen = {}

    def fake_get(url, timeout):
        seen["url"] = url
        return SimpleNamespace(content=png_bytes, raise_for_status=lambda: None)

    monkeypatch.setattr(utils.requests, "get", fake_get)
    url = utils.fetch_sample_image("https://example.com/shoe.jpg")
    assert seen["url"] == "https://example.com/shoe.jpg"
    assert url.startswith("data:image/png;base64,")


def test_fetch_sample_image_propagates_http_errors(monkeypatch):
    def raise_http():
        raise requests.HTTPError("404")

    monkeypatch.setattr(
        utils.requests, "get", lambda url, timeout: SimpleNamespace(content=b"", raise_for_status=raise_http)
    )
    with pytest.raises(requests.HTTPError):
        utils.fetch_sample_image()


def test_get_logger_is_namespaced():
    assert utils.get_logger("session").name == "creative_lab.session"
