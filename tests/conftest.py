"""
Shared fakes for the google-genai client surface used by creative_lab.
"""

import base64
import io
from types import SimpleNamespace

import pytest
from PIL import Image


class FakeModels:
    def __init__(self, responses=None, operation=None, error=None):
        self.responses = list(responses or [])
        self.operation = operation
        self.error = error
        self.calls = []
        self.video_calls = []

    def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error:
            raise self.error
        return self.responses.pop(0)

    def generate_videos(self, model, prompt, image=None, config=None):
        self.video_calls.append({"model": model, "prompt": prompt, "image": image, "config": config})
        if self.error:
            raise self.error
        return self.operation


class FakeOperations:
    def __init__(self, operations=None):
        self.operations = list(operations or [])
        self.calls = 0

    def get(self, operation):
        self.calls += 1
        return self.operations.pop(0)


class FakeClient:
    def __init__(self, responses=None, operation=None, operations=None, error=None):
        self.models = FakeModels(responses, operation, error)
        self.operations = FakeOperations(operations)


def text_response(text):
    return SimpleNamespace(text=text, candidates=[])


def image_response(data):
    part = SimpleNamespace(text=None, inline_data=SimpleNamespace(data=data, mime_type="image/png"))
    return SimpleNamespace(
        text=None,
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))],
    )


def video_operation(done, uri=None):
    if not done:
        return SimpleNamespace(done=False, response=None)
    videos = [SimpleNamespace(video=SimpleNamespace(uri=uri))] if uri else []
    return SimpleNamespace(done=True, response=SimpleNamespace(generated_videos=videos))


@pytest.fixture
def png_bytes():
    buf = io.BytesIO()
    Image.new("RGB", (8, 8), (200, 120, 40)).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def png_data_url(png_bytes):
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")


@pytest.fixture
def mug_payload():
    return {
        "productName": "Ceramic Mug",
        "productType": "Drinkware",
        "materials": ["stoneware", "glaze"],
        "primaryColors": ["sage green", "cream"],
        "targetAudience": "Home baristas who love slow mornings",
    }


@pytest.fixture
def mug_analysis(mug_payload):
    from creative_lab.config import ProductAnalysis

    return ProductAnalysis.from_dict(mug_payload)
