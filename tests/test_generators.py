import base64
import json
from types import SimpleNamespace

import pytest

from creative_lab.copywriter import SCRIPT_FALLBACK, ideate_broll, write_viral_script
from creative_lab.errors import NoImageGeneratedError, ProviderError
from creative_lab.lifestyle_image import generate_lifestyle_image
from creative_lab.prompts import build_lifestyle_prompt, build_script_prompt

from conftest import FakeClient, image_response, text_response


# ---------- Lifestyle image ----------

def test_lifestyle_image_returns_png_data_url(png_data_url, mug_analysis):
    client = FakeClient(responses=[image_response(b"rendered-png")])

    result = generate_lifestyle_image(png_data_url, mug_analysis, client=client)

    assert result == "data:image/png;base64," + base64.b64encode(b"rendered-png").decode()
    config = client.models.calls[0]["config"]
    assert config.image_config.aspect_ratio == "1:1"


def test_lifestyle_image_without_image_data_fails(png_data_url, mug_analysis):
    text_only = SimpleNamespace(
        text="I cannot do that",
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=[SimpleNamespace(text="no", inline_data=None)]))],
    )
    client = FakeClient(responses=[text_only])
    with pytest.raises(NoImageGeneratedError, match="No image generated"):
        generate_lifestyle_image(png_data_url, mug_analysis, client=client)


def test_lifestyle_image_without_candidates_fails(png_data_url, mug_analysis):
    client = FakeClient(responses=[text_response(None)])
    with pytest.raises(NoImageGeneratedError):
        generate_lifestyle_image(png_data_url, mug_analysis, client=client)


def test_lifestyle_prompt_mentions_materials_and_colors(mug_analysis):
    prompt = build_lifestyle_prompt(mug_analysis)
    assert "Ceramic Mug (Drinkware)" in prompt
    assert "stoneware, glaze" in prompt
    assert "sage green, cream" in prompt
    assert "NO text, NO logos" in prompt


# ---------- Script ----------

def test_script_returns_model_text(mug_analysis):
    client = FakeClient(responses=[text_response("POV: your coffee finally has a home ☕")])
    assert write_viral_script(mug_analysis, client=client).startswith("POV")


def test_script_falls_back_when_model_returns_no_text(mug_analysis):
    client = FakeClient(responses=[text_response(None)])
    assert write_viral_script(mug_analysis, client=client) == SCRIPT_FALLBACK


def test_script_prompt_uses_quality_materials_when_none_known(mug_analysis):
    from dataclasses import replace

    prompt = build_script_prompt(replace(mug_analysis, materials=[]))
    assert "Mention the quality materials." in prompt
    assert "Mention the stoneware." in build_script_prompt(mug_analysis)


def test_script_provider_error_propagates(mug_analysis):
    client = FakeClient(error=RuntimeError("quota"))
    with pytest.raises(ProviderError):
        write_viral_script(mug_analysis, client=client)


# ---------- B-roll ----------

def test_broll_returns_three_ideas(mug_analysis):
    ideas = ["Macro glaze drip", "Hands wrap the mug", "Steam in golden light", "extra"]
    client = FakeClient(responses=[text_response(json.dumps(ideas))])
    assert ideate_broll(mug_analysis, client=client) == ideas[:3]
    assert client.models.calls[0]["config"].response_mime_type == "application/json"


@pytest.mark.parametrize("raw", ["not json", '{"scene": "x"}', "", None])
def test_malformed_broll_yields_empty_list(mug_analysis, raw):
    client = FakeClient(responses=[text_response(raw)])
    assert ideate_broll(mug_analysis, client=client) == []


def test_broll_drops_non_string_items(mug_analysis):
    client = FakeClient(responses=[text_response(json.dumps(["Macro shot", 3, None, "  "]))])
    assert ideate_broll(mug_analysis, client=client) == ["Macro shot"]
