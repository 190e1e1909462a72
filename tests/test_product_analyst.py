import json

import pytest

from creative_lab.config import ProductAnalysis
from creative_lab.errors import AnalysisError, ProviderError
from creative_lab.product_analyst import analyze_product_image

from conftest import FakeClient, text_response


def test_analysis_is_parsed_into_product_analysis(png_data_url, png_bytes, mug_payload):
    client = FakeClient(responses=[text_response(json.dumps(mug_payload))])

    analysis = analyze_product_image(png_data_url, client=client)

    assert analysis == ProductAnalysis(
        product_name="Ceramic Mug",
        product_type="Drinkware",
        materials=["stoneware", "glaze"],
        primary_colors=["sage green", "cream"],
        target_audience="Home baristas who love slow mornings",
    )
    call = client.models.calls[0]
    # The data URL prefix is stripped before transmission
    assert call["contents"][0].inline_data.data == png_bytes
    assert call["contents"][0].inline_data.mime_type == "image/png"
    assert call["config"].response_mime_type == "application/json"


def test_analysis_round_trips_provider_keys(mug_payload):
    assert ProductAnalysis.from_dict(mug_payload).to_dict() == mug_payload


def test_missing_field_raises_analysis_error(png_data_url, mug_payload):
    del mug_payload["productName"]
    client = FakeClient(responses=[text_response(json.dumps(mug_payload))])
    with pytest.raises(AnalysisError, match="productName"):
        analyze_product_image(png_data_url, client=client)


def test_non_object_response_raises_analysis_error(png_data_url):
    client = FakeClient(responses=[text_response("[]")])
    with pytest.raises(AnalysisError):
        analyze_product_image(png_data_url, client=client)


def test_provider_failure_is_wrapped(png_data_url):
    client = FakeClient(error=RuntimeError("503 UNAVAILABLE"))
    with pytest.raises(ProviderError, match="503 UNAVAILABLE"):
        analyze_product_image(png_data_url, client=client)
