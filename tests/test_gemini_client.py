"""GeminiClient: configuration, schema-constrained decoding and chat replay."""

import json

import pytest

from gemini_studio.clients.gemini import GeminiClient
from gemini_studio.errors import (
    ConfigurationError,
    EmptyResponseError,
    GenerationError,
    ResponseValidationError,
)
from gemini_studio.models import BannerSpec, ChatTurn, MediaPayload, PlantDiagnosis, Role

from .conftest import BANNER_REPLY, DIAGNOSIS_REPLY, FakeGenaiClient


def test_missing_key_fails_before_sdk_client(fake_models, no_credentials):
    with pytest.raises(ConfigurationError):
        GeminiClient.from_env("gemini-test")
    assert FakeGenaiClient.instances == []
    assert fake_models.calls == []


def test_api_key_fallback_variable(fake_models, monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY")
    monkeypatch.setenv("API_KEY", "fallback-key")
    client = GeminiClient.from_env("gemini-test")
    assert FakeGenaiClient.instances[-1].api_key == "fallback-key"
    assert client.model == "gemini-test"


def test_generate_structured_returns_typed_result(fake_models, banner_json):
    fake_models.replies.append(banner_json)
    client = GeminiClient("key", "gemini-test")

    spec = client.generate_structured("prompt", BannerSpec, thinking_budget=128)

    assert isinstance(spec, BannerSpec)
    assert spec.visual_direction.color_palette == BANNER_REPLY["visualDirection"]["colorPalette"]
    call = fake_models.calls[0]
    assert call["model"] == "gemini-test"
    assert call["config"].response_mime_type == "application/json"
    assert call["config"].thinking_config.thinking_budget == 128


def test_generate_structured_passes_system_instruction_and_temperature(fake_models, diagnosis_json):
    fake_models.replies.append(diagnosis_json)
    client = GeminiClient("key", "gemini-test")

    client.generate_structured("prompt", PlantDiagnosis, system_instruction="be careful", temperature=0.4)

    config = fake_models.calls[0]["config"]
    assert config.system_instruction == "be careful"
    assert config.temperature == 0.4


@pytest.mark.parametrize(
    "reply",
    [
        "Sure! Here is your banner: headline...",
        '{"headline": "Only a headline"}',
        "{not json",
    ],
)
def test_malformed_reply_fails(fake_models, reply):
    fake_models.replies.append(reply)
    client = GeminiClient("key", "gemini-test")

    with pytest.raises(ResponseValidationError) as exc_info:
        client.generate_structured("prompt", BannerSpec)
    assert exc_info.value.raw_output == reply


def test_enum_outside_declared_set_fails_whole_result(fake_models):
    data = dict(DIAGNOSIS_REPLY, severity="catastrophic")
    fake_models.replies.append(json.dumps(data))
    client = GeminiClient("key", "gemini-test")

    with pytest.raises(ResponseValidationError):
        client.generate_structured("prompt", PlantDiagnosis)


def test_blank_required_string_fails(fake_models):
    data = dict(BANNER_REPLY, headline="  ")
    fake_models.replies.append(json.dumps(data))
    client = GeminiClient("key", "gemini-test")

    with pytest.raises(ResponseValidationError):
        client.generate_structured("prompt", BannerSpec)


def test_empty_reply_is_failure(fake_models):
    fake_models.replies.append(None)
    client = GeminiClient("key", "gemini-test")

    with pytest.raises(EmptyResponseError):
        client.generate_structured("prompt", BannerSpec)


def test_transport_error_is_wrapped_without_retry(fake_models):
    fake_models.replies.extend([RuntimeError("503 UNAVAILABLE"), "unused"])
    client = GeminiClient("key", "gemini-test")

    with pytest.raises(GenerationError, match="503"):
        client.generate_text("prompt")
    assert len(fake_models.calls) == 1


def test_chat_replays_history_then_new_message(fake_models):
    fake_models.replies.append("Try a bolder CTA.")
    client = GeminiClient("key", "gemini-test")
    history = [ChatTurn(Role.USER, "hi"), ChatTurn(Role.MODEL, "hello")]

    reply = client.chat(history, "ideas?", system_instruction="persona")

    assert reply == "Try a bolder CTA."
    contents = fake_models.calls[0]["contents"]
    assert [c.role for c in contents] == ["user", "model", "user"]
    assert [c.parts[0].text for c in contents] == ["hi", "hello", "ideas?"]
    assert fake_models.calls[0]["config"].system_instruction == "persona"


def test_image_part_decodes_base64():
    part = GeminiClient.image_part(MediaPayload(data="aGVsbG8=", mime_type="image/png"))
    assert part.inline_data.data == b"hello"
    assert part.inline_data.mime_type == "image/png"
