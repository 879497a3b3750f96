"""Shared fixtures: a fake google-genai client and sample model replies."""

import json
from types import SimpleNamespace

import pytest
from PIL import Image

from gemini_studio.clients import gemini as gemini_module

BANNER_REPLY = {
    "headline": "Grow Faster With Widget",
    "subheadline": "The signup flow SMB owners actually finish",
    "cta": "Start Free Trial",
    "body": "Acme Widget gets your team onboarded in minutes.",
    "visualDirection": {
        "colorPalette": ["#0B3D91", "#FFFFFF", "#FFB400"],
        "layoutDescription": "Logo top-left, headline centered, CTA bottom-right.",
        "imageryDescription": "Friendly shop owner using a tablet.",
        "typography": "Bold geometric sans-serif",
        "backgroundColorHex": "#0B3D91",
        "textColorHex": "#FFFFFF",
    },
    "rationale": "Trust-building palette with a low-friction CTA for busy owners.",
}

DIAGNOSIS_REPLY = {
    "diagnosis": "Fungal Leaf Spot",
    "confidence": 82,
    "safety": {
        "recommendation_level": "informational",
        "safety_text": "Wear gloves. Always read product label and follow safety guidelines.",
        "confidence": 82,
        "evidence": ["Brown lesions with yellow halos", "Spots on lower leaves"],
    },
    "plant_name_identified": "Ficus elastica",
    "causes": ["Overwatering", "Poor air circulation"],
    "severity": "medium",
    "visual_markup": "lower left leaves",
    "evidence": ["Brown lesions with yellow halos"],
    "explanation_simple": "A fungus is eating small spots in the leaves.",
    "recommended_steps": [
        {"step": 1, "action": "Remove affected leaves", "duration": "10 min", "tools": ["pruners"]},
        {"step": 2, "action": "Reduce watering", "duration": "2 weeks", "tools": []},
    ],
    "seven_day_care_plan": {f"day{i}": f"Day {i} care" for i in range(1, 8)},
    "preventive_tips": ["Water at the base"],
    "follow_up_tests": [],
}


class FakeModels:
    """Stands in for genai.Client().models; replays queued replies."""

    def __init__(self):
        self.replies: list = []
        self.calls: list[dict] = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if not self.replies:
            raise AssertionError("Unexpected generate_content call")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return SimpleNamespace(text=reply)


class FakeGenaiClient:
    instances: list["FakeGenaiClient"] = []

    def __init__(self, api_key: str):
        self.api_key = api_key
        self.models = FAKE_MODELS
        FakeGenaiClient.instances.append(self)


FAKE_MODELS = FakeModels()


@pytest.fixture
def fake_models(monkeypatch) -> FakeModels:
    """Patch genai.Client and provide a credential; returns the shared fake models."""
    FAKE_MODELS.replies.clear()
    FAKE_MODELS.calls.clear()
    FakeGenaiClient.instances.clear()
    monkeypatch.setattr(gemini_module.genai, "Client", FakeGenaiClient)
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    return FAKE_MODELS


@pytest.fixture
def no_credentials(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)


@pytest.fixture
def banner_json() -> str:
    return json.dumps(BANNER_REPLY)


@pytest.fixture
def diagnosis_json() -> str:
    return json.dumps(DIAGNOSIS_REPLY)


@pytest.fixture
def png_path(tmp_path):
    path = tmp_path / "leaf.png"
    Image.new("RGB", (640, 480), (40, 160, 60)).save(path, format="PNG")
    return path
