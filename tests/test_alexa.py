"""Tests for Alexa webhook endpoint."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from alexa_envelope.config import settings
from alexa_envelope.models.intent import CustomIntent
from alexa_envelope.models.request import AlexaRequest
from alexa_envelope.models.response import AlexaResponse, OutputSpeech
from alexa_envelope.services.alexa_handler import set_skill_handler


def test_default_handler_ends_session(client: TestClient, request_payload: dict[str, Any]) -> None:
    """Test that without a skill handler the session is closed silently."""
    response = client.post("/alexa", json=request_payload)

    assert response.status_code == 200
    assert response.json() == {"version": "1.0", "response": {"shouldEndSession": True}}


def test_skill_handler_receives_decoded_request(
    client: TestClient, request_payload: dict[str, Any]
) -> None:
    """Test that the registered handler gets a typed request and its response is encoded."""
    seen: list[AlexaRequest] = []

    def greet(request: AlexaRequest) -> AlexaResponse:
        seen.append(request)
        return (
            AlexaResponse.new(False)
            .with_speech(OutputSpeech.plain("Hello there"))
            .with_reprompt(OutputSpeech.plain("Say hello again"))
            .set_attribute("greeted", "yes")
        )

    set_skill_handler(greet)
    response = client.post("/alexa", json=request_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["sessionAttributes"] == {"greeted": "yes"}
    assert data["response"]["outputSpeech"] == {"type": "PlainText", "text": "Hello there"}
    assert data["response"]["shouldEndSession"] is False
    assert "card" not in data["response"]
    assert "directives" not in data["response"]
    assert seen[0].intent_type == CustomIntent(name="hello")


def test_missing_field_returns_400(client: TestClient, request_payload: dict[str, Any]) -> None:
    """Test that an envelope missing a required field is rejected."""
    del request_payload["request"]["requestId"]

    response = client.post("/alexa", json=request_payload)

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["code"] == "decode_error"
    assert detail["errors"][0]["loc"] == ["request", "requestId"]


def test_malformed_body_returns_400(client: TestClient) -> None:
    """Test that a body that is not JSON is rejected."""
    response = client.post(
        "/alexa",
        content=b"not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400


def test_foreign_application_returns_403(
    client: TestClient, request_payload: dict[str, Any], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that requests for another skill are refused when a skill id is configured."""
    monkeypatch.setattr(settings, "skill_id", "amzn1.ask.skill.someoneelse")

    response = client.post("/alexa", json=request_payload)

    assert response.status_code == 403
    assert response.json()["detail"]["code"] == "application_mismatch"


def test_matching_application_accepted(
    client: TestClient, request_payload: dict[str, Any], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that requests for the configured skill are handled."""
    monkeypatch.setattr(settings, "skill_id", "amzn1.ask.skill.myappid")

    response = client.post("/alexa", json=request_payload)

    assert response.status_code == 200
