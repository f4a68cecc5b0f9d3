"""Shared fixtures."""

from collections.abc import Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from alexa_envelope.main import app
from alexa_envelope.services.alexa_handler import get_skill_handler, set_skill_handler


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture(autouse=True)
def restore_skill_handler() -> Iterator[None]:
    handler = get_skill_handler()
    yield
    set_skill_handler(handler)


@pytest.fixture
def request_payload() -> dict[str, Any]:
    """An IntentRequest for a custom intent, as sent by an Echo Show."""
    return {
        "version": "1.0",
        "session": {
            "new": True,
            "sessionId": "amzn1.echo-api.session.abc123",
            "application": {"applicationId": "amzn1.ask.skill.myappid"},
            "user": {"userId": "amzn1.ask.account.theuserid"},
        },
        "context": {
            "System": {
                "application": {"applicationId": "amzn1.ask.skill.myappid"},
                "user": {"userId": "amzn1.ask.account.theuserid"},
                "device": {
                    "deviceId": "amzn1.ask.device.superfakedevice",
                    "supportedInterfaces": {},
                },
                "apiEndpoint": "https://api.amazonalexa.com",
                "apiAccessToken": "53kr14t.k3y.d4t4-otherstuff",
            },
            "Viewport": {
                "experiences": [
                    {
                        "arcMinuteWidth": 246,
                        "arcMinuteHeight": 144,
                        "canRotate": False,
                        "canResize": False,
                    }
                ],
                "shape": "RECTANGLE",
                "pixelWidth": 1024,
                "pixelHeight": 600,
                "dpi": 160,
                "currentPixelWidth": 1024,
                "currentPixelHeight": 600,
                "touch": ["SINGLE"],
            },
        },
        "request": {
            "type": "IntentRequest",
            "requestId": "amzn1.echo-api.request.b8b49fde-4370-423f-bbb0-dc7305b788a0",
            "timestamp": "2018-12-03T00:33:58Z",
            "locale": "en-US",
            "intent": {"name": "hello", "confirmationStatus": "NONE"},
        },
    }
