"""Alexa Skill request handling."""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from ..codec import decode_request
from ..config import settings
from ..errors import ApplicationMismatchError
from ..models.request import AlexaRequest
from ..models.response import AlexaResponse

logger = logging.getLogger(__name__)

SkillHandler = Callable[[AlexaRequest], AlexaResponse]


def end_session(request: AlexaRequest) -> AlexaResponse:
    """Default skill handler: close the session without speaking."""
    return AlexaResponse.end()


_skill_handler: SkillHandler = end_session


def set_skill_handler(handler: SkillHandler) -> None:
    """Register the skill logic that turns a decoded request into a response."""
    global _skill_handler
    _skill_handler = handler


def get_skill_handler() -> SkillHandler:
    return _skill_handler


def _verify_application(request: AlexaRequest) -> None:
    if not settings.skill_id:
        return
    if request.application_id != settings.skill_id:
        logger.warning(f"Rejected request for application {request.application_id}")
        raise ApplicationMismatchError(
            "Request is not addressed to this skill",
            application_id=request.application_id,
        )


async def handle_alexa_request(payload: str | bytes | Mapping[str, Any]) -> dict[str, Any]:
    """
    Decode an Alexa request, run the skill handler and encode its response.

    Args:
        payload: Full Alexa request envelope, raw or as parsed JSON

    Returns:
        Alexa response envelope in wire form

    Raises:
        DecodeError: If the envelope does not match the request schema
        ApplicationMismatchError: If ``skill_id`` is configured and differs
            from the request's application id
    """
    request = decode_request(payload)

    logger.info(f"Alexa request type: {request.request_type} ({request.request_id})")
    if request.body.intent is not None:
        logger.info(f"Alexa intent: {request.body.intent.name}")

    _verify_application(request)

    response = _skill_handler(request)
    return response.to_dict()
