"""JSON encode/decode of Alexa envelopes."""

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import DecodeError
from .models.request import AlexaRequest
from .models.response import AlexaResponse

logger = logging.getLogger(__name__)

_Model = TypeVar("_Model", bound=BaseModel)


def _decode(model: type[_Model], data: str | bytes | Mapping[str, Any]) -> _Model:
    try:
        if isinstance(data, Mapping):
            return model.model_validate(dict(data))
        return model.model_validate_json(data)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        logger.warning(f"Failed to decode {model.__name__}: {e.error_count()} error(s)")
        raise DecodeError(f"Invalid {model.__name__} envelope", errors=errors) from e


def decode_request(data: str | bytes | Mapping[str, Any]) -> AlexaRequest:
    """
    Decode an inbound request envelope.

    Args:
        data: Raw JSON text/bytes, or an already parsed JSON object

    Returns:
        The decoded, immutable AlexaRequest

    Raises:
        DecodeError: If the payload is not valid JSON or a required field is
            missing or mistyped. No partial request is returned.
    """
    return _decode(AlexaRequest, data)


def decode_response(data: str | bytes | Mapping[str, Any]) -> AlexaResponse:
    """Decode a response envelope, e.g. one captured from a previous turn."""
    return _decode(AlexaResponse, data)


def encode_response(response: AlexaResponse) -> str:
    """Serialize a response envelope to JSON text."""
    return response.to_json()
