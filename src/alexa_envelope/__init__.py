"""Typed Alexa Skills Kit request/response envelopes."""

from .codec import decode_request, decode_response, encode_response
from .errors import AlexaEnvelopeError, ApplicationMismatchError, DecodeError
from .models import (
    AlexaRequest,
    AlexaResponse,
    BuiltinIntent,
    Card,
    CustomIntent,
    HTMLStartConfiguration,
    HTMLStartDirective,
    HTMLStartRequest,
    HTMLStartTransformer,
    Image,
    Locale,
    OutputSpeech,
    PlayBehavior,
    TransformerType,
    classify_intent,
    classify_locale,
    is_english,
)

__version__ = "0.1.0"

__all__ = [
    "decode_request",
    "decode_response",
    "encode_response",
    "AlexaEnvelopeError",
    "DecodeError",
    "ApplicationMismatchError",
    "AlexaRequest",
    "AlexaResponse",
    "OutputSpeech",
    "PlayBehavior",
    "Card",
    "Image",
    "HTMLStartDirective",
    "HTMLStartRequest",
    "HTMLStartConfiguration",
    "HTMLStartTransformer",
    "TransformerType",
    "Locale",
    "classify_locale",
    "is_english",
    "BuiltinIntent",
    "CustomIntent",
    "classify_intent",
    "__version__",
]
