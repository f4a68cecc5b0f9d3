"""Pydantic models for the Alexa request/response envelopes."""

from .directives import (
    Directive,
    HTMLStartConfiguration,
    HTMLStartDirective,
    HTMLStartRequest,
    HTMLStartTransformer,
    TransformerType,
)
from .intent import BuiltinIntent, CustomIntent, IntentType, classify_intent, classify_intent_name
from .locale import Locale, classify_locale, is_english
from .request import (
    AlexaRequest,
    Application,
    AudioPlayer,
    Context,
    Device,
    Intent,
    RequestBody,
    Resolutions,
    ResolutionsPerAuthority,
    Session,
    Slot,
    System,
    User,
)
from .response import (
    AlexaResponse,
    Card,
    CardType,
    Image,
    OutputSpeech,
    PlayBehavior,
    Reprompt,
    ResponseBody,
    SpeechType,
)

__all__ = [
    "AlexaRequest",
    "Application",
    "AudioPlayer",
    "Context",
    "Device",
    "Intent",
    "RequestBody",
    "Resolutions",
    "ResolutionsPerAuthority",
    "Session",
    "Slot",
    "System",
    "User",
    "Locale",
    "classify_locale",
    "is_english",
    "BuiltinIntent",
    "CustomIntent",
    "IntentType",
    "classify_intent",
    "classify_intent_name",
    "AlexaResponse",
    "ResponseBody",
    "OutputSpeech",
    "SpeechType",
    "PlayBehavior",
    "Card",
    "CardType",
    "Image",
    "Reprompt",
    "Directive",
    "HTMLStartDirective",
    "HTMLStartRequest",
    "HTMLStartConfiguration",
    "HTMLStartTransformer",
    "TransformerType",
]
