"""Intent classification for inbound requests."""

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from .request import AlexaRequest


class BuiltinIntent(str, Enum):
    """Amazon built-in intents, keyed by their wire name."""

    HELP = "AMAZON.HelpIntent"
    CANCEL = "AMAZON.CancelIntent"
    FALLBACK = "AMAZON.FallbackIntent"
    LOOP_OFF = "AMAZON.LoopOffIntent"
    LOOP_ON = "AMAZON.LoopOnIntent"
    NEXT = "AMAZON.NextIntent"
    NO = "AMAZON.NoIntent"
    PAUSE = "AMAZON.PauseIntent"
    PREVIOUS = "AMAZON.PreviousIntent"
    REPEAT = "AMAZON.RepeatIntent"
    RESUME = "AMAZON.ResumeIntent"
    SELECT = "AMAZON.SelectIntent"
    SHUFFLE_ON = "AMAZON.ShuffleOnIntent"
    SHUFFLE_OFF = "AMAZON.ShuffleOffIntent"
    START_OVER = "AMAZON.StartOverIntent"
    STOP = "AMAZON.StopIntent"
    YES = "AMAZON.YesIntent"


class CustomIntent(BaseModel):
    """An intent defined by the skill's own interaction model."""

    model_config = ConfigDict(frozen=True)

    name: str


IntentType = BuiltinIntent | CustomIntent | None

_BUILTIN_NAMES: dict[str, BuiltinIntent] = {intent.value: intent for intent in BuiltinIntent}


def classify_intent_name(name: str | None) -> IntentType:
    """
    Classify a raw intent name.

    Matching is exact: a name that differs from a built-in only by case or
    surrounding whitespace is a CustomIntent carrying the raw name.
    """
    if name is None:
        return None
    return _BUILTIN_NAMES.get(name) or CustomIntent(name=name)


def classify_intent(request: "AlexaRequest") -> IntentType:
    """Classify the intent carried by a decoded request, None if it has none."""
    intent = request.body.intent
    return classify_intent_name(intent.name if intent else None)
