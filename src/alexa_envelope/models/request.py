"""Alexa Skill request envelope models."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    StrictBool,
    StrictStr,
    WrapSerializer,
)

from .intent import IntentType, classify_intent
from .locale import Locale, classify_locale
from .wire import UInt64

_Value = TypeVar("_Value")


def _serialize_mapping(value: Mapping[str, Any], handler: SerializerFunctionWrapHandler) -> Any:
    return handler(dict(value))


# Read-only view over a decoded JSON object.
FrozenMap = Annotated[
    Mapping[str, _Value],
    AfterValidator(MappingProxyType),
    WrapSerializer(_serialize_mapping),
]


class _RequestModel(BaseModel):
    """
    Base for decoded request values.

    Only wire names are accepted, values are frozen once decoded, and wire
    fields without a counterpart here are dropped.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")


class Application(_RequestModel):
    """Skill the request is addressed to."""

    application_id: StrictStr = Field(alias="applicationId")


class User(_RequestModel):
    """Alexa account that made the request."""

    user_id: StrictStr = Field(alias="userId")
    access_token: StrictStr | None = Field(None, alias="accessToken")


class Session(_RequestModel):
    """Session information for session-based interactions."""

    new: StrictBool
    session_id: StrictStr = Field(alias="sessionId")
    attributes: FrozenMap[StrictStr] | None = None
    application: Application
    user: User


class Device(_RequestModel):
    device_id: StrictStr = Field(alias="deviceId")


class System(_RequestModel):
    """Device and API information shared by every request."""

    api_access_token: StrictStr = Field(alias="apiAccessToken")
    device: Device | None = None
    application: Application | None = None


class AudioPlayer(_RequestModel):
    """Current audio player state on the device."""

    token: StrictStr
    offset_in_milliseconds: UInt64 = Field(alias="offsetInMilliseconds")
    player_activity: StrictStr = Field(alias="playerActivity")


class Context(_RequestModel):
    system: System = Field(alias="System")
    audio_player: AudioPlayer | None = Field(None, alias="AudioPlayer")


class ResolutionStatus(_RequestModel):
    code: StrictStr


class ResolutionValue(_RequestModel):
    name: StrictStr
    id: StrictStr


class ResolutionsPerAuthority(_RequestModel):
    """Entity resolution results from one authority, in match order."""

    authority: StrictStr
    status: ResolutionStatus
    values: tuple[ResolutionValue, ...]


class Resolutions(_RequestModel):
    resolutions_per_authority: tuple[ResolutionsPerAuthority, ...] = Field(
        alias="resolutionsPerAuthority"
    )


class Slot(_RequestModel):
    """Named parameter captured within an intent."""

    name: StrictStr
    value: StrictStr
    confirmation_status: StrictStr = Field(alias="confirmationStatus")
    resolutions: Resolutions | None = None


class Intent(_RequestModel):
    """Intent with its slots."""

    name: StrictStr
    confirmation_status: StrictStr = Field(alias="confirmationStatus")
    slots: FrozenMap[Slot] | None = None


class RequestBody(_RequestModel):
    """The ``request`` object of the envelope."""

    type: StrictStr
    request_id: StrictStr = Field(alias="requestId")
    timestamp: StrictStr
    locale: StrictStr
    intent: Intent | None = None
    reason: StrictStr | None = None
    dialog_state: StrictStr | None = Field(None, alias="dialogState")


class AlexaRequest(_RequestModel):
    """Full Alexa request envelope."""

    version: StrictStr
    session: Session | None = None
    body: RequestBody = Field(alias="request")
    context: Context

    @property
    def request_type(self) -> str:
        return self.body.type

    @property
    def request_id(self) -> str:
        return self.body.request_id

    @property
    def locale(self) -> Locale:
        """Classified locale of the request."""
        return classify_locale(self.body.locale)

    @property
    def intent_type(self) -> IntentType:
        """Classified intent: a built-in, a custom intent, or None."""
        return classify_intent(self)

    @property
    def application_id(self) -> str | None:
        """Application id from the session, falling back to the device context."""
        if self.session is not None:
            return self.session.application.application_id
        if self.context.system.application is not None:
            return self.context.system.application.application_id
        return None

    @property
    def session_attributes(self) -> dict[str, str]:
        """Attributes round-tripped from the previous turn (empty if none)."""
        if self.session is None or self.session.attributes is None:
            return {}
        return dict(self.session.attributes)

    def slot_value(self, name: str) -> str | None:
        """Return the value of a slot on the intent, or None if it is not present."""
        intent = self.body.intent
        if intent is None or not intent.slots or name not in intent.slots:
            return None
        return intent.slots[name].value
