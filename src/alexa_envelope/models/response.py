"""Alexa Skill response envelope models and builder."""

from enum import Enum
from typing import Annotated, Any

from pydantic import Field, field_validator, model_validator

from .directives import Directive, parse_directive
from .wire import OmitIfEmpty, WireModel

PROTOCOL_VERSION = "1.0"


class SpeechType(str, Enum):
    PLAIN_TEXT = "PlainText"
    SSML = "SSML"


class PlayBehavior(str, Enum):
    """How speech interacts with audio already queued on the device."""

    ENQUEUE = "ENQUEUE"
    REPLACE_ALL = "REPLACE_ALL"
    REPLACE_ENQUEUED = "REPLACE_ENQUEUED"


class CardType(str, Enum):
    """Card types for the Alexa app."""

    SIMPLE = "Simple"
    STANDARD = "Standard"
    LINK_ACCOUNT = "LinkAccount"
    ASK_FOR_PERMISSION = "AskForPermissonConsent"  # sic, wire value


class OutputSpeech(WireModel):
    """
    Alexa speech output.

    Build with ``plain`` or ``from_ssml`` so that the payload always matches
    the declared type.
    """

    speech_type: SpeechType = Field(alias="type")
    text: str | None = None
    ssml: str | None = None
    play_behavior: PlayBehavior | None = Field(None, alias="playBehavior")

    @model_validator(mode="after")
    def _payload_matches_type(self) -> "OutputSpeech":
        if self.speech_type is SpeechType.PLAIN_TEXT:
            if self.text is None or self.ssml is not None:
                raise ValueError("PlainText speech requires text and no ssml")
        elif self.ssml is None or self.text is not None:
            raise ValueError("SSML speech requires ssml and no text")
        return self

    @classmethod
    def plain(cls, text: str) -> "OutputSpeech":
        return cls(speech_type=SpeechType.PLAIN_TEXT, text=text)

    @classmethod
    def from_ssml(cls, ssml: str) -> "OutputSpeech":
        """Speech from SSML markup, e.g. ``<speak>Hello</speak>``."""
        return cls(speech_type=SpeechType.SSML, ssml=ssml)

    def with_play_behavior(self, behavior: PlayBehavior) -> "OutputSpeech":
        self.play_behavior = behavior
        return self


class Image(WireModel):
    """Images shown on a Standard card."""

    small_image_url: str | None = Field(None, alias="smallImageUrl")
    large_image_url: str | None = Field(None, alias="largeImageUrl")

    def with_small_image_url(self, url: str) -> "Image":
        self.small_image_url = url
        return self

    def with_large_image_url(self, url: str) -> "Image":
        self.large_image_url = url
        return self


class Card(WireModel):
    """Alexa card for visual display."""

    card_type: CardType = Field(alias="type")
    title: str | None = None
    content: str | None = None
    text: str | None = None
    image: Image | None = None
    permissions: list[str] | None = None

    @classmethod
    def simple(cls, title: str, content: str) -> "Card":
        return cls(card_type=CardType.SIMPLE, title=title, content=content)

    @classmethod
    def standard(cls, title: str, text: str, image: Image) -> "Card":
        return cls(card_type=CardType.STANDARD, title=title, text=text, image=image)

    @classmethod
    def link_account(cls) -> "Card":
        """Card prompting the user to link their account in the Alexa app."""
        return cls(card_type=CardType.LINK_ACCOUNT)

    @classmethod
    def ask_for_permission(cls, permissions: list[str]) -> "Card":
        """
        Card asking the user to grant permissions.

        Args:
            permissions: Permission scopes, e.g. ``read::alexa:device:all:address``
        """
        return cls(card_type=CardType.ASK_FOR_PERMISSION, permissions=list(permissions))


class Reprompt(WireModel):
    output_speech: OutputSpeech = Field(alias="outputSpeech")


class ResponseBody(WireModel):
    """Alexa response body."""

    output_speech: OutputSpeech | None = Field(None, alias="outputSpeech")
    card: Card | None = None
    reprompt: Reprompt | None = None
    should_end_session: bool | None = Field(None, alias="shouldEndSession")
    directives: Annotated[list[Directive], OmitIfEmpty()] = Field(default_factory=list)

    @field_validator("directives", mode="before")
    @classmethod
    def _dispatch_directives(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [parse_directive(item) for item in value]


class AlexaResponse(WireModel):
    """
    Full Alexa response envelope.

    Methods mutate the envelope in place and return it, so responses can be
    built by chaining:

        AlexaResponse.new(False).with_speech(OutputSpeech.plain("Hi")).set_attribute("turn", "1")
    """

    version: str = PROTOCOL_VERSION
    session_attributes: Annotated[dict[str, str] | None, OmitIfEmpty()] = Field(
        None, alias="sessionAttributes"
    )
    body: ResponseBody = Field(default_factory=ResponseBody, alias="response")

    @classmethod
    def new(cls, should_end_session: bool | None = None) -> "AlexaResponse":
        """Response with only the required elements."""
        return cls(body=ResponseBody(should_end_session=should_end_session))

    @classmethod
    def simple(cls, title: str, text: str) -> "AlexaResponse":
        """Plain speech plus a Simple card with the same text, ending the session."""
        return cls.new(True).with_card(Card.simple(title, text)).with_speech(OutputSpeech.plain(text))

    @classmethod
    def end(cls) -> "AlexaResponse":
        return cls.new(True)

    def with_speech(self, speech: OutputSpeech) -> "AlexaResponse":
        self.body.output_speech = speech
        return self

    def with_card(self, card: Card) -> "AlexaResponse":
        self.body.card = card
        return self

    def with_reprompt(self, speech: OutputSpeech) -> "AlexaResponse":
        self.body.reprompt = Reprompt(output_speech=speech)
        return self

    def set_attribute(self, key: str, value: str) -> "AlexaResponse":
        """Store a session attribute, readable on the next request of the session."""
        if self.session_attributes is None:
            self.session_attributes = {}
        self.session_attributes[key] = value
        return self

    def add_directive(self, directive: Directive) -> "AlexaResponse":
        """Append a directive; devices run directives in the order added."""
        self.body.directives.append(directive)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Wire form of the envelope, with absent fields omitted."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
