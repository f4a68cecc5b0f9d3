"""Device directives carried in a response."""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import Field

from .wire import OmitIfEmpty, UInt32, WireModel

HTML_START = "Alexa.Presentation.HTML.Start"


class TransformerType(str, Enum):
    """Speech transformers available to an HTML start directive."""

    SSML_TO_SPEECH = "ssmlToSpeech"
    TEXT_TO_SPEECH = "textToSpeech"


class HTMLStartRequest(WireModel):
    """Where the device loads the web application from."""

    uri: str
    method: str = "GET"
    headers: Annotated[dict[str, str], OmitIfEmpty()] = Field(default_factory=dict)


class HTMLStartConfiguration(WireModel):
    timeout_in_seconds: UInt32 | None = Field(None, alias="timeoutInSeconds")


class HTMLStartTransformer(WireModel):
    """Converts a value in ``data`` into speech before handing it to the web app."""

    input_path: str = Field(alias="inputPath")
    output_name: str | None = Field(None, alias="outputName")
    transformer: TransformerType


class HTMLStartDirective(WireModel):
    """Launch a web application on a device with a screen."""

    directive_type: Literal["Alexa.Presentation.HTML.Start"] = Field(HTML_START, alias="type")
    data: Annotated[dict[str, str], OmitIfEmpty()] = Field(default_factory=dict)
    request: HTMLStartRequest
    configuration: HTMLStartConfiguration
    transformers: Annotated[list[HTMLStartTransformer], OmitIfEmpty()] = Field(
        default_factory=list
    )


# Closed set of directive variants, keyed by their wire ``type`` literal.
# A new directive kind is added here alongside its model.
DIRECTIVE_TYPES: dict[str, type[WireModel]] = {
    HTML_START: HTMLStartDirective,
}

Directive = HTMLStartDirective


def parse_directive(payload: Any) -> WireModel:
    """
    Build a directive from its wire form, dispatching on ``type``.

    Raises ValueError for a missing or unrecognized type so that it surfaces as
    a validation error of the enclosing model.
    """
    if isinstance(payload, WireModel):
        return payload
    if not isinstance(payload, dict):
        raise ValueError("directive must be an object")
    directive_type = payload.get("type")
    model = DIRECTIVE_TYPES.get(directive_type) if isinstance(directive_type, str) else None
    if model is None:
        raise ValueError(f"unknown directive type: {directive_type!r}")
    return model.model_validate(payload)
