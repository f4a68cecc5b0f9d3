"""Error types raised by the envelope codec and webhook."""

from typing import Any


class AlexaEnvelopeError(Exception):
    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.code = code
        self.details = details


class DecodeError(AlexaEnvelopeError):
    """Inbound payload is not well-formed JSON or violates the envelope schema."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__("decode_error", message, {"errors": errors or []})

    @property
    def errors(self) -> list[dict[str, Any]]:
        return self.details["errors"] if self.details else []


class ApplicationMismatchError(AlexaEnvelopeError):
    def __init__(self, message: str, application_id: str | None = None):
        super().__init__("application_mismatch", message, {"application_id": application_id})
