"""Request handling services."""

from .alexa_handler import end_session, get_skill_handler, handle_alexa_request, set_skill_handler

__all__ = [
    "handle_alexa_request",
    "set_skill_handler",
    "get_skill_handler",
    "end_session",
]
