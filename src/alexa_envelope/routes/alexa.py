"""Alexa Skill webhook endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from ..errors import ApplicationMismatchError, DecodeError
from ..services.alexa_handler import handle_alexa_request

logger = logging.getLogger(__name__)

router = APIRouter(tags=["alexa"])


@router.post("/alexa")
async def alexa_webhook(request: Request) -> dict[str, Any]:
    """
    Handle Alexa Skill requests.

    The body is decoded into a typed request envelope and handed to the
    registered skill handler. Its response is returned in Alexa response
    format.

    Returns 400 if the envelope cannot be decoded and 403 if it is addressed
    to a different skill.
    """
    body = await request.body()

    try:
        return await handle_alexa_request(body)
    except DecodeError as e:
        logger.error(f"Rejected malformed Alexa request: {e}")
        raise HTTPException(status_code=400, detail={"code": e.code, "errors": e.errors})
    except ApplicationMismatchError as e:
        raise HTTPException(status_code=403, detail={"code": e.code, "message": str(e)})
