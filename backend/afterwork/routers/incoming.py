"""Chat webhook: receives `/afterwork` commands from the bot platform."""
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from afterwork.context import ServiceContext, get_context
from afterwork.errors import BadRequest
from afterwork.schemas.incoming import IncomingPayload, Reply
from afterwork.services.commands import handle_command

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/incoming", response_model=Reply)
def incoming(body: Any = Body(None), ctx: ServiceContext = Depends(get_context)):
    """Handle one chat message and reply with text.

    The body is validated here rather than by FastAPI so that a missing or
    malformed payload gets the same 400 reply as a missing sender id.
    """
    try:
        payload = IncomingPayload.model_validate(body if body is not None else {})
        reply = handle_command(ctx, payload)
    except (ValidationError, BadRequest):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"text": "❌ User ID not found"})
    except Exception:
        logger.error("Error processing webhook", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"text": "❌ Something went wrong."},
        )
    return Reply(text=reply)
