"""Chat command handling for the `/afterwork` bot.

Commands are matched by case-sensitive prefix, first match wins:
setchannels, sethours, status, help. Anything else gets the
unknown-command reply.
"""
import logging
import re
from datetime import datetime
from typing import Optional

from afterwork.context import ServiceContext
from afterwork.errors import BadRequest
from afterwork.schemas.incoming import IncomingPayload

logger = logging.getLogger(__name__)

SETCHANNELS = "/afterwork setchannels"
SETHOURS = "/afterwork sethours"
STATUS = "/afterwork status"
HELP = "/afterwork help"

HOURS_PATTERN = re.compile(r"/afterwork sethours\s+(\d{1,2}:\d{2})\s*-\s*(\d{1,2}:\d{2})")

HELP_TEXT = (
    "AfterWork Buddy commands:\n"
    "`/afterwork setchannels general, random`: channels to mute during work hours\n"
    "`/afterwork sethours 09:00-17:00`: your work hours (Mon–Fri)\n"
    "`/afterwork status`: show your current settings\n"
    "`/afterwork help`: show this message"
)


def parse_channels(text: str) -> list[str]:
    """Split the command remainder on commas, trimming and dropping empty names."""
    remainder = text.replace(SETCHANNELS, "", 1).strip()
    return [c.strip() for c in remainder.split(",") if c.strip()]


def parse_hours(text: str) -> Optional[tuple[str, str]]:
    match = HOURS_PATTERN.search(text)
    if not match:
        return None
    return match.group(1), match.group(2)


def _set_channels(ctx: ServiceContext, user_id: str, text: str) -> str:
    channels = parse_channels(text)
    if not channels:
        return "❌ Please provide channel names"
    ctx.store.merge(user_id, channels=channels)
    logger.info("User %s saved %d channels", user_id, len(channels))
    return "✅ Channels saved: " + ", ".join(channels)


def _set_hours(ctx: ServiceContext, user_id: str, text: str) -> str:
    hours = parse_hours(text)
    if hours is None:
        return "❌ Invalid format. Use `/afterwork sethours 09:00-17:00`"
    work_start, work_end = hours
    ctx.store.merge(user_id, work_start=work_start, work_end=work_end)
    logger.info("User %s saved work hours %s-%s", user_id, work_start, work_end)
    return f"✅ Work hours saved: {work_start} - {work_end}"


def _status(ctx: ServiceContext, user_id: str) -> str:
    record = ctx.store.get(user_id)
    channels = (record.channels if record else None) or []
    work_start = (record.work_start if record else None) or "Not set"
    work_end = (record.work_end if record else None) or "Not set"
    current_status = (record.current_status if record else None) or "N/A"
    return (
        f"Channels: {', '.join(channels)}\n"
        f"Work Hours: {work_start} - {work_end}\n"
        f"Current Status: {current_status}"
    )


def ensure_user(ctx: ServiceContext, user_id: str, name: Optional[str], now: datetime) -> bool:
    """Create the identity fields on first contact. Returns True when created."""
    if ctx.store.get(user_id) is not None:
        return False
    ctx.store.merge(user_id, name=name, created_at=now, notifications=True)
    logger.info("Registered new user %s (%s)", user_id, name)
    return True


def handle_command(
    ctx: ServiceContext,
    payload: IncomingPayload,
    now: Optional[datetime] = None,
) -> str:
    """Dispatch one inbound chat message and return the reply text.

    Raises BadRequest before touching storage when the sender id or the
    message text is missing.
    """
    user_id = payload.sender.id if payload.sender else None
    if user_id is not None:
        user_id = str(user_id)
    name = payload.sender.name if payload.sender else None
    text = payload.message.text if payload.message else None
    if not user_id or text is None:
        raise BadRequest("User ID not found")
    text = text.strip()

    ensure_user(ctx, user_id, name, now or ctx.now())

    if text.startswith(SETCHANNELS):
        return _set_channels(ctx, user_id, text)
    if text.startswith(SETHOURS):
        return _set_hours(ctx, user_id, text)
    if text.startswith(STATUS):
        return _status(ctx, user_id)
    if text.startswith(HELP):
        return HELP_TEXT
    return "❌ Unknown command. Type `/afterwork help` for commands."
