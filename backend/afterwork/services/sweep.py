"""Per-user channel processing and the scheduled sweep over every user."""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from afterwork.context import ServiceContext
from afterwork.errors import AfterWorkError, NotFound
from afterwork.services.policy import Decision, evaluate_record, format_status_message

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    processed: int
    status: str
    channels: list[str]
    should_mute: bool


@dataclass
class SweepSummary:
    processed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    completed_at: Optional[datetime] = None


def process_user_channels(
    ctx: ServiceContext,
    user_id: str,
    now: Optional[datetime] = None,
) -> Optional[ProcessResult]:
    """Evaluate one user, persist the new status and notify them.

    Returns None when the record lacks channels or work hours; in that case
    nothing is written and nothing is sent. Raises NotFound for unknown
    users and StoreError when persistence fails.
    """
    now = now or ctx.now()
    record = ctx.store.get(user_id)
    if record is None:
        raise NotFound(user_id)

    evaluation = evaluate_record(record, now)
    if evaluation.decision == Decision.skip:
        logger.debug("Nothing to do for user %s", user_id)
        return None

    ctx.store.merge(user_id, last_processed=now, current_status=evaluation.status)

    channels = list(record.channels)
    ctx.notifier.send(user_id, format_status_message(evaluation, channels))

    return ProcessResult(
        processed=len(channels),
        status=evaluation.status,
        channels=channels,
        should_mute=evaluation.should_mute,
    )


def scheduled_channel_check(ctx: ServiceContext) -> SweepSummary:
    """Run ``process_user_channels`` for every known user, one at a time.

    A failing user is logged and skipped; the rest of the sweep continues.
    """
    summary = SweepSummary()
    try:
        user_ids = ctx.store.list_user_ids()
    except AfterWorkError:
        logger.error("Scheduled check error: could not list users", exc_info=True)
        return summary

    for user_id in user_ids:
        try:
            result = process_user_channels(ctx, user_id)
        except Exception:  # one bad record must not stop the sweep
            logger.error("Failed to process user %s", user_id, exc_info=True)
            summary.failed.append(user_id)
            continue
        if result is None:
            summary.skipped.append(user_id)
        else:
            summary.processed.append(user_id)

    summary.completed_at = ctx.now()
    logger.info(
        "Scheduled check completed at %s: %d processed, %d skipped, %d failed",
        summary.completed_at.isoformat(),
        len(summary.processed),
        len(summary.skipped),
        len(summary.failed),
    )
    return summary
