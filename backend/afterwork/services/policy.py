"""Mute/unmute policy: decides what a user should do with their channels right now.

The work window is checked with same-day lexical "HH:MM" comparison, so a
window such as 22:00-02:00 never matches. An override only applies while
``now < override_until``; expired overrides are ignored, not cleared.
"""
import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Sequence

WORK_STATUS = "Work Time (Please mute channels)"
RELAX_STATUS = "Relax Time (Please unmute channels)"


class Decision(str, enum.Enum):
    mute = "mute"
    unmute = "unmute"
    skip = "skip"


@dataclass(frozen=True)
class Evaluation:
    decision: Decision
    status: Optional[str] = None

    @property
    def should_mute(self) -> bool:
        return self.decision == Decision.mute


def _as_aware(value: datetime) -> datetime:
    """Treat naive timestamps (as read back from SQLite) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_work_time(work_start: str, work_end: str, now: datetime) -> bool:
    """Monday–Friday and ``work_start <= HH:MM < work_end``."""
    if now.weekday() >= 5:
        return False
    current_time = now.strftime("%H:%M")
    return work_start <= current_time < work_end


def override_active(
    manual_override: Optional[bool],
    override_until: Optional[datetime],
    now: datetime,
) -> bool:
    if manual_override is None or override_until is None:
        return False
    return _as_aware(now) < _as_aware(override_until)


def evaluate(
    channels: Optional[Sequence[str]],
    work_start: Optional[str],
    work_end: Optional[str],
    manual_override: Optional[bool],
    override_until: Optional[datetime],
    now: datetime,
) -> Evaluation:
    """Resolve the user's current decision from their preferences."""
    if not channels or not work_start or not work_end:
        return Evaluation(Decision.skip)

    should_mute = is_work_time(work_start, work_end, now)
    if override_active(manual_override, override_until, now):
        should_mute = manual_override is True

    if should_mute:
        return Evaluation(Decision.mute, WORK_STATUS)
    return Evaluation(Decision.unmute, RELAX_STATUS)


def evaluate_record(record, now: datetime) -> Evaluation:
    """Convenience wrapper taking a UserRecord-like object."""
    return evaluate(
        record.channels,
        record.work_start,
        record.work_end,
        record.manual_override,
        record.override_until,
        now,
    )


def format_status_message(evaluation: Evaluation, channels: Sequence[str]) -> str:
    """Render the notification pushed to the user after an evaluation."""
    return (
        f"🕒 Status Update: {evaluation.status}\n"
        f"Please manually {evaluation.decision.value} these channels: {', '.join(channels)}"
    )
