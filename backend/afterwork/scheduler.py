"""Sweep triggers: APScheduler jobs that run the scheduled channel check."""
import logging

from apscheduler.executors.pool import ThreadPoolExecutor
from apscheduler.schedulers.background import BackgroundScheduler

from afterwork.context import ServiceContext
from afterwork.services.sweep import scheduled_channel_check

logger = logging.getLogger(__name__)

INTERVAL_JOB_ID = "sweep-interval"
BOUNDARY_JOB_ID = "sweep-boundary"


def build_scheduler(ctx: ServiceContext) -> BackgroundScheduler:
    """Create (but do not start) the scheduler with both sweep jobs.

    The two jobs are independent; when they fire together the single
    worker runs the sweep twice, back to back. A sweep that waited behind
    another one still runs, however late.
    """
    settings = ctx.settings
    scheduler = BackgroundScheduler(
        executors={"default": ThreadPoolExecutor(max_workers=1)},
        job_defaults={"misfire_grace_time": None, "coalesce": False},
        timezone=settings.tz,
    )
    scheduler.add_job(
        scheduled_channel_check,
        "cron",
        args=[ctx],
        id=INTERVAL_JOB_ID,
        minute=settings.SWEEP_INTERVAL_CRON_MINUTE,
    )
    scheduler.add_job(
        scheduled_channel_check,
        "cron",
        args=[ctx],
        id=BOUNDARY_JOB_ID,
        minute=0,
        hour=settings.SWEEP_BOUNDARY_HOURS,
        day_of_week=settings.SWEEP_BOUNDARY_DAYS,
    )
    return scheduler


def start_scheduler(ctx: ServiceContext):
    """Start the sweep scheduler unless disabled. Returns it, or None."""
    if not ctx.settings.ENABLE_SCHEDULER:
        logger.info("Scheduler disabled via ENABLE_SCHEDULER=false")
        return None
    scheduler = build_scheduler(ctx)
    scheduler.start()
    logger.info("Scheduler started successfully")
    return scheduler


def stop_scheduler(scheduler, reason: str = "shutdown") -> None:
    if scheduler is None or not scheduler.running:
        return
    logger.info("Stopping scheduler (%s)", reason)
    scheduler.shutdown(wait=False)
