"""Tests for the sweep triggers."""
from datetime import datetime, timedelta

import pytz
from apscheduler.events import EVENT_JOB_EXECUTED
from apscheduler.executors.base import run_job

from afterwork.scheduler import BOUNDARY_JOB_ID, INTERVAL_JOB_ID, build_scheduler, start_scheduler
from afterwork.services.sweep import scheduled_channel_check


def _next_fire(job, after):
    return job.trigger.get_next_fire_time(None, after)


def test_two_independent_jobs_run_the_same_sweep(ctx):
    scheduler = build_scheduler(ctx)
    jobs = {job.id: job for job in scheduler.get_jobs()}
    assert set(jobs) == {INTERVAL_JOB_ID, BOUNDARY_JOB_ID}
    for job in jobs.values():
        assert job.func is scheduled_channel_check
        assert job.args == (ctx,)


def test_interval_job_fires_every_half_hour(ctx):
    job = build_scheduler(ctx).get_job(INTERVAL_JOB_ID)
    after = datetime(2026, 10, 19, 10, 5, tzinfo=pytz.UTC)
    assert _next_fire(job, after) == datetime(2026, 10, 19, 10, 30, tzinfo=pytz.UTC)


def test_boundary_job_fires_at_nine_and_five_on_weekdays(ctx):
    job = build_scheduler(ctx).get_job(BOUNDARY_JOB_ID)
    assert _next_fire(job, datetime(2026, 10, 19, 10, 0, tzinfo=pytz.UTC)) == \
        datetime(2026, 10, 19, 17, 0, tzinfo=pytz.UTC)
    # Friday evening skips the weekend
    assert _next_fire(job, datetime(2026, 10, 23, 18, 0, tzinfo=pytz.UTC)) == \
        datetime(2026, 10, 26, 9, 0, tzinfo=pytz.UTC)


def test_disabled_scheduler_is_not_started(ctx):
    assert start_scheduler(ctx) is None


def test_sweep_that_waited_behind_another_still_runs(ctx, transport):
    ctx.store.merge("u1", name="Ada", channels=["general"], work_start="09:00", work_end="17:00")
    scheduler = build_scheduler(ctx)
    scheduler.start(paused=True)
    try:
        job = scheduler.get_job(BOUNDARY_JOB_ID)
        assert job.misfire_grace_time is None
        assert job.coalesce is False

        # due a minute ago, as if it had queued behind the interval sweep
        due = datetime.now(pytz.UTC) - timedelta(minutes=1)
        events = run_job(job, "default", [due], "apscheduler.executors.default")
    finally:
        scheduler.shutdown(wait=False)

    assert [event.code for event in events] == [EVENT_JOB_EXECUTED]
    assert [m["user"]["id"] for m in transport.messages] == ["u1"]
