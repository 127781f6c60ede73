"""Tests for the background scheduler wiring."""

from __future__ import annotations

import pytest
from apscheduler.triggers.cron import CronTrigger
from apscheduler.triggers.interval import IntervalTrigger

from app.application.use_cases.notifications import NotificationRunError
from app.infrastructure import scheduler as scheduler_module


def test_build_scheduler_registers_both_jobs() -> None:
    scheduler = scheduler_module.build_scheduler()

    daily = scheduler.get_job(scheduler_module.DAILY_NOTIFICATIONS_JOB_ID)
    reminders = scheduler.get_job(scheduler_module.REMINDERS_JOB_ID)

    assert isinstance(daily.trigger, CronTrigger)
    assert isinstance(reminders.trigger, IntervalTrigger)
    assert reminders.trigger.interval.total_seconds() == 5 * 60
    assert daily.max_instances == 1
    assert reminders.max_instances == 1


def test_start_scheduler_respects_disabled_setting() -> None:
    assert scheduler_module.start_scheduler() is None
    scheduler_module.shutdown_scheduler()


def test_daily_job_swallows_run_failures(monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    def failing_pass(session):
        raise NotificationRunError("sweep failed")

    monkeypatch.setattr(scheduler_module, "generate_all_notifications", failing_pass)

    with caplog.at_level("ERROR"):
        assert scheduler_module.run_daily_notifications() is None

    assert "Scheduled notification pass failed" in caplog.text
