# tests/core/test_scheduler.py

import asyncio
from unittest.mock import MagicMock

import pytest

from kepler_source.core.scheduler import Scheduler


@pytest.mark.asyncio
async def test_add_job_schedules_correctly():
    """
    Tests that the Scheduler's add_job method correctly adds a task to the asyncio loop.
    """
    scheduler = Scheduler()
    mock_job = MagicMock()

    async def async_job():
        mock_job()

    scheduler.add_job(async_job, interval_seconds=3600)

    assert len(scheduler.tasks) == 1
    task = scheduler.tasks[0]
    assert not task.done()

    await scheduler.stop()


@pytest.mark.asyncio
async def test_add_job_from_string_schedules_correctly():
    scheduler = Scheduler()

    async def async_job():
        pass

    scheduler.add_job_from_string(async_job, "5m")

    assert len(scheduler.tasks) == 1
    await scheduler.stop()
    assert scheduler.tasks == []


def test_add_job_from_string_rejects_invalid_format():
    scheduler = Scheduler()

    async def async_job():
        pass

    with pytest.raises(ValueError, match="Invalid duration format"):
        scheduler.add_job_from_string(async_job, "five minutes")


@pytest.mark.asyncio
async def test_failing_job_keeps_running():
    """A job raising an exception is logged and runs again on the next interval."""
    scheduler = Scheduler()
    calls = []
    second_call = asyncio.Event()

    async def flaky_job():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("dropped cycle")
        second_call.set()

    scheduler.add_job(flaky_job, interval_seconds=0.01)

    await asyncio.wait_for(second_call.wait(), timeout=2)
    await scheduler.stop()

    assert len(calls) >= 2
