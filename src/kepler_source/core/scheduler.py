import asyncio
import logging
from typing import Callable, Coroutine, List

from .config import parse_duration

logger = logging.getLogger(__name__)


class Scheduler:
    """
    Manages the scheduling and execution of periodic async tasks using asyncio.
    """

    def __init__(self):
        self.tasks: List[asyncio.Task] = []
        logger.info("AsyncScheduler initialized.")

    async def _run_periodically(self, interval_seconds: float, job_func: Callable[[], Coroutine]):
        """Internal loop to run a job periodically."""
        try:
            while True:
                try:
                    await job_func()
                except Exception as e:
                    # A failed run drops one cycle; the next one runs on schedule.
                    logger.error(f"Error in scheduled job '{job_func.__name__}': {e}", exc_info=True)

                await asyncio.sleep(interval_seconds)
        except asyncio.CancelledError:
            logger.info(f"Job '{job_func.__name__}' cancelled.")
            raise

    def add_job(self, job_func: Callable[[], Coroutine], interval_seconds: float):
        """
        Adds a new async job to the schedule.
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be greater than zero.")

        task = asyncio.create_task(self._run_periodically(interval_seconds, job_func))
        self.tasks.append(task)
        logger.info(f"Scheduled job '{job_func.__name__}' to run every {interval_seconds:g} second(s).")

    def add_job_from_string(self, job_func: Callable[[], Coroutine], interval_str: str):
        """
        Adds a job based on a Prometheus-style duration string like '5m' or '1h'.
        """
        self.add_job(job_func, parse_duration(interval_str).total_seconds())

    async def stop(self):
        """Cancels all scheduled tasks."""
        logger.info("Stopping scheduler...")
        for task in self.tasks:
            task.cancel()
        if self.tasks:
            await asyncio.gather(*self.tasks, return_exceptions=True)
        self.tasks.clear()
