# src/kepler_source/cli/start.py
"""
Start command for the kepler-source CLI.

Runs a fetch cycle every INTERVAL and writes each snapshot to SNAPSHOT_PATH
until the process receives SIGINT or SIGTERM.
"""

import asyncio
import logging
import signal
import traceback

import typer

from ..core.config import Config
from ..core.factory import get_config, get_kepler_collector, get_prometheus_client
from ..core.scheduler import Scheduler
from ..core.telemetry import initialize_telemetry
from ..exporters.json_exporter import JSONExporter

logger = logging.getLogger(__name__)

app = typer.Typer(name="start", help="Start the periodic Kepler collection service.")


async def run_service(config: Config, shutdown: asyncio.Event) -> None:
    """
    Schedules fetch cycles until `shutdown` is set, then stops cleanly.
    """
    client = get_prometheus_client(config)
    collector = get_kepler_collector(config, client)
    exporter = JSONExporter()

    async def collect_instances():
        instances = await collector.fetch()
        path = await exporter.export(instances, config.SNAPSHOT_PATH)
        logger.info(f"Saved snapshot of {len(instances)} instance(s) to {path}")

    scheduler = Scheduler()
    scheduler.add_job_from_string(collect_instances, config.INTERVAL)
    logger.info("Kepler source is running. Press CTRL+C to exit.")

    try:
        await shutdown.wait()
    finally:
        await scheduler.stop()
        await collector.stop()
        await client.close()
        logger.info("Kepler source stopped.")


async def _serve(config: Config) -> None:
    shutdown = asyncio.Event()
    loop = asyncio.get_running_loop()

    def signal_handler(signum):
        """Handle SIGTERM and SIGINT for graceful shutdown."""
        sig_name = "SIGTERM" if signum == signal.SIGTERM else "SIGINT"
        logger.info(f"Received {sig_name}, initiating graceful shutdown...")
        shutdown.set()

    for signum in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(signum, signal_handler, signum)

    await run_service(config, shutdown)


@app.callback(invoke_without_command=True)
def start(ctx: typer.Context) -> None:
    """
    Start fetching Kepler energy on the configured interval.
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        config = get_config()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        raise typer.Exit(code=1)

    if config.OTEL_ENABLED:
        initialize_telemetry()

    logger.info(f"Initializing Kepler source (provider={config.PROVIDER}, interval={config.INTERVAL})")
    try:
        asyncio.run(_serve(config))
    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}")
        logger.error("Service failed: %s", traceback.format_exc())
        raise typer.Exit(code=1)
