# src/kepler_source/cli/fetch.py
"""
One-shot fetch command: runs a single fetch cycle and prints the instances.
"""

import asyncio
import json
import logging
from typing import List, Optional

import typer
from typing_extensions import Annotated

from ..core.config import Config
from ..core.exceptions import FetchError
from ..core.factory import get_config, get_kepler_collector, get_prometheus_client
from ..exporters.json_exporter import JSONExporter
from ..models.instance import Instance
from ..reporters.console_reporter import ConsoleReporter

logger = logging.getLogger(__name__)

app = typer.Typer(name="fetch", help="Run a single fetch cycle against Prometheus.")


async def run_fetch(config: Config) -> List[Instance]:
    """Runs one fetch cycle with a client that lives only for this call."""
    client = get_prometheus_client(config)
    collector = get_kepler_collector(config, client)
    try:
        return await collector.fetch()
    finally:
        await collector.stop()
        await client.close()


@app.callback(invoke_without_command=True)
def fetch(
    ctx: typer.Context,
    output: Annotated[
        Optional[str],
        typer.Option("--output", "-o", help="Also write the instances to this JSON file."),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the instances as JSON instead of a table."),
    ] = False,
) -> None:
    """
    Fetch Kepler energy for all containers once and report it.
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        config = get_config()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        raise typer.Exit(code=1)

    try:
        instances = asyncio.run(run_fetch(config))
    except FetchError as e:
        logger.error(f"Fetch failed: {e}")
        raise typer.Exit(code=1)

    if output:
        path = asyncio.run(JSONExporter().export(instances, output))
        logger.info(f"Wrote {len(instances)} instance(s) to {path}")

    if as_json:
        typer.echo(json.dumps([instance.model_dump(mode="json") for instance in instances], indent=2))
    else:
        ConsoleReporter().report(instances)
