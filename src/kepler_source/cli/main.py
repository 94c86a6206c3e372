# src/kepler_source/cli/main.py
"""
This module is the main entry point for the kepler-source CLI.

It aggregates all commands from the submodules (fetch, start).
"""

import logging
import os

import typer

from . import fetch, start

logger = logging.getLogger(__name__)


app = typer.Typer(
    name="kepler-source",
    help="Collect Kepler container energy from Prometheus as a fleet of instances.",
    add_completion=False,
)


def version_callback(value: bool):
    """
    Prints the version of kepler-source.
    """
    if value:
        from .. import __version__

        typer.echo(f"kepler-source version: {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """
    Show the version of kepler-source.
    """
    from .. import __version__

    typer.echo(f"kepler-source version: {__version__}")


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    kepler-source CLI main entry point.
    """
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


# Register command sub-apps
app.add_typer(fetch.app, name="fetch")
app.add_typer(start.app, name="start")


if __name__ == "__main__":
    app()
