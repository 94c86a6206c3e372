# src/kepler_source/reporters/console_reporter.py
"""
A reporter that displays fetched instances in a formatted table in the console.
"""

import logging
from typing import List

from rich.console import Console
from rich.table import Table

from ..models.instance import Instance, ResourceType
from .base_reporter import BaseReporter

logger = logging.getLogger(__name__)


class ConsoleReporter(BaseReporter):
    """
    Renders Kepler instances to the console using the 'rich' library.
    """

    def __init__(self):
        self.console = Console()

    def report(self, instances: List[Instance]):
        if not instances:
            self.console.print("No instances to report.", style="yellow")
            return

        table = Table(
            title="Kepler Container Energy",
            header_style="bold magenta",
            show_lines=True,
        )
        table.add_column("Container ID", style="cyan")
        table.add_column("Name", style="cyan")
        table.add_column("Provider", style="dim")
        table.add_column("Region", style="magenta")
        table.add_column("CPU (kWh)", style="yellow", justify="right")
        table.add_column("Memory (kWh)", style="yellow", justify="right")

        # Sort by total energy descending
        sorted_instances = sorted(
            instances,
            key=lambda item: sum(metric.energy for metric in item.metrics.values()),
            reverse=True,
        )

        for instance in sorted_instances:
            table.add_row(
                instance.id,
                instance.name,
                instance.provider.value,
                instance.region,
                self._format_energy(instance, ResourceType.CPU),
                self._format_energy(instance, ResourceType.MEMORY),
            )

        self.console.print(table)

    @staticmethod
    def _format_energy(instance: Instance, resource_type: ResourceType) -> str:
        metric = instance.metrics.get(resource_type)
        if metric is None:
            return "-"
        return f"{metric.energy:.3e}"
