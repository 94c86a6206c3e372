# src/kepler_source/collectors/kepler_collector.py
"""
This module contains the collector that turns Kepler container energy
metrics stored in Prometheus into a list of instances.

Every fetch runs two phases against Prometheus, CPU then memory, and merges
the samples of both into one instance per container id. Nothing is kept
between fetches.
"""

import logging
from datetime import datetime, timezone
from typing import List

from ..core.classifier import SampleClassifier
from ..core.config import Config, format_duration
from ..core.exceptions import (
    EmptyReadingError,
    FetchError,
    PrometheusQueryError,
    ProviderNotFoundError,
    RegionNotFoundError,
    UnexpectedResultTypeError,
)
from ..core.registry import InstanceRegistry
from ..core.telemetry import fetch_failures, instances_fetched, samples_skipped, tracer
from ..models.instance import Instance, ResourceType
from ..models.prometheus import VectorResult
from .base_collector import BaseCollector
from .prometheus_client import PrometheusClient

logger = logging.getLogger(__name__)

QUERY_TEMPLATE = "rate(kepler_container_{resource}_joules_total[{interval}])"

# Kepler metric name segment for each resource type, in phase order.
RESOURCE_QUERY_TAGS = {
    ResourceType.CPU: "core",
    ResourceType.MEMORY: "dram",
}


class KeplerCollector(BaseCollector):
    """
    Collects per-container energy consumption from Kepler via Prometheus.
    """

    def __init__(self, settings: Config, client: PrometheusClient):
        self.settings = settings
        self.client = client
        self.interval = format_duration(settings.interval)
        self.classifier = SampleClassifier(settings.interval_seconds)

    def build_query(self, resource_type: ResourceType) -> str:
        return QUERY_TEMPLATE.format(resource=RESOURCE_QUERY_TAGS[resource_type], interval=self.interval)

    async def collect(self) -> List[Instance]:
        return await self.fetch()

    async def fetch(self) -> List[Instance]:
        """
        Runs one fetch cycle and returns the instances with their metrics attached.

        Raises:
            FetchError: If a query fails, Prometheus returns anything but a
                vector, or the configured provider is unknown. No instances
                are returned in that case.
        """
        registry = InstanceRegistry(self.settings.PROVIDER)

        with tracer.start_as_current_span("kepler.fetch"):
            for resource_type in RESOURCE_QUERY_TAGS:
                try:
                    await self._collect_phase(registry, resource_type)
                except FetchError as e:
                    fetch_failures.add(1, {"phase": e.phase})
                    logger.error("Kepler fetch aborted: %s", e)
                    raise

        instances = registry.instances()
        instances_fetched.add(len(instances))
        logger.info("Kepler fetch collected %d instance(s)", len(instances))
        return instances

    async def _collect_phase(self, registry: InstanceRegistry, resource_type: ResourceType) -> None:
        phase = resource_type.value
        query = self.build_query(resource_type)

        with tracer.start_as_current_span(f"kepler.fetch.{phase}") as span:
            span.set_attribute("kepler.query", query)
            try:
                result, warnings = await self.client.query(query, datetime.now(timezone.utc))
            except PrometheusQueryError as e:
                raise FetchError(phase, e) from e

            if warnings:
                logger.warning("Prometheus query warnings for %s phase: %s", phase, warnings)

            if not isinstance(result, VectorResult):
                error = UnexpectedResultTypeError(f"expected a vector result but got {result.result_type}")
                raise FetchError(phase, error) from error

            span.set_attribute("kepler.samples", len(result.result))
            skipped = 0
            for sample in result.result:
                try:
                    classified = self.classifier.classify(sample, resource_type)
                except EmptyReadingError:
                    logger.debug(
                        "Skipping empty %s reading for container %s (%s)",
                        phase,
                        sample.metric.get("container_id", ""),
                        sample.metric.get("container_name", ""),
                    )
                    samples_skipped.add(1, {"reason": "empty_reading", "phase": phase})
                    skipped += 1
                    continue

                if not classified.container_id:
                    logger.warning(
                        "Sample for container '%s' has no container_id; grouping it under the empty id",
                        classified.container_name,
                    )

                try:
                    registry.upsert(
                        classified.container_id,
                        classified.container_name,
                        classified.labels,
                        classified.metric,
                    )
                except RegionNotFoundError as e:
                    logger.error(
                        "Skipping %s sample for container %s (%s): %s",
                        phase,
                        classified.container_id,
                        classified.container_name,
                        e,
                    )
                    samples_skipped.add(1, {"reason": "region_not_found", "phase": phase})
                    skipped += 1
                    continue
                except ProviderNotFoundError as e:
                    raise FetchError(phase, e) from e

            logger.info(
                "Kepler %s phase processed %d sample(s), skipped %d",
                phase,
                len(result.result),
                skipped,
            )

    async def stop(self) -> None:
        """
        Called when the host shuts down. The collector holds no resources of
        its own; the Prometheus client belongs to whoever injected it.
        """
        logger.debug("Kepler collector stopped")
