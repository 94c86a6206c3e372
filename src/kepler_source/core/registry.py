# src/kepler_source/core/registry.py
"""
The cycle-scoped registry of instances, keyed by container id.
"""

import logging
from typing import Dict, Iterator, List, Mapping, Optional

from ..models.instance import PROVIDERS, EnergyMetric, Instance, InstanceStatus, Provider
from ..utils.region_resolver import get_region_from_instance
from .exceptions import ProviderNotFoundError

logger = logging.getLogger(__name__)


class InstanceRegistry:
    """
    Find-or-create store for the instances of a single fetch cycle.

    A registry is created empty for every fetch and discarded afterwards;
    it never outlives the cycle that built it.
    """

    def __init__(self, provider_name: str, providers: Mapping[str, Provider] = PROVIDERS):
        self.provider_name = provider_name
        self.providers = providers
        self._instances: Dict[str, Instance] = {}

    def upsert(
        self,
        container_id: str,
        container_name: str,
        labels: Dict[str, str],
        metric: EnergyMetric,
    ) -> Instance:
        """
        Attaches the metric to the instance for `container_id`, creating it if needed.

        An existing instance only gets its metric replaced; its region and
        labels stay as they were when it was first created.

        Raises:
            RegionNotFoundError: If a new instance has no `region` label and
                none can be inferred from its `instance` label. Nothing is
                inserted.
            ProviderNotFoundError: If the configured provider is not supported.
        """
        instance = self._instances.get(container_id)
        if instance is not None:
            instance.upsert_metric(metric)
            return instance

        if "region" in labels:
            region = labels["region"]
        else:
            region = get_region_from_instance(labels.get("instance", ""))

        provider = self.providers.get(self.provider_name)
        if provider is None:
            raise ProviderNotFoundError(f"provider {self.provider_name} not found")

        instance = Instance(
            id=container_id,
            provider=provider,
            service="kepler",
            name=container_name,
            region=region,
            status=InstanceStatus.RUNNING,
            labels=dict(labels),
        )
        instance.upsert_metric(metric)
        self._instances[container_id] = instance
        logger.debug("Registered instance %s (%s) in region %s", container_id, container_name, region)
        return instance

    def get(self, container_id: str) -> Optional[Instance]:
        return self._instances.get(container_id)

    def instances(self) -> List[Instance]:
        """Flattens the registry into a list. Order is not guaranteed."""
        return list(self._instances.values())

    def __contains__(self, container_id: str) -> bool:
        return container_id in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def __iter__(self) -> Iterator[Instance]:
        return iter(self._instances.values())
