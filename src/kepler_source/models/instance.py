# src/kepler_source/models/instance.py
"""
This module defines the Pydantic data models for the fleet inventory built
by the Kepler source. An Instance corresponds to one container and carries
at most one EnergyMetric per resource type for the current fetch cycle.
"""

from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class Provider(str, Enum):
    """Cloud providers an instance can be attributed to."""

    AWS = "aws"
    GCP = "gcp"
    AZURE = "azure"


# Registry of supported provider names, as they appear in the PROVIDER setting.
PROVIDERS: Dict[str, Provider] = {provider.value: provider for provider in Provider}


class ResourceType(str, Enum):
    """Category of an energy measurement."""

    CPU = "cpu"
    MEMORY = "memory"


class InstanceStatus(str, Enum):
    """Lifecycle status reported for an instance."""

    RUNNING = "running"


class EnergyMetric(BaseModel):
    """
    Energy consumed by one resource of an instance during the current cycle.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Metric name, the resource type value.")
    resource_type: ResourceType = Field(..., description="The resource the energy was consumed by.")
    energy: float = Field(..., description="The energy consumed over the interval in kWh.")
    labels: Dict[str, str] = Field(default_factory=dict, description="Labels of the source sample.")


class Instance(BaseModel):
    """
    A single container observed by Kepler, with its energy metrics.
    """

    id: str = Field(..., description="The container id, unique within a fetch cycle.")
    provider: Provider = Field(..., description="The cloud provider running the container.")
    service: str = Field("kepler", description="The service the data was sourced from.")
    name: str = Field(..., description="The container name.")
    region: str = Field(..., description="The cloud region of the node running the container.")
    status: InstanceStatus = InstanceStatus.RUNNING
    labels: Dict[str, str] = Field(default_factory=dict)
    metrics: Dict[ResourceType, EnergyMetric] = Field(default_factory=dict)

    def upsert_metric(self, metric: EnergyMetric) -> None:
        """Insert the metric, replacing any metric of the same resource type."""
        self.metrics[metric.resource_type] = metric
