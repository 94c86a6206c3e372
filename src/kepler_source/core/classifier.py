# src/kepler_source/core/classifier.py
"""
Turns Prometheus samples into typed energy metrics.
"""

import logging
from typing import Dict

from pydantic import BaseModel, Field

from ..energy.converter import convert_joules_to_kwh
from ..models.instance import EnergyMetric, ResourceType
from ..models.prometheus import VectorSample

logger = logging.getLogger(__name__)


class ClassifiedSample(BaseModel):
    """
    A sample reduced to its container identity and energy metric.
    """

    container_id: str
    container_name: str
    labels: Dict[str, str] = Field(default_factory=dict)
    metric: EnergyMetric


class SampleClassifier:
    """
    Classifies Kepler samples for one aggregation interval.
    """

    def __init__(self, interval_seconds: float):
        self.interval_seconds = interval_seconds

    def classify(self, sample: VectorSample, resource_type: ResourceType) -> ClassifiedSample:
        """
        Builds the EnergyMetric for a sample of the given resource type.

        Missing container labels map to empty strings. EmptyReadingError from
        the unit conversion is left to the caller, which skips the sample.
        """
        labels = dict(sample.metric)
        container_id = labels.get("container_id", "")
        container_name = labels.get("container_name", "")

        logger.debug(
            "Kepler energy consumption: instance=%s container=%s resource=%s joules=%s",
            labels.get("instance"),
            container_name,
            resource_type.value,
            sample.value[1],
        )

        energy = convert_joules_to_kwh(sample.sample_value, self.interval_seconds)

        metric = EnergyMetric(
            name=resource_type.value,
            resource_type=resource_type,
            energy=energy,
            labels=labels,
        )
        return ClassifiedSample(
            container_id=container_id,
            container_name=container_name,
            labels=labels,
            metric=metric,
        )
