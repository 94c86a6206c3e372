# tests/core/test_registry.py

import pytest

from kepler_source.core.exceptions import ProviderNotFoundError, RegionNotFoundError
from kepler_source.core.registry import InstanceRegistry
from kepler_source.models.instance import EnergyMetric, InstanceStatus, Provider, ResourceType


def make_metric(resource_type, energy, labels=None):
    return EnergyMetric(
        name=resource_type.value,
        resource_type=resource_type,
        energy=energy,
        labels=labels or {},
    )


LABELS = {
    "container_id": "c-1",
    "container_name": "api",
    "instance": "ip-10-12-12-154.eu-central-1.compute.internal",
}


def test_upsert_creates_instance_from_labels():
    registry = InstanceRegistry("aws")

    instance = registry.upsert("c-1", "api", LABELS, make_metric(ResourceType.CPU, 1.0))

    assert len(registry) == 1
    assert "c-1" in registry
    assert instance.id == "c-1"
    assert instance.name == "api"
    assert instance.provider == Provider.AWS
    assert instance.service == "kepler"
    assert instance.status == InstanceStatus.RUNNING
    assert instance.region == "eu-central-1"
    assert instance.labels == LABELS
    assert set(instance.metrics) == {ResourceType.CPU}


def test_explicit_region_label_takes_precedence():
    registry = InstanceRegistry("gcp")
    labels = {**LABELS, "region": "europe-west9"}

    instance = registry.upsert("c-1", "api", labels, make_metric(ResourceType.CPU, 1.0))

    assert instance.region == "europe-west9"
    assert instance.provider == Provider.GCP


def test_upsert_same_resource_type_twice_replaces_metric():
    registry = InstanceRegistry("aws")
    registry.upsert("c-1", "api", LABELS, make_metric(ResourceType.CPU, 1.0))

    instance = registry.upsert("c-1", "api", LABELS, make_metric(ResourceType.CPU, 2.5))

    assert len(registry) == 1
    assert len(instance.metrics) == 1
    assert instance.metrics[ResourceType.CPU].energy == 2.5


def test_existing_instance_keeps_first_seen_fields():
    registry = InstanceRegistry("aws")
    registry.upsert("c-1", "api", LABELS, make_metric(ResourceType.CPU, 1.0))
    drifted = {**LABELS, "region": "us-east-1", "container_name": "renamed"}

    instance = registry.upsert("c-1", "renamed", drifted, make_metric(ResourceType.MEMORY, 0.5))

    assert instance.region == "eu-central-1"
    assert instance.name == "api"
    assert instance.labels == LABELS
    assert set(instance.metrics) == {ResourceType.CPU, ResourceType.MEMORY}


def test_unresolvable_region_inserts_nothing():
    registry = InstanceRegistry("aws")
    labels = {"container_id": "c-2", "container_name": "db", "instance": "invalid-instance"}

    with pytest.raises(RegionNotFoundError):
        registry.upsert("c-2", "db", labels, make_metric(ResourceType.CPU, 1.0))

    assert len(registry) == 0
    assert registry.get("c-2") is None


def test_unknown_provider_raises():
    registry = InstanceRegistry("openstack")

    with pytest.raises(ProviderNotFoundError, match="provider openstack not found"):
        registry.upsert("c-1", "api", LABELS, make_metric(ResourceType.CPU, 1.0))

    assert len(registry) == 0


def test_custom_provider_lookup():
    registry = InstanceRegistry("amazon", providers={"amazon": Provider.AWS})

    instance = registry.upsert("c-1", "api", LABELS, make_metric(ResourceType.CPU, 1.0))

    assert instance.provider == Provider.AWS


def test_instances_flattens_registry():
    registry = InstanceRegistry("aws")
    registry.upsert("c-1", "api", LABELS, make_metric(ResourceType.CPU, 1.0))
    registry.upsert("c-2", "db", {**LABELS, "container_id": "c-2"}, make_metric(ResourceType.MEMORY, 1.0))

    instances = registry.instances()

    assert sorted(instance.id for instance in instances) == ["c-1", "c-2"]
    assert sorted(instance.id for instance in registry) == ["c-1", "c-2"]
