# src/kepler_source/utils/region_resolver.py

import logging
import re

from ..core.exceptions import RegionNotFoundError

logger = logging.getLogger(__name__)

# GKE node names embed the region, e.g. gke-gc0-apps-europe-west1-default-ca15cfa4-hrb7
GKE_REGION_PATTERN = re.compile(r"(europe|asia|australia|southamerica|me|africa|us)-[a-z]+[0-9]+")


def get_region_from_instance(instance: str) -> str:
    """
    Extracts the region a node runs in from its Prometheus `instance` label.

    Examples:
        gke-gc0-apps-europe-west1-default-ca15cfa4-hrb7 -> europe-west1
        ip-192-168-29-157.eu-north-1.compute.internal -> eu-north-1

    Raises:
        RegionNotFoundError: If neither naming scheme yields a region.
    """
    if instance.startswith("gke-"):
        match = GKE_REGION_PATTERN.search(instance)
        if not match:
            raise RegionNotFoundError(f"unable to get region from instance: {instance}")
        return match.group(0)

    # AWS private DNS names: <host>.<region>.compute.internal
    if "." in instance:
        parts = instance.split(".")
        if len(parts) >= 2:
            logger.debug("Resolved region '%s' from instance '%s'", parts[1], instance)
            return parts[1]

    raise RegionNotFoundError(f"unable to get region from instance: {instance}")
