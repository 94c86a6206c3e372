# src/kepler_source/core/factory.py
"""
Factory functions wiring the Prometheus client and the Kepler collector
from the configuration.
"""

import logging
from functools import lru_cache

from ..collectors.kepler_collector import KeplerCollector
from ..collectors.prometheus_client import PrometheusClient
from .config import Config

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_config() -> Config:
    """
    Loads and validates the configuration once per process.

    Raises:
        ValueError: If a required variable is missing or malformed.
    """
    config = Config()
    config.validate_instance()
    return config


def get_prometheus_client(config: Config) -> PrometheusClient:
    logger.info("Prometheus address: %s", config.PROMETHEUS_ADDRESS)
    return PrometheusClient(
        config.PROMETHEUS_ADDRESS,
        bearer_token=config.PROMETHEUS_BEARER_TOKEN,
        username=config.PROMETHEUS_USERNAME,
        password=config.PROMETHEUS_PASSWORD,
        verify=config.PROMETHEUS_VERIFY_CERTS,
        timeout=config.PROMETHEUS_TIMEOUT,
    )


def get_kepler_collector(config: Config, client: PrometheusClient = None) -> KeplerCollector:
    """Builds a collector, creating the Prometheus client when none is given."""
    return KeplerCollector(settings=config, client=client or get_prometheus_client(config))
