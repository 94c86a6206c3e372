from .kepler_collector import KeplerCollector
from .prometheus_client import PrometheusClient

__all__ = [
    "KeplerCollector",
    "PrometheusClient",
]
