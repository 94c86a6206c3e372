# tests/conftest.py

import pytest

from kepler_source.core.factory import get_config


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Pytest fixture to mock environment variables for the config module.

    This fixture runs automatically for every test (`autouse=True`) so the
    configuration is predictable and isolated from the actual environment.
    """
    monkeypatch.setenv("INTERVAL", "5m")
    monkeypatch.setenv("PROVIDER", "aws")
    monkeypatch.setenv("PROMETHEUS_URL", "http://prometheus")
    monkeypatch.setenv("PROMETHEUS_PORT", "9090")
    monkeypatch.delenv("PROMETHEUS_BEARER_TOKEN", raising=False)
    monkeypatch.delenv("PROMETHEUS_USERNAME", raising=False)
    monkeypatch.delenv("PROMETHEUS_PASSWORD", raising=False)


@pytest.fixture(autouse=True)
def clear_config_cache():
    """get_config caches per process; every test gets a fresh load."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


def _build_vector_response(samples, warnings=None):
    body = {
        "status": "success",
        "data": {
            "resultType": "vector",
            "result": [{"metric": labels, "value": [1700000000.0, str(value)]} for labels, value in samples],
        },
    }
    if warnings:
        body["warnings"] = warnings
    return body


@pytest.fixture
def vector_response():
    """Returns a builder for Prometheus instant-vector response bodies from (labels, value) pairs."""
    return _build_vector_response
