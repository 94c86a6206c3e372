# src/kepler_source/core/config.py

import logging
import os
import re
from datetime import timedelta

from dotenv import load_dotenv

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

DURATION_PATTERN = re.compile(r"^(\d+)([smh])$")
DURATION_UNITS = {"s": "seconds", "m": "minutes", "h": "hours"}

REQUIRED_VARIABLES = ("INTERVAL", "PROVIDER", "PROMETHEUS_URL")


def parse_duration(value: str) -> timedelta:
    """Parses a Prometheus-style duration string like '30s', '5m' or '1h'."""
    match = DURATION_PATTERN.match(value.strip().lower())
    if not match:
        raise ValueError(f"Invalid duration format: '{value}'. Use 's', 'm', or 'h'.")

    amount, unit = int(match.group(1)), match.group(2)
    return timedelta(**{DURATION_UNITS[unit]: amount})


def format_duration(delta: timedelta) -> str:
    """Renders a timedelta as the largest whole Prometheus duration unit."""
    seconds = int(delta.total_seconds())
    if seconds and seconds % 3600 == 0:
        return f"{seconds // 3600}h"
    if seconds and seconds % 60 == 0:
        return f"{seconds // 60}m"
    return f"{seconds}s"


def _as_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "t", "y", "yes")


class Config:
    """
    Handles the Kepler source configuration by loading values from environment variables.

    The source runs next to the host process and has no access to its
    configuration, so everything it needs comes from the environment. The
    INTERVAL value must match the interval the host calls `fetch` with.
    """

    def __init__(self):
        # Window of aggregated data scraped from Prometheus, e.g. '5m'
        self.INTERVAL = os.getenv("INTERVAL", "")

        # Cloud provider the instances are attributed to, e.g. 'aws' or 'gcp'
        self.PROVIDER = os.getenv("PROVIDER", "").lower()

        # -- Prometheus variables ---
        self.PROMETHEUS_URL = os.getenv("PROMETHEUS_URL", "")
        self.PROMETHEUS_PORT = os.getenv("PROMETHEUS_PORT", "9090")
        self.PROMETHEUS_VERIFY_CERTS = _as_bool(os.getenv("PROMETHEUS_VERIFY_CERTS", "True"))
        self.PROMETHEUS_TIMEOUT = float(os.getenv("PROMETHEUS_TIMEOUT", "10"))
        self.PROMETHEUS_BEARER_TOKEN = self._get_secret("PROMETHEUS_BEARER_TOKEN")
        self.PROMETHEUS_USERNAME = self._get_secret("PROMETHEUS_USERNAME")
        self.PROMETHEUS_PASSWORD = self._get_secret("PROMETHEUS_PASSWORD")

        # --- Output variables ---
        self.SNAPSHOT_PATH = os.getenv("SNAPSHOT_PATH", "kepler-instances.json")

        # --- Logging and telemetry variables ---
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
        self.OTEL_ENABLED = _as_bool(os.getenv("OTEL_ENABLED", "False"))

    @staticmethod
    def _get_secret(key: str, default: str = None) -> str:
        """
        Retrieves a secret from a file (Docker secret/volume) or falls back to environment variable.

        Raises:
            PermissionError: If the secret file exists but cannot be read due to permissions.
            IOError: If the secret file exists but cannot be read due to I/O errors.
        """
        secret_file = f"/etc/kepler-source/secrets/{key}"
        if os.path.exists(secret_file):
            try:
                with open(secret_file, "r") as f:
                    value = f.read().strip()
                    logging.getLogger(__name__).debug(f"Loaded secret '{key}' from {secret_file}")
                    return value
            except PermissionError as e:
                raise PermissionError(
                    f"Secret file '{secret_file}' exists but cannot be read due to permission denied. "
                    f"Please check file permissions or run with appropriate privileges."
                ) from e
            except (IOError, OSError) as e:
                raise IOError(
                    f"Secret file '{secret_file}' exists but cannot be read: {e}. "
                    f"Please check the file integrity and system resources."
                ) from e
        return os.getenv(key, default)

    @property
    def interval(self) -> timedelta:
        return parse_duration(self.INTERVAL)

    @property
    def interval_seconds(self) -> float:
        return self.interval.total_seconds()

    @property
    def PROMETHEUS_ADDRESS(self) -> str:
        base = self.PROMETHEUS_URL.rstrip("/")
        if not self.PROMETHEUS_PORT:
            return base
        return f"{base}:{self.PROMETHEUS_PORT}"

    def validate_instance(self):
        missing = [name for name in REQUIRED_VARIABLES if not getattr(self, name)]
        if missing:
            raise ValueError(f"Missing required environment variable(s): {', '.join(missing)}")

        # parse_duration raises ValueError on a malformed interval
        if self.interval.total_seconds() <= 0:
            raise ValueError("INTERVAL must be greater than zero.")

        if self.PROMETHEUS_TIMEOUT <= 0:
            raise ValueError("PROMETHEUS_TIMEOUT must be greater than zero.")
