# src/kepler_source/collectors/prometheus_client.py

"""
A thin asynchronous client for the Prometheus instant query API.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

import httpx
from pydantic import ValidationError

from ..core.exceptions import PrometheusQueryError
from ..models.prometheus import QueryResponse, QueryResult
from ..utils.http_client import get_async_http_client

logger = logging.getLogger(__name__)


class PrometheusClient:
    """
    Runs PromQL instant queries against `/api/v1/query`.
    """

    def __init__(
        self,
        address: str,
        bearer_token: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        verify: bool = True,
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.address = address.rstrip("/")
        self.query_url = f"{self.address}/api/v1/query"

        self.headers = {}
        if bearer_token:
            self.headers["Authorization"] = f"Bearer {bearer_token}"

        self.auth = None
        if username and password:
            self.auth = (username, password)

        self._client = http_client or get_async_http_client(timeout=timeout, verify=verify)

    async def query(self, query: str, time: Optional[datetime] = None) -> Tuple[QueryResult, List[str]]:
        """
        Evaluates `query` at `time` (now by default).

        Returns the typed result and the warnings Prometheus attached to it.

        Raises:
            PrometheusQueryError: On transport errors, HTTP errors, malformed
                responses and error responses from Prometheus.
        """
        evaluation_time = time or datetime.now(timezone.utc)
        params = {"query": query, "time": f"{evaluation_time.timestamp():.3f}"}

        logger.debug("Querying Prometheus at %s: %s", self.query_url, query)
        try:
            response = await self._client.get(
                self.query_url,
                params=params,
                headers=self.headers,
                auth=self.auth,
            )
        except httpx.HTTPError as e:
            raise PrometheusQueryError(f"error querying prometheus at {self.query_url}: {e}") from e

        try:
            payload = QueryResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            # Prometheus answers API errors with a JSON body, anything else is a broken endpoint.
            if response.is_error:
                raise PrometheusQueryError(
                    f"prometheus returned HTTP {response.status_code} for {self.query_url}"
                ) from e
            raise PrometheusQueryError(f"malformed response from prometheus at {self.query_url}: {e}") from e

        if payload.status != "success":
            raise PrometheusQueryError(
                f"prometheus query failed ({payload.error_type or 'unknown'}): {payload.error or 'no error message'}"
            )

        if payload.data is None:
            raise PrometheusQueryError(f"prometheus returned no data section for query: {query}")

        return payload.data, payload.warnings

    async def close(self):
        await self._client.aclose()

    async def __aenter__(self) -> "PrometheusClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
