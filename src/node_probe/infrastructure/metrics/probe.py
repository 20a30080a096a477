"""Reachability check for the node's metrics endpoint."""

import logging

import httpx

from node_probe.core.config import NODE_METRICS_URL, get_settings
from node_probe.core.exceptions import (
    MetricsConnectError,
    MetricsReadError,
    MetricsStatusError,
)

logger = logging.getLogger(__name__)


class MetricsProbe:
    """Checks that the metrics endpoint serves a complete response."""

    def __init__(
        self,
        metrics_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
        timeout: float | None = None,
    ):
        """Initialize metrics probe.

        Args:
            metrics_url: Metrics URL. Defaults to the local node.
            transport: Optional httpx transport, used by tests
            timeout: Request timeout in seconds. Defaults to the
                http_timeout setting (no timeout when unset).
        """
        self.metrics_url = metrics_url or NODE_METRICS_URL
        self.timeout = timeout if timeout is not None else get_settings().http_timeout
        self._transport = transport

    def _create_client(self) -> httpx.Client:
        """Create HTTP client."""
        return httpx.Client(transport=self._transport, timeout=self.timeout)

    def check(self) -> None:
        """GET the metrics endpoint and read the whole body.

        The body is discarded. The response is released on every path.

        Raises:
            MetricsConnectError: The request could not be sent
            MetricsReadError: The body could not be read
            MetricsStatusError: The status code is 300 or above
        """
        logger.debug(f"Fetching {self.metrics_url}")
        with self._create_client() as client:
            request = client.build_request("GET", self.metrics_url)
            try:
                response = client.send(request, stream=True)
            except httpx.HTTPError as e:
                raise MetricsConnectError(self.metrics_url, e) from e

            try:
                body = response.read()
            except httpx.HTTPError as e:
                raise MetricsReadError(self.metrics_url, e) from e
            finally:
                response.close()

        if response.status_code >= 300:
            raise MetricsStatusError(self.metrics_url, response.status_code)

        logger.debug(
            f"Metrics endpoint answered {response.status_code} with {len(body)} bytes"
        )
