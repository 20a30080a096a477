"""Pytest configuration and fixtures."""

import logging
from unittest.mock import MagicMock

import httpx
import pytest

from node_probe.core.config import get_settings
from node_probe.infrastructure.metrics import MetricsProbe
from node_probe.infrastructure.rpc import NodeRPCClient


class TrackingStream(httpx.SyncByteStream):
    """Response body that records whether it was released."""

    def __init__(self, chunks: list[bytes] | None = None, error: Exception | None = None):
        self.chunks = chunks or []
        self.error = error
        self.closed = False

    def __iter__(self):
        for chunk in self.chunks:
            yield chunk
        if self.error is not None:
            raise self.error

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Isolate tests from the host environment and the settings cache."""
    monkeypatch.delenv("NODE_PROBE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NODE_PROBE_LOG_FORMAT", raising=False)
    monkeypatch.delenv("NODE_PROBE_HTTP_TIMEOUT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to a previous test's captured streams."""
    yield
    logger = logging.getLogger("node_probe")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def rpc_client():
    """Create RPC client with a mocked web3 instance."""
    client = NodeRPCClient()
    client._web3 = MagicMock()
    return client


@pytest.fixture
def metrics_requests():
    """Collect requests seen by the mock metrics endpoint."""
    return []


@pytest.fixture
def tracking_stream():
    """Factory for response bodies that record their release."""
    return TrackingStream


@pytest.fixture
def healthy_node():
    """system_health result of a synced node with peers."""
    return {"isSyncing": False, "peers": 3, "shouldHavePeers": True}


@pytest.fixture
def syncing_node():
    """system_health result of a node still syncing."""
    return {"isSyncing": True, "peers": 3, "shouldHavePeers": True}


@pytest.fixture
def make_metrics_probe(metrics_requests):
    """Build a metrics probe answering with the given status and body."""

    def _make(status_code: int = 200, stream: httpx.SyncByteStream | None = None):
        def handler(request: httpx.Request) -> httpx.Response:
            metrics_requests.append(request)
            return httpx.Response(
                status_code,
                stream=stream if stream is not None else TrackingStream([b"ok\n"]),
            )

        return MetricsProbe(transport=httpx.MockTransport(handler))

    return _make
