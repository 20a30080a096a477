"""Probe error hierarchy.

Infrastructure clients translate library exceptions into these types.
Services let them propagate and the CLI layer turns them into exit codes.
"""

from typing import Any


class ProbeError(Exception):
    """Base class for every probe failure."""


class RPCError(ProbeError):
    """JSON-RPC call failed."""

    def __init__(self, method: str, message: str):
        self.method = method
        super().__init__(message)


class RPCTransportError(RPCError):
    """The RPC endpoint could not be reached or the exchange broke off."""

    def __init__(self, method: str, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        super().__init__(method, f"Failed to call {method} on {url}: {cause}")


class RPCProtocolError(RPCError):
    """The node answered with a JSON-RPC error object."""

    def __init__(self, method: str, error: Any):
        self.error = error
        super().__init__(method, f"Node returned an error for {method}: {error}")


class RPCDecodeError(RPCError):
    """The RPC result did not have the expected shape."""

    def __init__(self, method: str, detail: str):
        self.detail = detail
        super().__init__(method, f"Unexpected {method} response: {detail}")


class MetricsError(ProbeError):
    """Metrics endpoint check failed."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class MetricsConnectError(MetricsError):
    """Metrics endpoint refused or dropped the request."""

    def __init__(self, url: str, cause: Exception):
        self.cause = cause
        super().__init__(url, f"Failed to connect to metrics endpoint {url}: {cause}")


class MetricsReadError(MetricsError):
    """Metrics response body could not be read."""

    def __init__(self, url: str, cause: Exception):
        self.cause = cause
        super().__init__(url, f"Failed to read metrics response from {url}: {cause}")


class MetricsStatusError(MetricsError):
    """Metrics endpoint answered with a status code of 300 or above."""

    def __init__(self, url: str, status_code: int):
        self.status_code = status_code
        super().__init__(url, f"Metrics endpoint {url} returned HTTP {status_code}")


class NodeSyncingError(ProbeError):
    """Readiness failed because the node is still syncing."""

    def __init__(self) -> None:
        super().__init__("Node is still syncing")
