"""Blocking JSON-RPC client for the node's HTTP endpoint."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError
from web3 import HTTPProvider, Web3
from web3.exceptions import Web3RPCError
from web3.types import RPCEndpoint

from node_probe.core.config import NODE_RPC_URL
from node_probe.core.exceptions import (
    RPCDecodeError,
    RPCProtocolError,
    RPCTransportError,
)
from node_probe.infrastructure.rpc.schemas import SystemHealth

logger = logging.getLogger(__name__)

SYSTEM_HEALTH = "system_health"
ROTATE_KEYS = "author_rotateKeys"


class NodeRPCClient:
    """Single-endpoint JSON-RPC client.

    Each call is one request with no retry and no failover; failures are
    translated into the probe error hierarchy.
    """

    def __init__(self, rpc_url: str | None = None):
        """Initialize RPC client.

        Args:
            rpc_url: JSON-RPC endpoint. Defaults to the local node.
        """
        self.rpc_url = rpc_url or NODE_RPC_URL
        self._web3: Web3 | None = None

    @property
    def web3(self) -> Web3:
        """Get or create Web3 instance."""
        if self._web3 is None:
            self._web3 = Web3(HTTPProvider(self.rpc_url))
        return self._web3

    def call(self, method: str, params: list[Any] | None = None) -> Any:
        """Send one JSON-RPC request.

        Args:
            method: RPC method name
            params: Positional parameters, empty by default

        Returns:
            The response's result member

        Raises:
            RPCProtocolError: The node returned an error object
            RPCTransportError: The request could not be completed
        """
        logger.debug(f"Calling {method} on {self.rpc_url}")
        try:
            return self.web3.manager.request_blocking(
                RPCEndpoint(method), params or []
            )
        except Web3RPCError as e:
            rpc_response = getattr(e, "rpc_response", None) or {}
            error = rpc_response.get("error") or str(e)
            logger.debug(f"{method} returned error: {error}")
            raise RPCProtocolError(method, error) from e
        except Exception as e:
            logger.debug(f"{method} transport failure: {e}")
            raise RPCTransportError(method, self.rpc_url, e) from e

    def system_health(self) -> SystemHealth:
        """Fetch the node's sync and peer status.

        Raises:
            RPCDecodeError: The result is not a valid system_health payload
        """
        result = self.call(SYSTEM_HEALTH)
        if not isinstance(result, Mapping):
            raise RPCDecodeError(SYSTEM_HEALTH, f"expected an object, got {result!r}")

        try:
            return SystemHealth.model_validate(dict(result))
        except ValidationError as e:
            raise RPCDecodeError(SYSTEM_HEALTH, str(e)) from e

    def rotate_keys(self) -> str:
        """Ask the node to generate new session keys.

        Returns:
            The encoded public session keys, verbatim

        Raises:
            RPCDecodeError: The result is not a string
        """
        result = self.call(ROTATE_KEYS)
        if not isinstance(result, str):
            raise RPCDecodeError(ROTATE_KEYS, f"expected a string, got {result!r}")
        return result
