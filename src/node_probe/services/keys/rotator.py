"""Session key rotation service."""

import logging

from node_probe.infrastructure.rpc import NodeRPCClient

logger = logging.getLogger(__name__)


class KeyRotator:
    """Requests a session key rotation from the node."""

    def __init__(self, rpc_client: NodeRPCClient | None = None):
        self.rpc_client = rpc_client or NodeRPCClient()

    def rotate(self) -> str:
        """Rotate the node's session keys.

        Returns:
            The new public session keys as returned by the node
        """
        keys = self.rpc_client.rotate_keys()
        logger.info("Session keys rotated")
        return keys
