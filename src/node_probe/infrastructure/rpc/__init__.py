"""Node JSON-RPC infrastructure module."""

from node_probe.infrastructure.rpc.client import NodeRPCClient
from node_probe.infrastructure.rpc.schemas import SystemHealth

__all__ = [
    "NodeRPCClient",
    "SystemHealth",
]
