"""Liveness and readiness probing for a node."""

import logging
from enum import Enum

from node_probe.core.exceptions import NodeSyncingError
from node_probe.infrastructure.metrics import MetricsProbe
from node_probe.infrastructure.rpc import NodeRPCClient, SystemHealth

logger = logging.getLogger(__name__)


class CheckMode(str, Enum):
    """Probe strictness."""

    LIVENESS = "liveness"
    READINESS = "readiness"


class HealthProber:
    """Runs the RPC health check followed by the metrics check.

    Checks run in order and the first failure aborts the probe, so an
    unreachable RPC endpoint means the metrics endpoint is never queried.
    """

    def __init__(
        self,
        rpc_client: NodeRPCClient | None = None,
        metrics_probe: MetricsProbe | None = None,
    ):
        """Initialize health prober.

        Args:
            rpc_client: Node RPC client
            metrics_probe: Metrics endpoint probe
        """
        self.rpc_client = rpc_client or NodeRPCClient()
        self.metrics_probe = metrics_probe or MetricsProbe()

    def probe(self, mode: CheckMode) -> SystemHealth:
        """Probe the node.

        Args:
            mode: Liveness ignores sync state, readiness requires the
                node to be fully synced

        Returns:
            The node's reported health

        Raises:
            ProbeError: Any check failed
        """
        health = self.rpc_client.system_health()
        # Peer fields are reported only; they never fail a probe.
        logger.debug(
            f"system_health: syncing={health.is_syncing} peers={health.peers} "
            f"should_have_peers={health.should_have_peers}"
        )

        if mode is CheckMode.READINESS and health.is_syncing:
            raise NodeSyncingError()

        self.metrics_probe.check()
        logger.debug(f"{mode.value} probe passed")
        return health
