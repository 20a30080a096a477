"""Node health probe service module."""

from node_probe.infrastructure.rpc.schemas import SystemHealth
from node_probe.services.health.checker import CheckMode, HealthProber

__all__ = [
    "CheckMode",
    "HealthProber",
    "SystemHealth",
]
