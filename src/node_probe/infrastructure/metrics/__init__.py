"""Node metrics endpoint module."""

from node_probe.infrastructure.metrics.probe import MetricsProbe

__all__ = [
    "MetricsProbe",
]
