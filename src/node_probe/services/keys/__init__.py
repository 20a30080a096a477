"""Session key rotation service module."""

from node_probe.services.keys.rotator import KeyRotator

__all__ = [
    "KeyRotator",
]
