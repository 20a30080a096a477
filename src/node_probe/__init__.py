"""Liveness/readiness probes and key rotation for a blockchain node."""

__version__ = "0.1.0"
