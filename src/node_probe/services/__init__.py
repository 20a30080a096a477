"""Probe services."""
