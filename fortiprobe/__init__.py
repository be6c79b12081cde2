"""Probe functions that turn FortiGate REST API responses into Prometheus metrics."""

__version__ = "0.1.0"