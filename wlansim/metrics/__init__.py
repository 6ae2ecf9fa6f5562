"""Metrics collection utilities for the contention simulation."""

from wlansim.metrics.collector import MetricCollector, SimulationResults

__all__ = [
    "MetricCollector",
    "SimulationResults",
]
