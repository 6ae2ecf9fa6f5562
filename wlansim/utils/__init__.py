"""Utility helpers for the contention simulation."""

from .exporter import export_results
from .stats import ThroughputSummary, summarize

__all__ = [
    "ThroughputSummary",
    "export_results",
    "summarize",
]
