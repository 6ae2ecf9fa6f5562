"""Run drivers: single contention runs and client-count sweeps."""

from wlansim.experiments.runner import ExperimentResult, ExperimentRunner, SimulationRunner

__all__ = [
    "ExperimentResult",
    "ExperimentRunner",
    "SimulationRunner",
]
