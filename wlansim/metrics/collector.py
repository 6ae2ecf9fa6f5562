"""Metrics collection for one contention run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from wlansim.mac.access import AttemptOutcome


@dataclass(frozen=True)
class SimulationResults:
    generation: int
    station_count: int
    round_count: int
    success_count: int
    attempt_count: int
    total_duration_s: float
    elapsed_s: float
    latency_samples: Tuple[float, ...]
    credited_bits: float
    theoretical_max_mbps: float
    packet_size_bits: int


@dataclass
class MetricCollector:
    """Accumulates attempt outcomes while a run is in progress.

    ``total_duration_s`` is the sum of every attempt's time, successful or
    not. ``elapsed_s`` is the channel clock: rounds of parallel streams or
    resource units overlap their attempts, so it can be shorter.
    """

    generation: int
    station_count: int
    packet_size_bits: int
    theoretical_max_mbps: float
    success_count: int = 0
    attempt_count: int = 0
    round_count: int = 0
    total_duration_s: float = 0.0
    elapsed_s: float = 0.0
    credited_bits: float = 0.0
    latency_samples: List[float] = field(default_factory=list)

    def record_attempt(self, outcome: AttemptOutcome) -> None:
        """Count an attempt and its time; successes also contribute a latency sample and credit."""
        self.attempt_count += 1
        self.total_duration_s += outcome.duration_s
        if outcome.succeeded:
            self.success_count += 1
            self.latency_samples.append(outcome.latency_ms)
            self.credited_bits += outcome.credit_bits

    def record_round(self, elapsed_s: float) -> None:
        """Advance the channel clock by the time a finished round occupied it."""
        self.round_count += 1
        self.elapsed_s += elapsed_s

    def snapshot(self) -> SimulationResults:
        """Freeze the counters into a results record for aggregation."""
        return SimulationResults(
            generation=self.generation,
            station_count=self.station_count,
            round_count=self.round_count,
            success_count=self.success_count,
            attempt_count=self.attempt_count,
            total_duration_s=self.total_duration_s,
            elapsed_s=self.elapsed_s,
            latency_samples=tuple(self.latency_samples),
            credited_bits=self.credited_bits,
            theoretical_max_mbps=self.theoretical_max_mbps,
            packet_size_bits=self.packet_size_bits,
        )
