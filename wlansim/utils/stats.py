"""Statistical helper functions."""

from __future__ import annotations

from dataclasses import dataclass

from wlansim.metrics import SimulationResults


@dataclass(frozen=True)
class ThroughputSummary:
    """Summary statistics for a completed run."""
    theoretical_max_throughput_mbps: float
    achieved_throughput_mbps: float
    avg_latency_ms: float
    peak_latency_ms: float
    credited_throughput_mbps: float
    success_ratio: float


def summarize(results: SimulationResults) -> ThroughputSummary:
    """Reduce a run's counters and latency samples to throughput/latency figures."""
    theoretical = results.theoretical_max_mbps
    # Channel clock time: equal to total_duration_s on the serialized Wi-Fi 4 medium,
    # shorter when parallel streams or resource units overlap attempts.
    if results.elapsed_s > 0:
        actual = results.success_count * results.packet_size_bits / results.elapsed_s / 1e6
    else:
        actual = 0.0

    samples = results.latency_samples
    avg_latency = sum(samples) / len(samples) if samples else 0.0
    peak_latency = max(samples) if samples else 0.0
    success_ratio = results.success_count / results.attempt_count if results.attempt_count else 0.0

    return ThroughputSummary(
        theoretical_max_throughput_mbps=theoretical,
        # Short runs can report more than the link can carry.
        achieved_throughput_mbps=min(actual, theoretical),
        avg_latency_ms=avg_latency,
        peak_latency_ms=peak_latency,
        credited_throughput_mbps=results.credited_bits / 1e6,
        success_ratio=success_ratio,
    )


__all__ = ["summarize", "ThroughputSummary"]
