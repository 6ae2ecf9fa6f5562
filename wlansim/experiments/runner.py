"""Contention run driver and client-count sweep runner."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from wlansim.config import SimulationConfig
from wlansim.environment import SimulationEnvironment
from wlansim.errors import InvalidConfigurationError
from wlansim.mac import AccessModel, ChannelState, create_access_model
from wlansim.metrics import MetricCollector, SimulationResults
from wlansim.utils.stats import ThroughputSummary, summarize

logger = logging.getLogger(__name__)


class SimulationRunner:
    """Plays ``round_count`` rounds of ``station_count`` attempts through an access model.

    All randomness of consecutive runs comes from one ``random.Random``, so a
    runner built with the same seed reproduces the same results.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.last_clock_s = 0.0

    def run(self, access_model: AccessModel, station_count: int, round_count: int) -> SimulationResults:
        if station_count < 1:
            raise InvalidConfigurationError(f"A run needs at least one station, got {station_count}")
        if round_count < 1:
            raise InvalidConfigurationError(f"A run needs at least one round, got {round_count}")

        sim_env = SimulationEnvironment(seed=self.seed, rng=self.rng)
        channel = ChannelState(f"wifi{access_model.generation}_channel")
        metrics = MetricCollector(
            generation=access_model.generation,
            station_count=station_count,
            packet_size_bits=access_model.profile.packet_size_bits,
            theoretical_max_mbps=0.0,
        )
        access_model.register_stations(station_count, sim_env.rng)
        metrics.theoretical_max_mbps = access_model.theoretical_max_mbps()

        logger.info(
            "Wi-Fi %d run: %d station(s), %d round(s) on %s",
            access_model.generation,
            station_count,
            round_count,
            channel.channel_id,
        )
        if station_count == 1 and access_model.ideal_single_station:
            process = self._ideal_rounds(sim_env, access_model, metrics, round_count)
        else:
            process = self._contention_rounds(sim_env, access_model, channel, metrics, station_count, round_count)
        sim_env.start_process(lambda env: process)
        sim_env.run()
        self.last_clock_s = sim_env.now

        results = metrics.snapshot()
        logger.info(
            "Wi-Fi %d run finished: %d/%d attempts succeeded, %.6f s of attempt time over %.6f s of channel time",
            access_model.generation,
            results.success_count,
            results.attempt_count,
            results.total_duration_s,
            results.elapsed_s,
        )
        return results

    def _ideal_rounds(self, sim_env, access_model, metrics, round_count):
        # A lone station never contends; every packet goes out at the ideal air time.
        for _ in range(round_count):
            outcome = access_model.ideal_attempt()
            metrics.record_attempt(outcome)
            metrics.record_round(outcome.duration_s)
            yield sim_env.timeout(outcome.duration_s)

    def _contention_rounds(self, sim_env, access_model, channel, metrics, station_count, round_count):
        for _ in range(round_count):
            durations = []
            # Registration order, every round.
            for index in range(station_count):
                outcome = access_model.attempt(index, channel, sim_env.rng)
                metrics.record_attempt(outcome)
                durations.append(outcome.duration_s)
            elapsed = access_model.round_duration(durations)
            metrics.record_round(elapsed)
            yield sim_env.timeout(elapsed)


@dataclass
class ExperimentResult:
    generation: int
    client_count: int
    results: SimulationResults
    summary: ThroughputSummary


class ExperimentRunner:
    """Runs one generation across every client count of a configuration."""

    def __init__(self, config: SimulationConfig) -> None:
        self.config = config

    def run(self) -> List[ExperimentResult]:
        profile = self.config.profile()
        runner = SimulationRunner(seed=self.config.seed)
        experiments: List[ExperimentResult] = []
        for client_count in self.config.client_counts:
            access_model = create_access_model(self.config.generation, profile)
            results = runner.run(access_model, client_count, self.config.packet_count)
            experiments.append(
                ExperimentResult(
                    generation=self.config.generation,
                    client_count=client_count,
                    results=results,
                    summary=summarize(results),
                )
            )
        return experiments
