"""Medium access models for Wi-Fi 4, 5 and 6.

Every model answers the same question for the runner: given station ``i`` and
the shared channel, what happened on this transmission opportunity? The
answer always comes back as an :class:`AttemptOutcome` so the runner and the
metrics collector stay generation-agnostic.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Sequence, Type

from wlansim.errors import InvalidConfigurationError
from wlansim.mac.backoff import Station
from wlansim.mac.channel import ChannelState
from wlansim.phy_profiles import PHY_PROFILES, PHYProfile


@dataclass(frozen=True)
class AttemptOutcome:
    succeeded: bool
    latency_ms: float = 0.0
    duration_s: float = 0.0
    credit_bits: float = 0.0


class AccessModel(ABC):
    """Base class for a generation's channel access scheme."""

    generation: int = 0
    # Wi-Fi 4 treats a lone client as contention free.
    ideal_single_station: bool = False

    def __init__(self, profile: PHYProfile) -> None:
        self.profile = profile
        self.ideal_duration_s = profile.ideal_duration_s
        self.station_count = 0

    @abstractmethod
    def register_stations(self, station_count: int, rng: random.Random) -> None:
        """Create fresh per-station state for a run."""

    @abstractmethod
    def attempt(self, station_index: int, channel: ChannelState, rng: random.Random) -> AttemptOutcome:
        pass

    def ideal_attempt(self) -> AttemptOutcome:
        return AttemptOutcome(
            succeeded=True,
            latency_ms=self.ideal_duration_s * 1000,
            duration_s=self.ideal_duration_s,
        )

    def round_duration(self, durations: Sequence[float]) -> float:
        """Channel time a round occupies given its attempts' durations."""
        # Serialized medium: attempts happen one after another.
        return sum(durations)

    def theoretical_max_mbps(self) -> float:
        return self.profile.transfer_rate_bps / 1e6


class CsmaCaBackoff(AccessModel):
    """Wi-Fi 4: stations take turns on one channel with exponential backoff."""

    generation = 4
    ideal_single_station = True
    contention_delay_draws = 50

    def __init__(self, profile: PHYProfile) -> None:
        super().__init__(profile)
        self.stations: List[Station] = []
        self.congestion = 0.0

    def register_stations(self, station_count: int, rng: random.Random) -> None:
        self.station_count = station_count
        self.stations = [Station(i, rng) for i in range(station_count)]
        self.congestion = self.profile.congestion_factor(station_count)

    def attempt(self, station_index: int, channel: ChannelState, rng: random.Random) -> AttemptOutcome:
        station = self.stations[station_index]
        contention_delay_ms = rng.randrange(self.contention_delay_draws) * 0.001
        latency_ms = contention_delay_ms + station.backoff_interval_ms

        succeeded, latency_ms = station.attempt(channel, latency_ms, self.congestion, rng)
        if succeeded:
            latency_ms += self.ideal_duration_s * 1000
        # Failed attempts still burn contention and backoff time.
        return AttemptOutcome(succeeded=succeeded, latency_ms=latency_ms, duration_s=latency_ms / 1000)


class MuMimoBackoff(CsmaCaBackoff):
    """Wi-Fi 5: same backoff per station, but stations transmit on parallel spatial streams."""

    generation = 5
    ideal_single_station = False

    def attempt(self, station_index: int, channel: ChannelState, rng: random.Random) -> AttemptOutcome:
        station = self.stations[station_index]
        succeeded, latency_ms = station.attempt(channel, 0.0, self.congestion, rng)
        if not succeeded:
            return AttemptOutcome(succeeded=False, duration_s=station.backoff_interval_ms / 1000)
        return AttemptOutcome(
            succeeded=True,
            latency_ms=latency_ms,
            duration_s=latency_ms / 1000 + self.ideal_duration_s,
            credit_bits=self.profile.transfer_rate_bps,
        )

    def round_duration(self, durations: Sequence[float]) -> float:
        return max(durations, default=0.0)

    def theoretical_max_mbps(self) -> float:
        streams = min(max(self.station_count, 1), self.profile.max_spatial_streams)
        return self.profile.transfer_rate_bps * streams / 1e6


class OfdmaStation:
    """Wi-Fi 6 client; holds the sub-channel it was given for the current attempt."""

    def __init__(self, station_id: int) -> None:
        self.station_id = station_id
        self.allocated_sub_channel = -1

    def allocate_sub_channel(self, sub_channel: int) -> None:
        self.allocated_sub_channel = sub_channel

    def attempt(self, channel: ChannelState, sub_channel_index: int) -> bool:
        if self.allocated_sub_channel == sub_channel_index and channel.is_free():
            channel.occupy()
            return True
        return False


class OfdmaRoundRobin(AccessModel):
    """Wi-Fi 6: deterministic round-robin over the sub-channel space.

    ``sub_channel_index`` is one counter shared by all stations. It advances
    after every attempt and carries over from one round to the next.
    """

    generation = 6
    latency_draws = 100

    def __init__(self, profile: PHYProfile) -> None:
        super().__init__(profile)
        self.stations: List[OfdmaStation] = []
        self.sub_channel_index = 0
        self.credit_bits = 0.0
        self.slot_duration_s = 0.0

    def register_stations(self, station_count: int, rng: random.Random) -> None:
        self.station_count = station_count
        self.stations = [OfdmaStation(i) for i in range(station_count)]
        self.sub_channel_index = 0
        self.credit_bits = (
            (self.profile.bandwidth_hz / station_count) * self.profile.bits_per_symbol * self.profile.coding_rate
        )
        # Each resource unit carries 1/n of the channel, so a full packet takes n times longer.
        self.slot_duration_s = self.profile.packet_size_bits / self.credit_bits

    def attempt(self, station_index: int, channel: ChannelState, rng: random.Random) -> AttemptOutcome:
        station = self.stations[station_index]
        index = self.sub_channel_index
        station.allocate_sub_channel(index)
        succeeded = station.attempt(channel, index)
        self.sub_channel_index = (index + 1) % self.profile.sub_channels

        if not succeeded:
            return AttemptOutcome(succeeded=False, duration_s=self.slot_duration_s)
        channel.release()
        return AttemptOutcome(
            succeeded=True,
            latency_ms=rng.randrange(self.latency_draws) * 0.1,
            duration_s=self.slot_duration_s,
            credit_bits=self.credit_bits,
        )

    def round_duration(self, durations: Sequence[float]) -> float:
        return max(durations, default=0.0)


ACCESS_MODELS: Dict[str, Type[AccessModel]] = {
    "csma_ca": CsmaCaBackoff,
    "mu_mimo": MuMimoBackoff,
    "ofdma": OfdmaRoundRobin,
}


def create_access_model(generation: int, profile: PHYProfile | None = None) -> AccessModel:
    """Instantiate the access model for ``generation`` (4, 5 or 6)."""
    if profile is None:
        if generation not in PHY_PROFILES:
            raise InvalidConfigurationError(f"Unknown Wi-Fi generation {generation!r}; expected one of 4, 5, 6")
        profile = PHY_PROFILES[generation]
    return ACCESS_MODELS[profile.access_method](profile)
