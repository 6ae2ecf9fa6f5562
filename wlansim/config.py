"""Configuration dataclasses for the Wi-Fi contention simulation."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from wlansim.errors import InvalidConfigurationError
from wlansim.phy_profiles import PHY_PROFILES, PHYProfile

DEFAULT_CLIENT_COUNTS: Tuple[int, ...] = (1, 10, 100)


@dataclass
class LinkConfig:
    """Optional overrides applied on top of a generation's PHY profile."""

    bandwidth_hz: Optional[float] = None
    bits_per_symbol: Optional[float] = None
    coding_rate: Optional[float] = None
    packet_size_bytes: Optional[int] = None

    def apply(self, profile: PHYProfile) -> PHYProfile:
        overrides = {key: value for key, value in vars(self).items() if value is not None}
        if not overrides:
            return profile
        # replace() re-runs PHYProfile validation on the new values.
        return replace(profile, **overrides)


@dataclass
class SimulationConfig:
    generation: int = 4
    client_counts: Tuple[int, ...] = DEFAULT_CLIENT_COUNTS
    packet_count: int = 100
    seed: Optional[int] = None
    scenario: str = "baseline"
    link: LinkConfig = field(default_factory=LinkConfig)

    def validate(self) -> None:
        if self.generation not in PHY_PROFILES:
            raise InvalidConfigurationError(f"Unknown Wi-Fi generation {self.generation!r}; expected one of 4, 5, 6")
        if not self.client_counts:
            raise InvalidConfigurationError("At least one client count is required")
        if any(count < 1 for count in self.client_counts):
            raise InvalidConfigurationError(f"Client counts must be positive, got {list(self.client_counts)}")
        if self.packet_count < 1:
            raise InvalidConfigurationError(f"Packet count must be positive, got {self.packet_count}")

    def profile(self) -> PHYProfile:
        """PHY profile for the configured generation with link overrides applied."""
        self.validate()
        return self.link.apply(PHY_PROFILES[self.generation])
