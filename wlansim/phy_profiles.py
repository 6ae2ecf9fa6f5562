"""Link profile definitions for Wi-Fi 4 (802.11n), 5 (802.11ac) and 6 (802.11ax).

These profiles provide the simplified constants the access models need to
derive the ideal per-packet air time, the theoretical throughput ceiling and
the congestion behaviour of each generation. All three share one 20 MHz
channel with 256-QAM and 5/6 coding so runs are directly comparable; what
differs between them is the way stations reach the medium.
"""

from __future__ import annotations

from dataclasses import dataclass

from wlansim.errors import InvalidParameterError
from wlansim.packet import NetworkPacket


@dataclass(frozen=True)
class PHYProfile:
    """Container describing the link characteristics of one generation."""

    generation: int
    name: str
    access_method: str
    bandwidth_hz: float = 20e6
    bits_per_symbol: float = 8.0  # 256-QAM
    coding_rate: float = 5.0 / 6.0
    packet_size_bytes: int = 1024
    congestion_per_client: float = 0.0
    congestion_cap: float = 0.0
    fixed_congestion: float | None = None
    max_spatial_streams: int = 1
    sub_channels: int = 1
    notes: str = ""

    def __post_init__(self) -> None:
        if self.bandwidth_hz <= 0 or self.bits_per_symbol <= 0 or self.coding_rate <= 0:
            raise InvalidParameterError(f"{self.name}: bandwidth, modulation and coding rate must be positive")
        if self.packet_size_bytes <= 0:
            raise InvalidParameterError(f"{self.name}: packet size must be positive")
        if self.max_spatial_streams < 1 or self.sub_channels < 1:
            raise InvalidParameterError(f"{self.name}: stream and sub-channel counts must be at least 1")

    @property
    def transfer_rate_bps(self) -> float:
        return self.bandwidth_hz * self.bits_per_symbol * self.coding_rate

    @property
    def packet_size_bits(self) -> int:
        return self.packet_size_bytes * 8

    def packet(self) -> NetworkPacket:
        """Build the fixed-size data packet every station sends on this link."""
        return NetworkPacket(
            size_bytes=self.packet_size_bytes,
            bandwidth_hz=self.bandwidth_hz,
            modulation=self.bits_per_symbol * self.coding_rate,
        )

    @property
    def ideal_duration_s(self) -> float:
        """Contention-free air time of one packet."""
        return self.packet().transmission_time_s

    def congestion_factor(self, client_count: int) -> float:
        """Collision scale for ``client_count`` stations, clamped to ``[0, 1]``."""
        if self.fixed_congestion is not None:
            factor = self.fixed_congestion
        else:
            factor = min(self.congestion_per_client * client_count, self.congestion_cap)
        return max(0.0, min(factor, 1.0))


WIFI4_PHY = PHYProfile(
    generation=4,
    name="Wi-Fi 4 802.11n",
    access_method="csma_ca",
    congestion_per_client=0.05,
    congestion_cap=0.5,
    notes="Serialized CSMA/CA with binary exponential backoff.",
)

WIFI5_PHY = PHYProfile(
    generation=5,
    name="Wi-Fi 5 802.11ac",
    access_method="mu_mimo",
    fixed_congestion=0.1,
    max_spatial_streams=4,
    notes="MU-MIMO spatial streams; stations contend without serialization.",
)

WIFI6_PHY = PHYProfile(
    generation=6,
    name="Wi-Fi 6 802.11ax",
    access_method="ofdma",
    sub_channels=10,
    notes="Deterministic round-robin OFDMA resource unit scheduling.",
)


PHY_PROFILES = {
    4: WIFI4_PHY,
    5: WIFI5_PHY,
    6: WIFI6_PHY,
}
