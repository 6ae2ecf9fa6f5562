"""Packet descriptions used to size transmissions."""

from __future__ import annotations

from dataclasses import dataclass, field

from wlansim.errors import InvalidParameterError


@dataclass(frozen=True)
class NetworkPacket:
    """A data unit of ``size_bytes`` sent over ``bandwidth_hz`` at ``modulation`` bits/symbol.

    Parameters are validated on construction so a bad packet never reaches
    a simulation run.
    """

    size_bytes: int
    bandwidth_hz: float
    modulation: float
    packet_type: str = "DATA"
    transmission_time_s: float = field(init=False)

    def __post_init__(self) -> None:
        if self.size_bytes <= 0 or self.bandwidth_hz <= 0 or self.modulation <= 0:
            raise InvalidParameterError(
                f"Invalid packet parameters: size={self.size_bytes}, "
                f"bandwidth={self.bandwidth_hz}, modulation={self.modulation}"
            )
        object.__setattr__(self, "transmission_time_s", (self.size_bytes * 8.0) / (self.bandwidth_hz * self.modulation))

    @property
    def size_bits(self) -> int:
        return self.size_bytes * 8
