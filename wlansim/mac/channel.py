"""Shared medium state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ChannelState:
    """The single frequency channel an access point shares with its stations.

    Holds no air time of its own: whoever occupies it must release it before
    the next station is evaluated.
    """

    channel_id: str = "Default"
    occupied: bool = False

    def is_free(self) -> bool:
        return not self.occupied

    def occupy(self) -> None:
        self.occupied = True

    def release(self) -> None:
        self.occupied = False
