"""Per-station CSMA/CA backoff state machine shared by Wi-Fi 4 and Wi-Fi 5."""

from __future__ import annotations

import logging
import random
from typing import Tuple

from wlansim.mac.channel import ChannelState

logger = logging.getLogger(__name__)

BACKOFF_SLOT_RANGE = (1, 21)
MAX_BACKOFF_MS = 450.0
# A collision is drawn as randrange(150) < congestion * 100.
COLLISION_SAMPLE_SPACE = 150


class Station:
    """One contending client.

    ``backoff_interval_ms`` is ``min(r * 2**collision_count, 450)`` for a
    fresh draw ``r`` in ``[1, 21]``, drawn at construction and after every
    collision. A success clears ``collision_count`` but keeps the current
    interval. After a collision the station sits out exactly one attempt
    (``waiting``) before it recontends.
    """

    def __init__(self, station_id: int, rng: random.Random) -> None:
        self.station_id = station_id
        self.collision_count = 0
        self.waiting = False
        self.backoff_interval_ms = 0.0
        self.reset_backoff(rng)

    def reset_backoff(self, rng: random.Random) -> None:
        slots = rng.randint(*BACKOFF_SLOT_RANGE)
        self.backoff_interval_ms = min(slots * 2 ** self.collision_count, MAX_BACKOFF_MS)

    def attempt(
        self,
        channel: ChannelState,
        latency_ms: float,
        congestion_factor: float,
        rng: random.Random,
    ) -> Tuple[bool, float]:
        """Contend for ``channel`` once.

        Returns ``(succeeded, latency_ms)`` where the latency carries the
        backoff interval on success and is returned untouched otherwise.
        ``congestion_factor`` must already be clamped to ``[0, 1]``.
        """
        if self.waiting:
            self.waiting = False
            return False, latency_ms

        collided = rng.randrange(COLLISION_SAMPLE_SPACE) < congestion_factor * 100
        if not collided:
            channel.occupy()
            latency_ms += self.backoff_interval_ms
            self.collision_count = 0
            channel.release()
            return True, latency_ms

        self.collision_count += 1
        self.reset_backoff(rng)
        self.waiting = True
        logger.debug(
            "station %d collided (count=%d, backoff=%.1f ms)",
            self.station_id,
            self.collision_count,
            self.backoff_interval_ms,
        )
        return False, latency_ms

    def __repr__(self) -> str:
        return (
            f"Station(id={self.station_id}, backoff_ms={self.backoff_interval_ms}, "
            f"collisions={self.collision_count}, waiting={self.waiting})"
        )
