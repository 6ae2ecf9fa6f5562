"""Creates the SimPy env and the seeded RNG a contention run shares.

This module keeps the simulation plumbing tiny but explicit:

* we wrap ``simpy.Environment`` so the runner advances one canonical clock by
  the air time every round consumes;
* we hold the ``random.Random`` instance that every backoff draw, collision
  draw and latency draw of a run goes through, so a seed fully determines the
  outcome;
* we provide a helper for starting the run's process so the runner does not
  have to sprinkle raw SimPy boilerplate around.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

import random
import simpy

ProcessFactory = Callable[[simpy.Environment], simpy.events.Process]


@dataclass
class SimulationEnvironment:
    """Thin wrapper around ``simpy.Environment`` with a seeded RNG.

    Pass ``rng`` to continue an existing random stream (e.g. across the
    client counts of a sweep); otherwise a fresh ``random.Random(seed)`` is
    created.
    """

    seed: Optional[int] = 0
    rng: Optional[random.Random] = None
    env: simpy.Environment = field(init=False)

    def __post_init__(self) -> None:
        self.env = simpy.Environment()
        if self.rng is None:
            self.rng = random.Random(self.seed)

    @property
    def now(self) -> float:
        """Current simulation timestamp (seconds)."""

        return float(self.env.now)

    def timeout(self, duration: float) -> simpy.events.Timeout:
        """Shortcut for ``env.timeout`` to keep call-sites tidy."""

        if duration < 0:
            raise ValueError("Timeout duration must be non-negative")
        return self.env.timeout(duration)

    def start_process(self, generator_factory: ProcessFactory) -> simpy.events.Process:
        """Schedule a process on the wrapped environment.

        ``generator_factory`` receives the underlying SimPy environment and
        must return a generator that can be scheduled.
        """

        return self.env.process(generator_factory(self.env))

    def run(self, until: Optional[float] = None) -> None:
        """Advance the clock until ``until`` or until no events remain."""

        self.env.run(until=until)
