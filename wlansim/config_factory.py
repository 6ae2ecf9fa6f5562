"""Factory helpers to build simulation configurations for scenarios."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import yaml

from wlansim.config import DEFAULT_CLIENT_COUNTS, LinkConfig, SimulationConfig
from wlansim.errors import InvalidConfigurationError

SCENARIOS: Dict[str, tuple] = {
    "baseline": DEFAULT_CLIENT_COUNTS,
    "sparse": (1, 2, 5),
    "dense": (50, 100, 200),
}


def make_config(
    generation: int = 4,
    scenario: str = "baseline",
    packet_count: int = 100,
    client_counts: Optional[Sequence[int]] = None,
    seed: Optional[int] = None,
    link: Optional[LinkConfig] = None,
) -> SimulationConfig:
    if scenario not in SCENARIOS:
        raise InvalidConfigurationError(f"Unknown scenario {scenario!r}; choose from {sorted(SCENARIOS)}")
    counts = tuple(client_counts) if client_counts else SCENARIOS[scenario]

    config = SimulationConfig(
        generation=generation,
        client_counts=counts,
        packet_count=packet_count,
        seed=seed,
        scenario=scenario,
        link=link or LinkConfig(),
    )
    config.validate()
    return config


def load_config(path: str) -> SimulationConfig:
    """Read a scenario file.

    Example::

        generation: 6
        scenario: dense
        packet_count: 200
        seed: 7
        link:
          packet_size_bytes: 1500
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as exc:
        raise InvalidConfigurationError(f"Could not read scenario file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise InvalidConfigurationError(f"Could not parse scenario file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidConfigurationError(f"Scenario file {path} must contain a mapping")
    return config_from_dict(data)


def config_from_dict(data: Dict[str, Any]) -> SimulationConfig:
    link_data = data.get("link") or {}
    unknown = set(link_data) - set(vars(LinkConfig()))
    if unknown:
        raise InvalidConfigurationError(f"Unknown link settings: {sorted(unknown)}")
    try:
        counts = data.get("client_counts")
        return make_config(
            generation=int(data.get("generation", 4)),
            scenario=str(data.get("scenario", "baseline")),
            packet_count=int(data.get("packet_count", 100)),
            client_counts=[int(count) for count in counts] if counts else None,
            seed=data.get("seed"),
            link=LinkConfig(**link_data),
        )
    except InvalidConfigurationError:
        raise
    except (TypeError, ValueError) as exc:
        raise InvalidConfigurationError(f"Invalid scenario settings: {exc}") from exc
