"""Medium access layer: shared channel, station backoff and per-generation access models."""

from wlansim.mac.access import (
    ACCESS_MODELS,
    AccessModel,
    AttemptOutcome,
    CsmaCaBackoff,
    MuMimoBackoff,
    OfdmaRoundRobin,
    OfdmaStation,
    create_access_model,
)
from wlansim.mac.backoff import Station
from wlansim.mac.channel import ChannelState

__all__ = [
    "ACCESS_MODELS",
    "AccessModel",
    "AttemptOutcome",
    "ChannelState",
    "CsmaCaBackoff",
    "MuMimoBackoff",
    "OfdmaRoundRobin",
    "OfdmaStation",
    "Station",
    "create_access_model",
]
