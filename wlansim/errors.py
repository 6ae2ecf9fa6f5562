"""Exception types raised by the contention simulator."""

from __future__ import annotations


class WlanSimError(Exception):
    """Base class for every error raised by ``wlansim``."""


class InvalidParameterError(WlanSimError, ValueError):
    """A packet or link parameter is non-positive or otherwise unusable."""


class InvalidConfigurationError(WlanSimError, ValueError):
    """A simulation run was requested with an unusable configuration."""


__all__ = ["WlanSimError", "InvalidParameterError", "InvalidConfigurationError"]
