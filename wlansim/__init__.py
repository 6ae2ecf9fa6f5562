"""Wi-Fi 4/5/6 medium access contention simulator built on SimPy."""

from wlansim.errors import InvalidConfigurationError, InvalidParameterError, WlanSimError
from wlansim.phy_profiles import PHY_PROFILES, WIFI4_PHY, WIFI5_PHY, WIFI6_PHY

__all__ = [
    "PHY_PROFILES",
    "WIFI4_PHY",
    "WIFI5_PHY",
    "WIFI6_PHY",
    "InvalidConfigurationError",
    "InvalidParameterError",
    "WlanSimError",
]
