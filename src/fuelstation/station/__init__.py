"""Station assembly: the Station container and its YAML builder."""

from fuelstation.station.builder import StationBuilder, create_default_registry
from fuelstation.station.station import Station

__all__ = ["Station", "StationBuilder", "create_default_registry"]
