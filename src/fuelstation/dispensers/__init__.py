"""Dispensers package.

Provides the dispenser contract, its pump and charger implementations, and
the manager that routes requests across them.
"""

from fuelstation.dispensers.base import DispenserState, DispenserStatus, IFuelDispenser
from fuelstation.dispensers.electric import ElectricChargingStation
from fuelstation.dispensers.manager import DispenserManager, format_report
from fuelstation.dispensers.standard import HighVolumeDispenser, StandardFuelDispenser

__all__ = [
    "DispenserManager",
    "DispenserState",
    "DispenserStatus",
    "ElectricChargingStation",
    "HighVolumeDispenser",
    "IFuelDispenser",
    "StandardFuelDispenser",
    "format_report",
]
