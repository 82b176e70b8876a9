"""Base classes for fuel and energy dispensers.

This module defines the contract every dispensing unit satisfies. Code
that routes requests (``DispenserManager``) depends only on
``IFuelDispenser``, so a pump, a high-volume truck lane and an EV charger
can be swapped for each other.

Typical usage:
    class MyDispenser(IFuelDispenser):
        def dispense_fuel(self, quantity: float) -> bool:
            # Validate, implicitly start, add to the counter
            ...

All rejections (out of service, bad quantity, redundant transition) are
reported as ``False`` returns rather than exceptions.
"""

import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from fuelstation.models import FuelType


class DispenserState(Enum):
    """Lifecycle state of a dispensing unit.

    IDLE -> ACTIVE via start (or implicitly on dispense), ACTIVE -> IDLE via
    stop. OUT_OF_SERVICE is entered and left only through configuration and
    blocks start and dispense.
    """

    IDLE = "idle"
    ACTIVE = "active"
    OUT_OF_SERVICE = "out_of_service"


@dataclass(frozen=True)
class DispenserStatus:
    """Point-in-time snapshot of one dispenser for status reports.

    Attributes:
        pump_number: Pump identifier (not guaranteed unique)
        fuel_type: Commodity the unit delivers
        is_operational: Whether the unit may serve requests
        state: Current lifecycle state
        total_dispensed: Cumulative counter since last reset
        max_dispense_rate: Largest quantity accepted per operation
        kind: Implementation class name (e.g. "HighVolumeDispenser")
    """

    pump_number: int
    fuel_type: FuelType
    is_operational: bool
    state: DispenserState
    total_dispensed: float
    max_dispense_rate: float
    kind: str


def check_quantity(quantity: object) -> None:
    """Reject quantities that are not real numbers.

    Range problems (zero, negative, above the rate) are not errors; callers
    turn those into ``False`` returns.

    Raises:
        TypeError: If quantity is not an int/float/Decimal-like number.
    """
    if isinstance(quantity, bool) or not isinstance(quantity, (numbers.Real, Decimal)):
        raise TypeError(f"Dispense quantity must be a number, got {type(quantity).__name__}")


def config_flag(config: dict[str, Any], key: str, default: bool) -> bool:
    """Read a boolean from a dispenser config entry.

    Quoted YAML values such as ``"false"`` are rejected rather than
    read as truthy strings.

    Raises:
        ValueError: If the value is present but not a boolean.
    """
    value = config.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be true or false, got {value!r}")
    return value


class IFuelDispenser(ABC):
    """Abstract base class for dispensing units.

    Implementations differ in limits and preconditions but must keep the
    shared guarantees:
    - A request with 0 < quantity <= max_dispense_rate on an operational
      unit succeeds unless the implementation documents a stricter
      precondition.
    - The cumulative counter only grows, except on reset_counter().
    - A non-operational unit rejects start and dispense requests.

    Example implementations:
        - StandardFuelDispenser: forecourt pump, 50 L per operation
        - HighVolumeDispenser: truck lane with a minimum quantity
        - ElectricChargingStation: EV charger, quantities in kWh
    """

    @property
    @abstractmethod
    def pump_number(self) -> int:
        """Pump identifier."""

    @property
    @abstractmethod
    def supported_fuel_type(self) -> FuelType:
        """Commodity this unit delivers."""

    @property
    @abstractmethod
    def is_operational(self) -> bool:
        """Whether the unit may serve requests."""

    @property
    @abstractmethod
    def max_dispense_rate(self) -> float:
        """Largest quantity accepted by a single dispense operation."""

    @property
    @abstractmethod
    def state(self) -> DispenserState:
        """Current lifecycle state."""

    @abstractmethod
    def dispense_fuel(self, quantity: float) -> bool:
        """Dispense ``quantity`` units of the supported commodity.

        Starts the unit first if it is idle.

        Args:
            quantity: Amount to deliver (litres or kWh)

        Returns:
            True if delivered and added to the counter, False if the unit is
            out of service or quantity is not in (0, max_dispense_rate].

        Raises:
            TypeError: If quantity is not a number.
        """

    @abstractmethod
    def start_dispensing(self) -> bool:
        """Move from IDLE to ACTIVE.

        Returns:
            False if already active or out of service.
        """

    @abstractmethod
    def stop_dispensing(self) -> bool:
        """Move from ACTIVE to IDLE.

        Returns:
            False (and no change) if the unit is already idle.
        """

    @abstractmethod
    def get_total_dispensed(self) -> float:
        """Return the cumulative counter."""

    @abstractmethod
    def reset_counter(self) -> None:
        """Set the cumulative counter to zero."""

    @abstractmethod
    def set_operational(self, operational: bool) -> None:
        """Put the unit in or out of service.

        Taking an active unit out of service stops it first.
        """

    def get_status(self) -> DispenserStatus:
        """Snapshot this unit for reporting."""
        return DispenserStatus(
            pump_number=self.pump_number,
            fuel_type=self.supported_fuel_type,
            is_operational=self.is_operational,
            state=self.state,
            total_dispensed=self.get_total_dispensed(),
            max_dispense_rate=self.max_dispense_rate,
            kind=type(self).__name__,
        )
