"""Forecourt fuel pumps.

``StandardFuelDispenser`` implements the dispenser contract directly.
``HighVolumeDispenser`` specialises it for truck lanes: it refuses small
requests and runs a safety check before starting, then hands over to the
standard behaviour so counters and state transitions stay identical.

Typical usage:
    pump = StandardFuelDispenser(1, FuelType.REGULAR)
    pump.dispense_fuel(40.0)
    pump.stop_dispensing()
"""

from typing import Any

from fuelstation.core.logging_system import LoggerMixin
from fuelstation.dispensers.base import (
    DispenserState,
    IFuelDispenser,
    check_quantity,
    config_flag,
)
from fuelstation.models import FuelType


class StandardFuelDispenser(LoggerMixin, IFuelDispenser):
    """Standard pump delivering one liquid fuel type.

    Features:
    - Up to ``max_dispense_rate`` litres per operation (default 50)
    - Implicit start on the first dispense of a session
    - Operational flag controlled from configuration
    """

    DEFAULT_MAX_RATE = 50.0

    def __init__(
        self,
        pump_number: int,
        supported_fuel_type: FuelType,
        max_dispense_rate: float = DEFAULT_MAX_RATE,
        operational: bool = True,
    ) -> None:
        self._pump_number = pump_number
        self._fuel_type = supported_fuel_type
        self._max_dispense_rate = float(max_dispense_rate)
        self._operational = operational
        self._total_dispensed = 0.0
        self._is_dispensing = False
        self.attach_logger(__name__)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "StandardFuelDispenser":
        """Build a pump from a station config entry.

        Example config:
            {"pump_number": 1, "fuel_type": "regular", "max_dispense_rate": 50.0}
        """
        return cls(
            pump_number=int(config["pump_number"]),
            supported_fuel_type=FuelType.parse(config["fuel_type"]),
            max_dispense_rate=config.get("max_dispense_rate", cls.DEFAULT_MAX_RATE),
            operational=config_flag(config, "operational", True),
        )

    @property
    def pump_number(self) -> int:
        return self._pump_number

    @property
    def supported_fuel_type(self) -> FuelType:
        return self._fuel_type

    @property
    def is_operational(self) -> bool:
        return self._operational

    @property
    def max_dispense_rate(self) -> float:
        return self._max_dispense_rate

    @property
    def state(self) -> DispenserState:
        if not self._operational:
            return DispenserState.OUT_OF_SERVICE
        return DispenserState.ACTIVE if self._is_dispensing else DispenserState.IDLE

    def dispense_fuel(self, quantity: float) -> bool:
        check_quantity(quantity)

        if not self._operational:
            self.log_debug("Pump %d: rejected %.2f L, out of service", self._pump_number, quantity)
            return False

        if not 0 < quantity <= self._max_dispense_rate:
            self.log_debug(
                "Pump %d: rejected %.2f L, outside (0, %.2f]",
                self._pump_number,
                quantity,
                self._max_dispense_rate,
            )
            return False

        if not self._is_dispensing and not self.start_dispensing():
            return False

        self._total_dispensed += float(quantity)
        self.log_info(
            "Pump %d: dispensed %.2f liters of %s", self._pump_number, quantity, self._fuel_type.value
        )
        return True

    def start_dispensing(self) -> bool:
        if not self._operational or self._is_dispensing:
            return False

        self._is_dispensing = True
        self.log_info("Pump %d: started dispensing %s", self._pump_number, self._fuel_type.value)
        return True

    def stop_dispensing(self) -> bool:
        if not self._is_dispensing:
            return False

        self._is_dispensing = False
        self.log_info("Pump %d: stopped dispensing", self._pump_number)
        return True

    def get_total_dispensed(self) -> float:
        return self._total_dispensed

    def reset_counter(self) -> None:
        self._total_dispensed = 0.0
        self.log_info("Pump %d: counter reset", self._pump_number)

    def set_operational(self, operational: bool) -> None:
        if not operational and self._is_dispensing:
            self.stop_dispensing()
        self._operational = operational
        self.log_info(
            "Pump %d: %s", self._pump_number, "operational" if operational else "out of service"
        )


class HighVolumeDispenser(StandardFuelDispenser):
    """High-volume pump for trucks and fleet vehicles.

    Accepts everything the standard pump accepts, except requests below
    ``minimum_dispense_quantity`` (default 10 L). Accepted requests go
    through the standard implementation unchanged.
    """

    DEFAULT_MAX_RATE = 100.0
    DEFAULT_MINIMUM_QUANTITY = 10.0

    def __init__(
        self,
        pump_number: int,
        supported_fuel_type: FuelType,
        max_dispense_rate: float = DEFAULT_MAX_RATE,
        minimum_dispense_quantity: float = DEFAULT_MINIMUM_QUANTITY,
        operational: bool = True,
    ) -> None:
        super().__init__(pump_number, supported_fuel_type, max_dispense_rate, operational)
        self._minimum_dispense_quantity = float(minimum_dispense_quantity)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "HighVolumeDispenser":
        """Build a high-volume pump from a station config entry.

        Example config:
            {"pump_number": 2, "fuel_type": "diesel",
             "max_dispense_rate": 80.0, "minimum_dispense_quantity": 15.0}
        """
        return cls(
            pump_number=int(config["pump_number"]),
            supported_fuel_type=FuelType.parse(config["fuel_type"]),
            max_dispense_rate=config.get("max_dispense_rate", cls.DEFAULT_MAX_RATE),
            minimum_dispense_quantity=config.get(
                "minimum_dispense_quantity", cls.DEFAULT_MINIMUM_QUANTITY
            ),
            operational=config_flag(config, "operational", True),
        )

    @property
    def minimum_dispense_quantity(self) -> float:
        return self._minimum_dispense_quantity

    def dispense_fuel(self, quantity: float) -> bool:
        check_quantity(quantity)

        if quantity < self._minimum_dispense_quantity:
            self.log_info(
                "Pump %d: high-volume dispenser requires minimum %.2f liters",
                self.pump_number,
                self._minimum_dispense_quantity,
            )
            return False

        return super().dispense_fuel(quantity)

    def start_dispensing(self) -> bool:
        if not self.perform_safety_check():
            self.log_warning("Pump %d: safety check failed, cannot start dispensing", self.pump_number)
            return False

        return super().start_dispensing()

    def perform_safety_check(self) -> bool:
        """Pre-start checks for high-flow delivery.

        The station has no sensors to consult, so this passes; subclasses
        wired to real interlocks override it.
        """
        self.log_debug("Pump %d: performing enhanced safety checks", self.pump_number)
        return True
