"""EV charging station.

Satisfies the same dispenser contract as the fuel pumps, with quantities
expressed in kWh. Charging-session timing stays on this class and never
leaks into ``IFuelDispenser``.
"""

import time
from typing import Any

from fuelstation.core.logging_system import LoggerMixin
from fuelstation.dispensers.base import (
    DispenserState,
    IFuelDispenser,
    check_quantity,
    config_flag,
)
from fuelstation.models import FuelType


class ElectricChargingStation(LoggerMixin, IFuelDispenser):
    """Charging point delivering electrical energy.

    Features:
    - Always serves ``FuelType.ELECTRIC``
    - Up to ``max_dispense_rate`` kWh per operation (default 150)
    - Measures the duration of each charging session
    """

    DEFAULT_MAX_RATE = 150.0

    def __init__(
        self,
        pump_number: int,
        max_dispense_rate: float = DEFAULT_MAX_RATE,
        operational: bool = True,
    ) -> None:
        self._pump_number = pump_number
        self._max_dispense_rate = float(max_dispense_rate)
        self._operational = operational
        self._total_energy_dispensed = 0.0
        self._is_charging = False
        self._charging_started_at: float | None = None
        self._last_session_seconds: float | None = None
        self.attach_logger(__name__)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "ElectricChargingStation":
        """Build a charger from a station config entry.

        A ``fuel_type`` key, if present, must be ``electric``.

        Example config:
            {"pump_number": 3, "max_dispense_rate": 120.0}
        """
        if "fuel_type" in config and FuelType.parse(config["fuel_type"]) is not FuelType.ELECTRIC:
            raise ValueError(f"Charging station cannot deliver {config['fuel_type']}")

        return cls(
            pump_number=int(config["pump_number"]),
            max_dispense_rate=config.get("max_dispense_rate", cls.DEFAULT_MAX_RATE),
            operational=config_flag(config, "operational", True),
        )

    @property
    def pump_number(self) -> int:
        return self._pump_number

    @property
    def supported_fuel_type(self) -> FuelType:
        return FuelType.ELECTRIC

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
        return DispenserState.ACTIVE if self._is_charging else DispenserState.IDLE

    @property
    def last_session_seconds(self) -> float | None:
        """Duration of the most recently completed charging session."""
        return self._last_session_seconds

    def dispense_fuel(self, quantity: float) -> bool:
        """Deliver ``quantity`` kWh."""
        check_quantity(quantity)

        if not self._operational or not 0 < quantity <= self._max_dispense_rate:
            self.log_debug("Charging station %d: rejected %.2f kWh", self._pump_number, quantity)
            return False

        if not self._is_charging and not self.start_dispensing():
            return False

        self._total_energy_dispensed += float(quantity)
        self.log_info(
            "Charging station %d: delivered %.2f kWh of electricity", self._pump_number, quantity
        )
        return True

    def start_dispensing(self) -> bool:
        if not self._operational or self._is_charging:
            return False

        self._is_charging = True
        self._charging_started_at = time.monotonic()
        self.log_info("Charging station %d: started charging", self._pump_number)
        return True

    def stop_dispensing(self) -> bool:
        if not self._is_charging:
            return False

        self._is_charging = False
        self._last_session_seconds = time.monotonic() - (self._charging_started_at or 0.0)
        self._charging_started_at = None
        self.log_info(
            "Charging station %d: stopped charging after %.1f minutes",
            self._pump_number,
            self._last_session_seconds / 60.0,
        )
        return True

    def get_total_dispensed(self) -> float:
        return self._total_energy_dispensed

    def reset_counter(self) -> None:
        self._total_energy_dispensed = 0.0
        self.log_info("Charging station %d: energy counter reset", self._pump_number)

    def set_operational(self, operational: bool) -> None:
        if not operational and self._is_charging:
            self.stop_dispensing()
        self._operational = operational
        self.log_info(
            "Charging station %d: %s",
            self._pump_number,
            "operational" if operational else "out of service",
        )
