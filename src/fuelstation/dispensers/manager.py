"""Dispenser manager: routes fuel requests to operational units.

The manager only knows the ``IFuelDispenser`` contract. Any mix of
standard pumps, high-volume lanes and chargers can be registered and is
handled the same way.

Typical usage:
    manager = DispenserManager()
    manager.add_dispenser(StandardFuelDispenser(1, FuelType.REGULAR))
    manager.process_fuel_request(FuelType.REGULAR, 40.0)
    print(format_report(manager.generate_report()))
"""

from collections import defaultdict

from fuelstation.core.logging_system import get_logger
from fuelstation.dispensers.base import DispenserStatus, IFuelDispenser, check_quantity
from fuelstation.models import FuelType

logger = get_logger(__name__)


class DispenserManager:
    """Collection of dispensers with first-match request routing.

    Selection policy: the first registered unit (in registration order)
    that serves the requested fuel type and is operational. Pump numbers are
    not checked for uniqueness.
    """

    def __init__(self) -> None:
        self._dispensers: list[IFuelDispenser] = []

    def add_dispenser(self, dispenser: IFuelDispenser) -> None:
        """Register a dispenser. Duplicate pump numbers are accepted."""
        self._dispensers.append(dispenser)
        logger.info(
            "Added %s (Pump %d) for %s",
            type(dispenser).__name__,
            dispenser.pump_number,
            dispenser.supported_fuel_type.value,
        )

    @property
    def dispensers(self) -> list[IFuelDispenser]:
        return list(self._dispensers)

    def find_available_dispenser(self, fuel_type: FuelType) -> IFuelDispenser | None:
        """Return the first operational dispenser for ``fuel_type``, if any."""
        if not isinstance(fuel_type, FuelType):
            raise TypeError(f"fuel_type must be a FuelType, got {type(fuel_type).__name__}")

        return next(
            (
                d
                for d in self._dispensers
                if d.supported_fuel_type == fuel_type and d.is_operational
            ),
            None,
        )

    def process_fuel_request(self, fuel_type: FuelType, quantity: float) -> bool:
        """Serve a complete request on the first suitable dispenser.

        The selected unit dispenses and, on success, is stopped straight
        away, so it is idle again when this returns.

        Args:
            fuel_type: Requested commodity
            quantity: Amount in litres (kWh for electric)

        Returns:
            True if dispensed. False if no operational unit serves the
            fuel type or the selected unit rejected the quantity.
        """
        check_quantity(quantity)

        dispenser = self.find_available_dispenser(fuel_type)
        if dispenser is None:
            logger.warning("No operational dispenser available for %s", fuel_type.value)
            return False

        logger.info("Processing fuel request using Pump %d", dispenser.pump_number)
        success = dispenser.dispense_fuel(quantity)

        if success:
            dispenser.stop_dispensing()

        return success

    def generate_report(self) -> list[DispenserStatus]:
        """Snapshot every dispenser, in registration order."""
        return [dispenser.get_status() for dispenser in self._dispensers]

    def get_dispensers_by_fuel_type(self, fuel_type: FuelType) -> list[IFuelDispenser]:
        """All registered dispensers for ``fuel_type``, operational or not."""
        return [d for d in self._dispensers if d.supported_fuel_type == fuel_type]

    def get_total_dispensed_by_fuel_type(self) -> dict[FuelType, float]:
        """Sum the counters of all dispensers per fuel type."""
        totals: dict[FuelType, float] = defaultdict(float)
        for dispenser in self._dispensers:
            totals[dispenser.supported_fuel_type] += dispenser.get_total_dispensed()
        return dict(totals)


def format_report(report: list[DispenserStatus]) -> str:
    """Render a status report as console text."""
    lines = ["=== Dispenser Status Report ==="]

    for status in report:
        lines.append(f"Pump {status.pump_number} ({status.fuel_type.value}, {status.kind}):")
        lines.append(f"  Status: {'Operational' if status.is_operational else 'Out of Service'}")
        lines.append(f"  Total Dispensed: {status.total_dispensed:.2f}")
        lines.append(f"  Max Rate: {status.max_dispense_rate:.2f}")

    return "\n".join(lines)
