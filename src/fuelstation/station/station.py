"""Station composition: dispensers plus the back-office services.

The Station wires a ``DispenserManager`` to inventory, pricing and sales so
a single call can take a customer from pump to receipt. Each collaborator
is injected, so tests and alternative setups can swap any of them.

Typical usage:
    station = StationBuilder().build("config/station.yaml")
    sale = station.sell_fuel(FuelType.REGULAR, 40.0, PaymentMethod.CASH, "Alice")
"""

from fuelstation.core.logging_system import get_logger
from fuelstation.dispensers.manager import DispenserManager
from fuelstation.inventory.service import InventoryService
from fuelstation.models import FuelType
from fuelstation.pricing.price_manager import PriceManager, PriceUpdate
from fuelstation.sales.base import PaymentMethod, Sale
from fuelstation.sales.service import SalesService

logger = get_logger(__name__)


class Station:
    """A fuel station and its services.

    Examples:
        >>> station = Station("Main Street", DispenserManager())
        >>> station.dispensers.add_dispenser(StandardFuelDispenser(1, FuelType.REGULAR))
        >>> station.sell_fuel(FuelType.REGULAR, 20.0, PaymentMethod.CASH, "Bob")
    """

    def __init__(
        self,
        name: str,
        dispensers: DispenserManager,
        inventory: InventoryService | None = None,
        prices: PriceManager | None = None,
        sales: SalesService | None = None,
    ) -> None:
        self.name = name
        self.dispensers = dispensers
        self.inventory = inventory or InventoryService()
        self.prices = prices or PriceManager()
        self.sales = sales or SalesService()

    def unit_price(self, fuel_type: FuelType) -> float:
        """Selling price per litre (kWh for electric).

        Stocked fuels use the inventory price; anything else falls back to
        the price history.
        """
        fuel = self.inventory.get_fuel(fuel_type)
        if fuel is not None:
            return fuel.price_per_liter
        return self.prices.get_current_price(fuel_type)

    def sell_fuel(
        self,
        fuel_type: FuelType,
        quantity: float,
        payment_method: PaymentMethod,
        customer_name: str,
    ) -> Sale | None:
        """Dispense fuel to a customer and record the sale.

        Stock is checked before dispensing for fuels the inventory tracks.

        Returns:
            The recorded Sale, or None if stock is insufficient, no pump is
            available, or the pump rejected the quantity.
        """
        tracked = self.inventory.get_fuel(fuel_type) is not None
        if tracked and self.inventory.get_available_quantity(fuel_type) < quantity:
            logger.warning(
                "Insufficient %s: requested %.2f, available %.2f",
                fuel_type.value,
                quantity,
                self.inventory.get_available_quantity(fuel_type),
            )
            return None

        # Same first-match choice process_fuel_request makes
        dispenser = self.dispensers.find_available_dispenser(fuel_type)
        if dispenser is None or not self.dispensers.process_fuel_request(fuel_type, quantity):
            return None

        if tracked:
            self.inventory.remove_fuel(fuel_type, quantity)

        return self.sales.process_sale(
            fuel_type,
            quantity,
            self.unit_price(fuel_type),
            payment_method,
            customer_name,
            dispenser.pump_number,
        )

    def update_fuel_price(
        self, fuel_type: FuelType, new_price: float, updated_by: str, reason: str
    ) -> PriceUpdate:
        """Change the selling price and record it in the price history."""
        self.inventory.update_fuel_price(fuel_type, new_price)
        return self.prices.update_price(fuel_type, new_price, updated_by, reason)
