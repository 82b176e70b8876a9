"""In-memory fuel inventory.

Typical usage:
    inventory = InventoryService()
    inventory.add_fuel(FuelType.DIESEL, 200)
    if inventory.is_low_stock(FuelType.PREMIUM):
        ...
"""

from datetime import datetime
from typing import Any

from fuelstation.core.logging_system import get_logger
from fuelstation.inventory.base import Fuel, IInventoryReader, IInventoryWriter
from fuelstation.models import FuelType

logger = get_logger(__name__)

# Opening stock used when no inventory section is configured
DEFAULT_STOCK: dict[str, dict[str, Any]] = {
    "regular": {
        "name": "Regular Gasoline",
        "available_quantity": 5000.0,
        "minimum_stock_level": 500.0,
        "price_per_liter": 1.25,
    },
    "premium": {
        "name": "Premium Gasoline",
        "available_quantity": 3000.0,
        "minimum_stock_level": 300.0,
        "price_per_liter": 1.45,
    },
    "diesel": {
        "name": "Diesel",
        "available_quantity": 4000.0,
        "minimum_stock_level": 400.0,
        "price_per_liter": 1.35,
    },
}


class InventoryService(IInventoryReader, IInventoryWriter):
    """Stock of liquid fuels held in the station tanks.

    Electricity is not stocked; ``FuelType.ELECTRIC`` behaves like any
    other unknown type here.
    """

    def __init__(self, stock: dict[str, dict[str, Any]] | None = None) -> None:
        """Initialize stock.

        Args:
            stock: Mapping of fuel type name -> record fields, as found under
                ``station.inventory`` in the station config. Defaults to
                ``DEFAULT_STOCK``.

        Example stock:
            {
                "regular": {
                    "name": "Regular Gasoline",
                    "available_quantity": 5000.0,
                    "minimum_stock_level": 500.0,
                    "price_per_liter": 1.25
                }
            }
        """
        self._inventory: dict[FuelType, Fuel] = {}

        records = DEFAULT_STOCK if stock is None else stock
        for index, (type_name, record) in enumerate(records.items(), start=1):
            fuel_type = FuelType.parse(type_name)
            self._inventory[fuel_type] = Fuel(
                id=index,
                fuel_type=fuel_type,
                name=record.get("name", fuel_type.value.title()),
                price_per_liter=float(record.get("price_per_liter", 0.0)),
                available_quantity=float(record.get("available_quantity", 0.0)),
                minimum_stock_level=float(record.get("minimum_stock_level", 0.0)),
            )

    # Reader

    def get_fuel(self, fuel_type: FuelType) -> Fuel | None:
        return self._inventory.get(fuel_type)

    def get_available_quantity(self, fuel_type: FuelType) -> float:
        fuel = self._inventory.get(fuel_type)
        return fuel.available_quantity if fuel else 0.0

    def is_low_stock(self, fuel_type: FuelType) -> bool:
        fuel = self._inventory.get(fuel_type)
        return fuel is not None and fuel.is_low_stock

    def get_low_stock_fuels(self) -> list[Fuel]:
        return [fuel for fuel in self._inventory.values() if fuel.is_low_stock]

    def get_all_fuels(self) -> list[Fuel]:
        return list(self._inventory.values())

    # Writer

    def add_fuel(self, fuel_type: FuelType, quantity: float) -> None:
        fuel = self._inventory.get(fuel_type)
        if fuel is None:
            logger.debug("Ignoring delivery of unstocked fuel %s", fuel_type.value)
            return

        fuel.available_quantity += quantity
        fuel.last_updated = datetime.now()
        logger.info(
            "Added %.2f liters of %s. New total: %.2f",
            quantity,
            fuel_type.value,
            fuel.available_quantity,
        )

    def remove_fuel(self, fuel_type: FuelType, quantity: float) -> bool:
        fuel = self._inventory.get(fuel_type)
        if fuel is None or fuel.available_quantity < quantity:
            return False

        fuel.available_quantity -= quantity
        fuel.last_updated = datetime.now()
        logger.info(
            "Removed %.2f liters of %s. Remaining: %.2f",
            quantity,
            fuel_type.value,
            fuel.available_quantity,
        )

        if fuel.is_low_stock:
            logger.warning(
                "%s is low on stock: %.2f liters left (minimum %.2f)",
                fuel.name,
                fuel.available_quantity,
                fuel.minimum_stock_level,
            )
        return True

    def update_fuel_price(self, fuel_type: FuelType, new_price: float) -> bool:
        fuel = self._inventory.get(fuel_type)
        if fuel is None:
            return False

        old_price = fuel.price_per_liter
        fuel.price_per_liter = new_price
        fuel.last_updated = datetime.now()
        logger.info(
            "Updated %s price from %.2f to %.2f per liter", fuel_type.value, old_price, new_price
        )
        return True

    def set_minimum_stock_level(self, fuel_type: FuelType, minimum_level: float) -> None:
        fuel = self._inventory.get(fuel_type)
        if fuel is None:
            return

        fuel.minimum_stock_level = minimum_level
        logger.info("Set minimum stock level for %s to %.2f liters", fuel_type.value, minimum_level)
