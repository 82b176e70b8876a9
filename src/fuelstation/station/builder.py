"""Station builder for loading a station from YAML configuration.

Dispenser kinds are resolved through a ``ComponentRegistry`` handed to the
builder, so new dispenser types can be added without touching this module.

Example config:
    station:
      name: Main Street
      dispensers:
        - kind: standard
          pump_number: 1
          fuel_type: regular
        - kind: electric
          pump_number: 3
          max_dispense_rate: 120.0
      prices:
        electric: 0.35

Typical usage:
    builder = StationBuilder()
    station = builder.build("config/station.yaml")
"""

from pathlib import Path
from typing import Any

from fuelstation.core.config import ConfigError, ConfigLoader
from fuelstation.core.logging_system import get_logger
from fuelstation.core.registry import ComponentRegistry, RegistryError
from fuelstation.dispensers.base import IFuelDispenser
from fuelstation.dispensers.electric import ElectricChargingStation
from fuelstation.dispensers.manager import DispenserManager
from fuelstation.dispensers.standard import HighVolumeDispenser, StandardFuelDispenser
from fuelstation.inventory.service import InventoryService
from fuelstation.models import FuelType
from fuelstation.pricing.price_manager import PriceManager
from fuelstation.station.station import Station

logger = get_logger(__name__)

OPENING_PRICE_AUTHOR = "system"


def create_default_registry() -> ComponentRegistry:
    """Return a new registry holding the built-in dispenser kinds."""
    registry = ComponentRegistry()
    registry.register("standard", StandardFuelDispenser.from_config)
    registry.register("high_volume", HighVolumeDispenser.from_config)
    registry.register("electric", ElectricChargingStation.from_config)
    return registry


class StationBuilder:
    """Builder for constructing stations from configuration.

    The builder handles:
    - Loading the station YAML file
    - Creating each dispenser through the registry
    - Setting up opening stock and opening prices

    Examples:
        >>> builder = StationBuilder(create_default_registry())
        >>> station = builder.build("config/station.yaml")
    """

    def __init__(self, registry: ComponentRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()

    def build(self, config_path: str | Path) -> Station:
        """Build a station from a YAML configuration file.

        Raises:
            ConfigError: If the file is missing, invalid, or has no
                ``station`` section.
            RegistryError: If a dispenser entry cannot be built.
        """
        logger.info("Loading station from: %s", config_path)
        config = ConfigLoader.load(config_path)
        return self.build_from_config(config)

    def build_from_config(self, config: ConfigLoader) -> Station:
        station_config = config.get_section("station")
        name = station_config.get("name", "Unnamed Station")

        manager = self.build_dispenser_manager(station_config.get("dispensers") or [])
        if not manager.dispensers:
            logger.warning("No dispensers configured for station '%s'", name)

        inventory = self._build_inventory(station_config.get("inventory"))
        prices = PriceManager()

        # Opening prices give the history a baseline for later changes
        for fuel in inventory.get_all_fuels():
            prices.update_price(
                fuel.fuel_type, fuel.price_per_liter, OPENING_PRICE_AUTHOR, "Opening price"
            )
        for type_name, value in _mapping(station_config, "prices").items():
            fuel_type = self._parse_fuel_type(type_name)
            price = self._parse_price(type_name, value)
            inventory.update_fuel_price(fuel_type, price)
            prices.update_price(fuel_type, price, OPENING_PRICE_AUTHOR, "Configured price")

        logger.info("Station '%s' built with %d dispensers", name, len(manager.dispensers))
        return Station(name, manager, inventory=inventory, prices=prices)

    def build_dispenser_manager(self, dispenser_configs: list[dict[str, Any]]) -> DispenserManager:
        """Create a manager holding one dispenser per config entry, in order."""
        manager = DispenserManager()
        for entry in dispenser_configs:
            manager.add_dispenser(self._create_dispenser(entry))
        return manager

    def _create_dispenser(self, entry: dict[str, Any]) -> IFuelDispenser:
        if not isinstance(entry, dict) or "kind" not in entry:
            raise RegistryError(f"Dispenser entry needs a 'kind': {entry!r}")

        return self.registry.create(entry["kind"], entry)

    @staticmethod
    def _build_inventory(stock: Any) -> InventoryService:
        if stock is not None and not isinstance(stock, dict):
            raise ConfigError(f"'inventory' must be a mapping of fuel types, got {stock!r}")

        try:
            return InventoryService(stock)
        except (ValueError, TypeError, AttributeError) as e:
            raise ConfigError(f"Invalid inventory configuration: {e}") from e

    @staticmethod
    def _parse_fuel_type(type_name: str) -> FuelType:
        try:
            return FuelType.parse(type_name)
        except ValueError as e:
            raise ConfigError(str(e)) from e

    @staticmethod
    def _parse_price(type_name: str, value: Any) -> float:
        try:
            return float(value)
        except (ValueError, TypeError) as e:
            raise ConfigError(f"Invalid price for {type_name}: {value!r}") from e


def _mapping(section: dict[str, Any], key: str) -> dict[str, Any]:
    value = section.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be a mapping, got {value!r}")
    return value
