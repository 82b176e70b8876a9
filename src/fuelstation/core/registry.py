"""Component registry for pluggable implementations.

Maps a kind name from configuration (``"standard"``, ``"electric"``...) to
a factory that builds the component from its config mapping. Registries
are plain objects handed to whoever needs them; there is no module-level
default instance.

Typical usage example:
    from fuelstation.core.registry import ComponentRegistry

    registry = ComponentRegistry()
    registry.register("standard", StandardFuelDispenser.from_config)
    dispenser = registry.create("standard", {"pump_number": 1, "fuel_type": "regular"})
"""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Raised when registry operations fail."""


class ComponentRegistry:
    """Registry of named component factories.

    Examples:
        >>> registry = ComponentRegistry()
        >>> registry.register("electric", ElectricChargingStation.from_config)
        >>> station = registry.create("electric", {"pump_number": 3})
    """

    def __init__(self) -> None:
        self._components: dict[str, Callable[[dict[str, Any]], Any]] = {}

    def register(self, name: str, factory: Callable[[dict[str, Any]], Any]) -> None:
        """Register a factory under ``name``.

        Args:
            name: Component kind name.
            factory: Callable taking a config dict and returning an instance.
                Classes and ``from_config`` classmethods both qualify.

        Raises:
            RegistryError: If name is already registered.
        """
        if name in self._components:
            raise RegistryError(f"Component already registered: {name}")

        self._components[name] = factory
        logger.debug("Registered component: %s -> %s", name, _describe(factory))

    def unregister(self, name: str) -> None:
        """Remove a registered factory.

        Raises:
            RegistryError: If name is not registered.
        """
        if name not in self._components:
            raise RegistryError(f"Component not registered: {name}")

        del self._components[name]
        logger.debug("Unregistered component: %s", name)

    def create(self, name: str, config: dict[str, Any]) -> Any:
        """Build a component of kind ``name`` from ``config``.

        Raises:
            RegistryError: If name is not registered or the factory fails.
        """
        if name not in self._components:
            raise RegistryError(f"Component not registered: {name}")

        try:
            return self._components[name](config)
        except (KeyError, TypeError, ValueError) as e:
            raise RegistryError(f"Failed to create component {name}: {e}") from e

    def get(self, name: str) -> Callable[[dict[str, Any]], Any]:
        """Get the factory registered under ``name``.

        Raises:
            RegistryError: If name is not registered.
        """
        if name not in self._components:
            raise RegistryError(f"Component not registered: {name}")

        return self._components[name]

    def is_registered(self, name: str) -> bool:
        return name in self._components

    def list_components(self) -> list[str]:
        return list(self._components.keys())


def _describe(factory: Callable[..., Any]) -> str:
    # Bound classmethods report their class, plain callables their own name
    owner = getattr(factory, "__self__", None)
    if isinstance(owner, type):
        return f"{owner.__name__}.{factory.__name__}"
    return getattr(factory, "__name__", type(factory).__name__)
