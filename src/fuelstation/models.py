"""Shared value types for the fuel station."""

from enum import Enum


class FuelType(Enum):
    """Commodity delivered by a dispenser, stocked, priced and sold.

    Values are the lowercase names used in configuration files.
    """

    REGULAR = "regular"
    PREMIUM = "premium"
    DIESEL = "diesel"
    ELECTRIC = "electric"  # measured in kWh rather than litres

    @classmethod
    def parse(cls, value: "str | FuelType") -> "FuelType":
        """Parse a config value such as ``"diesel"`` or ``"DIESEL"``.

        Raises:
            ValueError: If the value names no fuel type.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown fuel type: {value!r}") from None
