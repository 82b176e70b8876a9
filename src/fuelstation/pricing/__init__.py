"""Fuel pricing package."""

from fuelstation.pricing.price_manager import PriceManager, PriceUpdate

__all__ = ["PriceManager", "PriceUpdate"]
