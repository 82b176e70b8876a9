"""Fuel inventory package.

Stock records with low-stock detection, exposed through separate reader
and writer interfaces.
"""

from fuelstation.inventory.base import Fuel, IInventoryReader, IInventoryWriter
from fuelstation.inventory.service import DEFAULT_STOCK, InventoryService

__all__ = [
    "DEFAULT_STOCK",
    "Fuel",
    "IInventoryReader",
    "IInventoryWriter",
    "InventoryService",
]
