"""Fuel station domain model.

Interchangeable fuel and energy dispensers behind a shared contract, a
manager that routes requests to them, and the inventory, pricing and
sales services of the station.
"""

__version__ = "0.1.0"
