"""Vehicle hierarchy: the abstract contract, the Drivable capability and its variants."""

from motorpool.vehicles.base import Drivable, Vehicle, format_quantity
from motorpool.vehicles.car import Car
from motorpool.vehicles.electric import DRIVE_BATTERY_COST, ElectricCar
from motorpool.vehicles.motorcycle import Motorcycle

__all__ = [
    "Vehicle",
    "Drivable",
    "Car",
    "ElectricCar",
    "Motorcycle",
    "DRIVE_BATTERY_COST",
    "format_quantity",
]
