"""motorpool: a vehicle class hierarchy for teaching object-oriented design."""

from motorpool.models.events import VehicleEvent
from motorpool.vehicles import Car, Drivable, ElectricCar, Motorcycle, Vehicle

__version__ = "0.1.0"

__all__ = [
    "Vehicle",
    "Drivable",
    "Car",
    "ElectricCar",
    "Motorcycle",
    "VehicleEvent",
    "__version__",
]
