"""Configuration models and loader."""

from motorpool.config.fleet import (
    CarSpec,
    ElectricCarSpec,
    FleetConfig,
    MotorcycleSpec,
    VehicleSpec,
    build_fleet,
    build_vehicle,
)
from motorpool.config.loader import load_fleet_config

__all__ = [
    "CarSpec",
    "ElectricCarSpec",
    "MotorcycleSpec",
    "VehicleSpec",
    "FleetConfig",
    "build_vehicle",
    "build_fleet",
    "load_fleet_config",
]
