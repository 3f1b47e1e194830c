"""Shared test fixtures: the vehicles from the standard walkthrough."""

from __future__ import annotations

import pytest

from motorpool.config import FleetConfig
from motorpool.vehicles import Car, ElectricCar, Motorcycle


@pytest.fixture
def car() -> Car:
    return Car(make="Toyota", model="Camry", year=2022, mileage=15_000)


@pytest.fixture
def electric_car() -> ElectricCar:
    return ElectricCar(
        make="Tesla",
        model="Model 3",
        year=2023,
        mileage=5_000,
        battery_level=85,
        range=300,
    )


@pytest.fixture
def motorcycle() -> Motorcycle:
    return Motorcycle(make="Harley-Davidson", model="Street 750", year=2020)


@pytest.fixture
def fleet_config() -> FleetConfig:
    return FleetConfig()
