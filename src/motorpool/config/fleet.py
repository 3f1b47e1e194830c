"""Fleet configuration: which vehicles the demonstration builds.

Defaults reproduce the standard walkthrough: a Toyota Camry for the
encapsulation section, then a Honda Accord, a Tesla Model 3 and a
Harley-Davidson Street 750 for the polymorphism section.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from motorpool.vehicles import Car, ElectricCar, Motorcycle, Vehicle


class CarSpec(BaseModel):
    """Constructor arguments for a :class:`Car`."""

    kind: Literal["car"] = "car"
    make: str = Field(default="Toyota", description="Manufacturer")
    model: str = Field(default="Camry", description="Model name")
    year: int = Field(default=2022, description="Model year")
    mileage: float = Field(default=15_000.0, ge=0, description="Initial odometer reading (miles)")

    def build(self) -> Car:
        return Car(**self.model_dump(exclude={"kind"}))


class ElectricCarSpec(BaseModel):
    """Constructor arguments for an :class:`ElectricCar`."""

    kind: Literal["electric_car"] = "electric_car"
    make: str = Field(default="Tesla", description="Manufacturer")
    model: str = Field(default="Model 3", description="Model name")
    year: int = Field(default=2023, description="Model year")
    mileage: float = Field(default=5_000.0, ge=0, description="Initial odometer reading (miles)")
    battery_level: float = Field(default=85.0, ge=0, le=100, description="Initial state of charge (%)")
    range: float = Field(default=300.0, gt=0, description="Rated range (miles)")

    def build(self) -> ElectricCar:
        return ElectricCar(**self.model_dump(exclude={"kind"}))


class MotorcycleSpec(BaseModel):
    """Constructor arguments for a :class:`Motorcycle`."""

    kind: Literal["motorcycle"] = "motorcycle"
    make: str = Field(default="Harley-Davidson", description="Manufacturer")
    model: str = Field(default="Street 750", description="Model name")
    year: int = Field(default=2020, description="Model year")

    def build(self) -> Motorcycle:
        return Motorcycle(**self.model_dump(exclude={"kind"}))


VehicleSpec = Annotated[
    Union[CarSpec, ElectricCarSpec, MotorcycleSpec],
    Field(discriminator="kind"),
]


def _default_fleet() -> list[VehicleSpec]:
    return [
        CarSpec(make="Honda", model="Accord", year=2021, mileage=20_000),
        ElectricCarSpec(),
        MotorcycleSpec(),
    ]


class FleetConfig(BaseModel):
    """Complete input bundle for one demonstration run."""

    showcase: CarSpec = Field(
        default_factory=CarSpec,
        description="Car used to demonstrate accessors and mileage validation",
    )
    invalid_mileage: float = Field(
        default=-500.0, lt=0,
        description="Rejected mileage assigned to the showcase car",
    )
    vehicles: list[VehicleSpec] = Field(
        default_factory=_default_fleet,
        description="Vehicles iterated through the shared Vehicle interface",
    )
    electric_drives: int = Field(
        default=2, ge=0,
        description="Drives performed on the first electric car in the specialised section",
    )


def build_vehicle(spec: VehicleSpec) -> Vehicle:
    """Instantiate the vehicle described by ``spec``."""
    return spec.build()


def build_fleet(config: FleetConfig) -> list[Vehicle]:
    """Instantiate every vehicle in ``config.vehicles``, preserving order."""
    return [build_vehicle(spec) for spec in config.vehicles]
