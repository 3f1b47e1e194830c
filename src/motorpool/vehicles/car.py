"""Combustion car: the encapsulation example.

``mileage`` is the one validated, mutable field in the hierarchy: any
negative or NaN value is rejected, both at construction and on assignment, and the
previous value is kept.

Efficiency (illustrative MPG estimate):
  efficiency = 30 − mileage / 10 000
Not clamped: very high mileage yields a negative figure.
"""

from __future__ import annotations

from pydantic import Field, PrivateAttr, field_validator

from motorpool.models.events import VehicleEvent
from motorpool.vehicles.base import Drivable, Vehicle, format_quantity

BASE_MPG = 30.0
MILES_PER_MPG_LOST = 10_000.0


class Car(Drivable, Vehicle):
    """A key-ignition car with an odometer."""

    mileage: float = Field(description="Odometer reading (miles), never negative")

    _is_started: bool = PrivateAttr(default=False)

    @field_validator("mileage")
    @classmethod
    def _mileage_not_negative(cls, value: float) -> float:
        if not value >= 0:  # also rejects NaN
            raise ValueError("Mileage cannot be negative")
        return value

    @property
    def is_started(self) -> bool:
        return self._is_started

    def start_engine(self) -> VehicleEvent:
        self._is_started = True
        return self._event("engine_start", True, "Car engine started with key ignition")

    def calculate_efficiency(self) -> float:
        return BASE_MPG - (self.mileage / MILES_PER_MPG_LOST)

    def drive(self) -> VehicleEvent:
        if self._is_started:
            return self._event("drive", True, "Car is driving smoothly on the road")
        return self._event("drive", False, "Please start the engine first")

    def display_info(self) -> list[str]:
        lines = super().display_info()
        lines.append(f"Mileage: {format_quantity(self.mileage)} miles")
        lines.append(f"Efficiency: {self.calculate_efficiency():.2f} MPG")
        return lines
