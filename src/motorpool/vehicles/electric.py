"""Battery-electric car: specialises :class:`Car`.

Differences from the combustion car:
  • no started flag: both ignition and driving are gated on battery_level > 0
  • each successful drive costs a flat DRIVE_BATTERY_COST, with no floor, so
    the last successful drive may leave the level below zero
  • efficiency (MPGe) = range / 75 × 100, independent of battery and mileage
"""

from __future__ import annotations

import logging

from pydantic import Field

from motorpool.models.events import VehicleEvent
from motorpool.vehicles.base import format_quantity
from motorpool.vehicles.car import Car

logger = logging.getLogger(__name__)

DRIVE_BATTERY_COST = 5.0
"""Battery percentage points consumed by one drive."""

MILES_PER_MPGE_UNIT = 75.0


class ElectricCar(Car):
    """A push-button electric car with a battery and a rated range."""

    battery_level: float = Field(description="State of charge (%); decreases as the car is driven")
    range: float = Field(frozen=True, description="Rated range on a full charge (miles)")

    @property
    def has_charge(self) -> bool:
        return self.battery_level > 0

    def start_engine(self) -> VehicleEvent:
        if self.has_charge:
            return self._event(
                "engine_start", True, "Electric car started silently with push-button ignition"
            )
        return self._event("engine_start", False, "Cannot start - battery is dead")

    def calculate_efficiency(self) -> float:
        return (self.range / MILES_PER_MPGE_UNIT) * 100

    def drive(self) -> VehicleEvent:
        if not self.has_charge:
            return self._event("drive", False, "Cannot drive - battery is depleted")
        self.battery_level -= DRIVE_BATTERY_COST
        logger.debug("%s battery now %s%%", self.label, format_quantity(self.battery_level))
        return self._event("drive", True, "Electric car is driving quietly with no emissions")

    def display_info(self) -> list[str]:
        lines = super().display_info()
        lines.append(f"Battery Level: {format_quantity(self.battery_level)}%")
        lines.append(f"Range: {format_quantity(self.range)} miles")
        return lines
