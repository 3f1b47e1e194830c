"""Kick-start motorcycle with a fixed efficiency figure."""

from __future__ import annotations

from pydantic import PrivateAttr

from motorpool.models.events import VehicleEvent
from motorpool.vehicles.base import Drivable, Vehicle

MOTORCYCLE_MPG = 55.0


class Motorcycle(Drivable, Vehicle):
    """Identity only; no odometer or battery."""

    _is_started: bool = PrivateAttr(default=False)

    @property
    def is_started(self) -> bool:
        return self._is_started

    def start_engine(self) -> VehicleEvent:
        self._is_started = True
        return self._event("engine_start", True, "Motorcycle engine roars to life with kick start")

    def calculate_efficiency(self) -> float:
        return MOTORCYCLE_MPG

    def drive(self) -> VehicleEvent:
        if self._is_started:
            return self._event("drive", True, "Motorcycle is weaving through traffic efficiently")
        return self._event("drive", False, "Please start the engine first")

    def display_info(self) -> list[str]:
        lines = super().display_info()
        lines.append("Type: Motorcycle")
        lines.append(f"Efficiency: {self.calculate_efficiency():.2f} MPG")
        return lines
