"""Abstract vehicle contract and the Drivable capability.

Every vehicle carries an immutable identity (make, model, year) and must
answer three polymorphic operations:

  start_engine()          → VehicleEvent
  calculate_efficiency()  → float, pure function of current state
  display_info()          → list[str], base line first, variant details after

Driving is a *capability*, not part of the core contract.  A vehicle opts in
by mixing in :class:`Drivable`; callers ask ``vehicle.as_drivable()`` rather
than type-testing the instance.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from motorpool.models.events import EventKind, VehicleEvent

logger = logging.getLogger(__name__)


def format_quantity(value: float) -> str:
    """Render a float in positional notation without a trailing ``.0``.

    15000.0 → ``15000``, 12.5 → ``12.5``, 1e15 → ``1000000000000000``.
    """
    if value.is_integer():
        return f"{value:.0f}"
    return format(Decimal(repr(value)), "f")


# ═══════════════════════════════════════════════════════════════════════════
# Vehicle
# ═══════════════════════════════════════════════════════════════════════════

class Vehicle(BaseModel, ABC):
    """Abstract base for every vehicle variant.

    Identity fields are frozen: assigning to them raises
    ``pydantic.ValidationError`` and leaves the value untouched.  Mutable
    fields declared by subclasses are re-validated on every assignment.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    make: str = Field(frozen=True, description="Manufacturer, e.g. Toyota")
    model: str = Field(frozen=True, description="Model name, e.g. Camry")
    year: int = Field(frozen=True, description="Model year")

    @property
    def label(self) -> str:
        return f"{self.year} {self.make} {self.model}"

    @abstractmethod
    def start_engine(self) -> VehicleEvent:
        """Attempt ignition.  Refusals are reported in the event, never raised."""

    @abstractmethod
    def calculate_efficiency(self) -> float:
        """Variant-specific efficiency figure.  Must not mutate state."""

    def display_info(self) -> list[str]:
        """Describe the vehicle.  Subclasses extend this list, never replace it."""
        return [self.label]

    def as_drivable(self) -> Drivable | None:
        """Return this vehicle as a :class:`Drivable`, or None if it cannot drive."""
        return None

    @property
    def is_drivable(self) -> bool:
        return self.as_drivable() is not None

    def _event(self, kind: EventKind, success: bool, message: str) -> VehicleEvent:
        logger.debug("%s %s: %s (success=%s)", self.label, kind, message, success)
        return VehicleEvent(vehicle=self.label, kind=kind, success=success, message=message)


# ═══════════════════════════════════════════════════════════════════════════
# Drivable capability
# ═══════════════════════════════════════════════════════════════════════════

class Drivable(ABC):
    """Capability mixin for vehicles that can be driven.

    Place it before :class:`Vehicle` in the bases so its ``as_drivable``
    takes precedence::

        class Car(Drivable, Vehicle): ...
    """

    __slots__ = ()

    def as_drivable(self) -> Drivable:
        return self

    @abstractmethod
    def drive(self) -> VehicleEvent:
        """Attempt to move the vehicle, respecting engine and energy state."""
