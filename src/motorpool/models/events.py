"""Event types: the observable outcome of starting and driving a vehicle.

Engine starts and drives never raise for expected runtime states (dead
battery, engine not started).  They return a :class:`VehicleEvent` instead,
with ``success=False`` and a human-readable message, so callers and tests can
inspect the outcome without capturing stdout.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

EventKind = Literal["engine_start", "drive"]


class VehicleEvent(BaseModel):
    """One engine-start or drive attempt."""

    model_config = ConfigDict(frozen=True)

    vehicle: str
    """Label of the vehicle that produced the event, e.g. ``2022 Toyota Camry``."""

    kind: EventKind
    success: bool
    """False when the attempt was refused (engine off, battery dead or depleted)."""

    message: str

    def __str__(self) -> str:
        return self.message
