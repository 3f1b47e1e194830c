"""Event models: outcome contracts for vehicle operations."""

from motorpool.models.events import EventKind, VehicleEvent

__all__ = [
    "EventKind",
    "VehicleEvent",
]
