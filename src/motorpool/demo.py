"""Console walkthrough of the vehicle hierarchy.

Run with:
    python -m motorpool
    python -m motorpool --config scenarios/showroom.yaml --verbose

Sections:
  1. Encapsulation: accessors, display, rejected mileage assignment
  2. Polymorphism: one loop over list[Vehicle], capability-gated drive
  3. Specialised features: repeated drives drain the electric car's battery

:func:`run_demo` returns the transcript as a list of lines; :func:`main`
prints it.  Logging goes to stderr so stdout stays deterministic.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import cast

from pydantic import ValidationError

from motorpool.config.fleet import FleetConfig, build_fleet
from motorpool.config.loader import load_fleet_config
from motorpool.vehicles import ElectricCar, Vehicle, format_quantity

logger = logging.getLogger(__name__)

SECTION_BREAK = ["", "---", ""]


def describe_validation_error(exc: ValidationError) -> str:
    """Collapse a pydantic error into one line of messages."""
    return "; ".join(err["msg"] for err in exc.errors())


def _times(count: int) -> str:
    return {1: "once", 2: "twice"}.get(count, f"{count} times")


# ═══════════════════════════════════════════════════════════════════════════
# Sections
# ═══════════════════════════════════════════════════════════════════════════

def _encapsulation_section(config: FleetConfig) -> list[str]:
    car = config.showcase.build()
    lines = [
        "1. Encapsulation:",
        f"Accessing public properties: {car.make} {car.model} {car.year}",
        f"Accessing private data through getters: {format_quantity(car.mileage)} miles",
    ]
    lines.extend(car.display_info())

    try:
        car.mileage = config.invalid_mileage
    except ValidationError as exc:
        logger.info("Rejected mileage %s for %s", config.invalid_mileage, car.label)
        lines.append(f"Error: {describe_validation_error(exc)}")
    return lines


def _polymorphism_section(fleet: list[Vehicle]) -> list[str]:
    lines = ["2. Inheritance, Polymorphism, and Abstraction:"]
    for vehicle in fleet:
        lines.extend(["", "Vehicle Info:"])
        lines.extend(vehicle.display_info())
        lines.append("Starting engine:")
        lines.append(str(vehicle.start_engine()))

        drivable = vehicle.as_drivable()
        if drivable is not None:
            lines.append("Driving:")
            lines.append(str(drivable.drive()))

        lines.append(f"Efficiency: {vehicle.calculate_efficiency():.2f}")
    return lines


def _electric_section(tesla: ElectricCar | None, drives: int) -> list[str]:
    lines = ["3. Specialized ElectricCar Features:"]
    if tesla is None:
        lines.append("No electric car in this fleet.")
        return lines

    lines.append("Before driving:")
    lines.extend(tesla.display_info())

    lines.extend(["", f"Driving the electric car {_times(drives)}:"])
    for _ in range(drives):
        lines.append(str(tesla.drive()))

    lines.extend(["", "After driving:"])
    lines.extend(tesla.display_info())
    return lines


# ═══════════════════════════════════════════════════════════════════════════
# Driver
# ═══════════════════════════════════════════════════════════════════════════

def run_demo(config: FleetConfig | None = None) -> list[str]:
    """Run all three sections and return the transcript."""
    config = config or FleetConfig()

    fleet = build_fleet(config)
    logger.debug("Built fleet of %d vehicle(s)", len(fleet))

    # selected by spec kind, not by inspecting the instance
    tesla = next(
        (cast(ElectricCar, vehicle)
         for spec, vehicle in zip(config.vehicles, fleet)
         if spec.kind == "electric_car"),
        None,
    )

    lines = ["=== Demonstrating OOP Concepts ===", ""]
    lines.extend(_encapsulation_section(config))
    lines.extend(SECTION_BREAK)
    lines.extend(_polymorphism_section(fleet))
    lines.extend(SECTION_BREAK)
    lines.extend(_electric_section(tesla, config.electric_drives))
    return lines


def main(argv: list[str] | None = None) -> int:
    """Console entry point; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="motorpool",
        description="Walk through encapsulation, inheritance and polymorphism with vehicles.",
    )
    parser.add_argument("--config", help="YAML fleet file (defaults to the built-in fleet)")
    parser.add_argument("--verbose", action="store_true", help="Log vehicle state changes to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_fleet_config(args.config) if args.config else FleetConfig()
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return 1
    except ValidationError as exc:
        logger.error("Invalid fleet config %s: %s", args.config, describe_validation_error(exc))
        return 1

    print("\n".join(run_demo(config)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
