"""Fleet configuration: defaults, validation, YAML loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from motorpool.config import (
    CarSpec,
    ElectricCarSpec,
    FleetConfig,
    MotorcycleSpec,
    build_fleet,
    build_vehicle,
    load_fleet_config,
)
from motorpool.vehicles import Car, ElectricCar, Motorcycle

SHOWROOM = Path(__file__).parent.parent / "scenarios" / "showroom.yaml"


# ═══════════════════════════════════════════════════════════════════════════
# Defaults & builders
# ═══════════════════════════════════════════════════════════════════════════

class TestDefaults:
    """Default FleetConfig reproduces the standard walkthrough."""

    def test_default_showcase(self, fleet_config: FleetConfig):
        car = fleet_config.showcase.build()
        assert isinstance(car, Car)
        assert car.label == "2022 Toyota Camry"
        assert car.mileage == 15_000
        assert fleet_config.invalid_mileage == -500

    def test_default_fleet(self, fleet_config: FleetConfig):
        fleet = build_fleet(fleet_config)
        assert [v.label for v in fleet] == [
            "2021 Honda Accord",
            "2023 Tesla Model 3",
            "2020 Harley-Davidson Street 750",
        ]
        assert [type(v) for v in fleet] == [Car, ElectricCar, Motorcycle]

    def test_default_electric_spec(self):
        ev = build_vehicle(ElectricCarSpec())
        assert isinstance(ev, ElectricCar)
        assert ev.battery_level == 85
        assert ev.range == 300

    def test_build_fleet_returns_fresh_instances(self, fleet_config: FleetConfig):
        first = build_fleet(fleet_config)
        second = build_fleet(fleet_config)
        assert all(a is not b for a, b in zip(first, second))


# ═══════════════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════════════

class TestConfigValidation:
    """Spec field constraints and kind discrimination."""

    def test_negative_spec_mileage_rejected(self):
        with pytest.raises(ValidationError):
            CarSpec(mileage=-1)

    def test_non_negative_invalid_mileage_rejected(self):
        with pytest.raises(ValidationError):
            FleetConfig(invalid_mileage=100)

    def test_battery_above_full_rejected(self):
        with pytest.raises(ValidationError):
            ElectricCarSpec(battery_level=120)

    def test_zero_range_rejected(self):
        with pytest.raises(ValidationError):
            ElectricCarSpec(range=0)

    def test_negative_drive_count_rejected(self):
        with pytest.raises(ValidationError):
            FleetConfig(electric_drives=-1)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            FleetConfig.model_validate({"vehicles": [{"kind": "bicycle", "make": "Trek"}]})

    def test_kind_selects_spec(self):
        config = FleetConfig.model_validate({
            "vehicles": [
                {"kind": "motorcycle", "make": "Ducati", "model": "Monster", "year": 2021},
                {"kind": "car", "make": "Ford", "model": "Focus", "year": 2015, "mileage": 80_000},
            ]
        })
        assert isinstance(config.vehicles[0], MotorcycleSpec)
        assert isinstance(config.vehicles[1], CarSpec)


# ═══════════════════════════════════════════════════════════════════════════
# YAML loading
# ═══════════════════════════════════════════════════════════════════════════

class TestLoader:
    """YAML fleet files."""

    def test_showroom_matches_defaults(self):
        assert load_fleet_config(SHOWROOM) == FleetConfig()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_fleet_config(tmp_path / "absent.yaml")

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_fleet_config(path) == FleetConfig()

    def test_custom_fleet(self, tmp_path: Path):
        path = tmp_path / "fleet.yaml"
        path.write_text(
            "vehicles:\n"
            "  - kind: electric_car\n"
            "    make: Nissan\n"
            "    model: Leaf\n"
            "    year: 2019\n"
            "    mileage: 30000\n"
            "    battery_level: 10\n"
            "    range: 150\n"
            "electric_drives: 3\n"
        )
        config = load_fleet_config(str(path))
        (leaf,) = build_fleet(config)
        assert leaf.label == "2019 Nissan Leaf"
        assert leaf.calculate_efficiency() == pytest.approx(200.0)
        assert config.electric_drives == 3

    def test_bad_content(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("showcase:\n  mileage: -10\n")
        with pytest.raises(ValidationError):
            load_fleet_config(path)
