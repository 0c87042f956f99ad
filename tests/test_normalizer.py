# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for input normalization and benchmark imputation."""

from __future__ import annotations

import pytest

from lca_audit.data.factors import Benchmarks, FactorTables
from lca_audit.data.models import (
    EnergyInput,
    EnergyType,
    LCAInput,
    RawMaterial,
    Transport,
    TransportMode,
    WaterUsage,
)
from lca_audit.scoring.normalizer import (
    DEFAULT_PROJECT_NAME,
    normalize_input,
    reference_material_kg,
)


class TestNormalizeEmpty:
    """Normalization of an input with nothing filled in."""

    def test_five_warnings(self, empty_input: LCAInput):
        _, warnings = normalize_input(empty_input)
        assert [w.field for w in warnings] == [
            "Energy", "Water", "Transport", "Emissions", "Project Name",
        ]

    def test_energy_imputed_from_default_mass(self, empty_input: LCAInput):
        normalized, warnings = normalize_input(empty_input)
        assert len(normalized.energy) == 1
        assert normalized.energy[0].type == EnergyType.electricity
        assert normalized.energy[0].amount == pytest.approx(500)
        assert normalized.energy[0].unit == "kWh"
        assert warnings[0].used_benchmark is True
        assert warnings[0].benchmark_value == pytest.approx(500)
        assert "500 kWh" in warnings[0].message

    def test_water_imputed(self, empty_input: LCAInput):
        normalized, warnings = normalize_input(empty_input)
        assert normalized.water.consumption == pytest.approx(5)
        assert "5.0 m³" in warnings[1].message

    def test_transport_imputed(self, empty_input: LCAInput):
        normalized, warnings = normalize_input(empty_input)
        leg = normalized.transport[0]
        assert leg.mode == TransportMode.truck
        assert leg.distance == 200
        assert leg.load_weight == 1000
        assert "200 km by truck" in warnings[2].message

    def test_emissions_warning_is_informational(self, empty_input: LCAInput):
        normalized, warnings = normalize_input(empty_input)
        assert normalized.emissions == []
        assert warnings[3].used_benchmark is False

    def test_project_name_defaulted(self, empty_input: LCAInput):
        normalized, _ = normalize_input(empty_input)
        assert normalized.project_name == DEFAULT_PROJECT_NAME

    def test_whitespace_project_name_defaulted(self):
        normalized, warnings = normalize_input(LCAInput(project_name="   "))
        assert normalized.project_name == DEFAULT_PROJECT_NAME
        assert warnings[-1].field == "Project Name"


class TestNormalizeComplete:
    """Normalization of inputs that need no imputation."""

    def test_copper_has_no_warnings(self, copper_input: LCAInput):
        normalized, warnings = normalize_input(copper_input)
        assert warnings == []
        assert normalized == copper_input

    def test_caller_input_not_mutated(self, empty_input: LCAInput):
        normalize_input(empty_input)
        assert empty_input.energy == []
        assert empty_input.water.consumption == 0
        assert empty_input.project_name == ""

    def test_idempotent(self, empty_input: LCAInput):
        once, _ = normalize_input(empty_input)
        twice, warnings = normalize_input(once)
        assert twice == once
        # Only the informational emissions warning remains
        assert [w.field for w in warnings] == ["Emissions"]

    def test_all_zero_energy_triggers_imputation(self):
        record = LCAInput(
            project_name="Zero energy",
            raw_materials=[RawMaterial(name="Ore", quantity=4, unit="tonnes")],
            energy=[EnergyInput(type=EnergyType.diesel, amount=0, unit="L")],
        )
        normalized, warnings = normalize_input(record)
        assert normalized.energy[0].amount == pytest.approx(2000)
        assert warnings[0].field == "Energy"

    def test_non_zero_energy_kept(self):
        record = LCAInput(
            project_name="Some energy",
            energy=[EnergyInput(type=EnergyType.coal, amount=10, unit="kg")],
            water=WaterUsage(consumption=1),
            transport=[Transport(mode=TransportMode.air, distance=1, load_weight=1)],
        )
        normalized, warnings = normalize_input(record)
        assert normalized.energy == record.energy
        assert [w.field for w in warnings] == ["Emissions"]

    def test_benchmarks_scale_with_mass(self):
        record = LCAInput(
            project_name="Big",
            raw_materials=[RawMaterial(name="Ore", quantity=20, unit="tonnes")],
        )
        normalized, _ = normalize_input(record)
        assert normalized.energy[0].amount == pytest.approx(10000)
        assert normalized.water.consumption == pytest.approx(100)
        assert normalized.transport[0].load_weight == 20000

    def test_custom_benchmarks(self, empty_input: LCAInput):
        tables = FactorTables(benchmarks=Benchmarks(energy_kwh_per_tonne=300))
        normalized, _ = normalize_input(empty_input, tables)
        assert normalized.energy[0].amount == pytest.approx(300)


class TestReferenceMaterial:
    """Tests for the reference mass used by per-tonne ratios."""

    def test_default_when_empty(self, empty_input: LCAInput):
        assert reference_material_kg(empty_input) == 1000

    def test_lenient_total(self, copper_input: LCAInput):
        assert reference_material_kg(copper_input) == 15500
