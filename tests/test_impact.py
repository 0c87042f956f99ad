# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the physical impact calculators."""

from __future__ import annotations

import pytest

from lca_audit.data.factors import FactorTables
from lca_audit.data.models import (
    Emission,
    EnergyInput,
    EnergyType,
    LCAInput,
    RawMaterial,
    Transport,
    TransportMode,
    WaterUsage,
)
from lca_audit.scoring.impact import (
    calculate_energy_intensity,
    calculate_gwp,
    calculate_water_footprint,
    direct_emissions_gwp,
    energy_gwp,
    resolve_gwp_multiplier,
    transport_gwp,
    water_gwp,
)


class TestGWPMultiplier:
    """Tests for emission species matching."""

    @pytest.mark.parametrize(
        "label, expected",
        [
            ("CO2", 1.0),
            ("Methane (CH4)", 29.8),
            ("N2O", 273.0),
            ("SF6", 25200.0),
            ("HFC-134a", 1530.0),
            ("PFC-14", 9200.0),
            ("SO2", 1.0),
            ("NOx", 1.0),
        ],
    )
    def test_species(self, label, expected):
        assert resolve_gwp_multiplier(label) == expected

    def test_first_key_wins(self):
        # Contains both "co2" and "ch4"; co2 is checked first
        assert resolve_gwp_multiplier("CO2/CH4 mix") == 1.0

    def test_custom_table_order(self):
        tables = FactorTables(gwp={"ch4": 29.8, "co2": 1.0})
        assert resolve_gwp_multiplier("CO2/CH4 mix", tables) == 29.8


class TestGWP:
    """Tests for the per-category and total GWP."""

    def test_copper_categories(self, copper_input: LCAInput):
        assert energy_gwp(copper_input.energy) == pytest.approx(8720)
        assert direct_emissions_gwp(copper_input.emissions) == pytest.approx(8665)
        assert transport_gwp(copper_input.transport) == pytest.approx(205.15)
        assert water_gwp(copper_input.water) == pytest.approx(1720)

    def test_copper_total(self, copper_input: LCAInput):
        assert calculate_gwp(copper_input) == pytest.approx(19310.15)

    def test_empty_is_zero(self, empty_input: LCAInput):
        assert calculate_gwp(empty_input) == 0

    def test_transport_uses_tonne_km(self):
        legs = [Transport(mode=TransportMode.ship, distance=1000, load_weight=2000)]
        assert transport_gwp(legs) == pytest.approx(16.4)

    def test_unit_is_ignored_for_gwp(self):
        energy = [EnergyInput(type=EnergyType.electricity, amount=100, unit="MJ")]
        assert energy_gwp(energy) == pytest.approx(43.6)

    def test_gwp_monotonic_in_emissions(self, copper_input: LCAInput):
        before = calculate_gwp(copper_input)
        copper_input.emissions.append(Emission(type="CH4", amount=1))
        assert calculate_gwp(copper_input) > before


class TestEnergyIntensity:
    """Tests for MJ per kg of processed material."""

    def test_copper(self, copper_input: LCAInput):
        assert calculate_energy_intensity(copper_input) == pytest.approx(6.45)

    def test_no_mass_is_zero(self):
        record = LCAInput(
            raw_materials=[RawMaterial(name="Water", quantity=100, unit="L")],
            energy=[EnergyInput(type=EnergyType.electricity, amount=100)],
        )
        assert calculate_energy_intensity(record) == 0.0

    def test_tonnes_and_mj(self):
        record = LCAInput(
            raw_materials=[RawMaterial(name="Ore", quantity=1, unit="tonnes")],
            energy=[EnergyInput(type=EnergyType.natural_gas, amount=5000, unit="MJ")],
        )
        assert calculate_energy_intensity(record) == pytest.approx(5.0)


class TestWaterFootprint:
    """Tests for net water consumption."""

    def test_copper(self, copper_input: LCAInput):
        assert calculate_water_footprint(copper_input) == pytest.approx(3000)

    def test_floored_at_zero(self):
        record = LCAInput(water=WaterUsage(consumption=100, recycled=250))
        assert calculate_water_footprint(record) == 0.0
