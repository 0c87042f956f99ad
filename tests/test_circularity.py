# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the Material Circularity Index."""

from __future__ import annotations

import pytest

from lca_audit.data.models import (
    EnergyInput,
    EnergyType,
    LCAInput,
    RawMaterial,
    WasteOutput,
    WaterUsage,
)
from lca_audit.scoring.circularity import (
    calculate_mci,
    renewable_energy_share,
    waste_recycle_rate,
    water_recycle_rate,
)


def _circular_input(**overrides) -> LCAInput:
    fields = dict(
        project_name="Circular",
        raw_materials=[RawMaterial(name="Scrap", quantity=1000)],
        energy=[EnergyInput(type=EnergyType.renewable, amount=100)],
        water=WaterUsage(consumption=100, recycled=100),
        waste=[WasteOutput(type="Slag", amount=100, recycled=100)],
    )
    fields.update(overrides)
    return LCAInput(**fields)


class TestRatios:
    """Tests for the component ratios."""

    def test_copper_ratios(self, copper_input: LCAInput):
        assert water_recycle_rate(copper_input) == pytest.approx(0.4)
        assert renewable_energy_share(copper_input) == pytest.approx(3000 / 18800)

    def test_waste_benchmark_without_streams(self, copper_input: LCAInput):
        assert waste_recycle_rate(copper_input) == pytest.approx(0.30)

    def test_waste_mean_rate(self):
        record = _circular_input(waste=[
            WasteOutput(type="Dross", amount=800, recycled=600),
            WasteOutput(type="Dust", amount=100, recycled=0),
        ])
        assert waste_recycle_rate(record) == pytest.approx(0.375)

    def test_tiny_waste_stream_uses_unit_denominator(self):
        record = _circular_input(waste=[WasteOutput(type="Dust", amount=0.5, recycled=0.5)])
        assert waste_recycle_rate(record) == pytest.approx(0.5)

    def test_zero_consumption(self):
        assert water_recycle_rate(LCAInput()) == 0.0
        assert renewable_energy_share(LCAInput()) == 0.0


class TestMCI:
    """Tests for calculate_mci()."""

    def test_copper(self, copper_input: LCAInput):
        assert calculate_mci(copper_input) == pytest.approx(28.8)

    def test_fully_circular(self):
        assert calculate_mci(_circular_input()) == 100.0

    def test_clamped_when_recycled_exceeds_consumption(self):
        record = _circular_input(water=WaterUsage(consumption=10, recycled=50))
        assert calculate_mci(record) == 100.0

    def test_no_material_is_zero(self):
        record = _circular_input(raw_materials=[])
        assert calculate_mci(record) == 0.0

    def test_bounds(self, copper_input: LCAInput, empty_input: LCAInput):
        for record in (copper_input, empty_input, _circular_input()):
            assert 0 <= calculate_mci(record) <= 100
