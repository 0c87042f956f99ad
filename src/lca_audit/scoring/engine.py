# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Sustainability scorer.

Normalizes each physical metric to a 0-100 sub-score by linear decay,
combines the sub-scores with fixed weights, and maps the overall score to
a letter grade.
"""

from __future__ import annotations

from lca_audit.data.conversions import round_half_up
from lca_audit.data.factors import DEFAULT_FACTORS, FactorTables
from lca_audit.data.models import LCAInput, SustainabilityScore
from lca_audit.scoring.circularity import calculate_mci, waste_recycle_rate
from lca_audit.scoring.normalizer import reference_material_kg
from lca_audit.scoring.thresholds import score_to_grade
from lca_audit.scoring.weights import (
    ENERGY_WEIGHT,
    ENERGY_ZERO_AT_MJ_PER_KG,
    GWP_WEIGHT,
    GWP_ZERO_AT_KG_PER_TONNE,
    MCI_WEIGHT,
    WASTE_WEIGHT,
    WATER_WEIGHT,
    WATER_ZERO_AT_M3_PER_TONNE,
)


def _clamp(value: float) -> float:
    return max(0.0, min(100.0, value))


def _linear_decay(value: float, zero_at: float) -> float:
    """100 at value 0, falling linearly to 0 at *zero_at*, clamped."""
    return _clamp(100.0 - value / zero_at * 100.0)


class ScoringEngine:
    """Compute the :class:`SustainabilityScore` for a normalized input.

    Usage::

        engine = ScoringEngine()
        score = engine.score(normalized, gwp, energy_intensity, water_footprint)
    """

    def __init__(self, factors: FactorTables = DEFAULT_FACTORS) -> None:
        self.factors = factors

    def score(
        self,
        lca_input: LCAInput,
        gwp: float,
        energy_intensity: float,
        water_footprint: float,
    ) -> SustainabilityScore:
        """Run the full scoring pipeline.

        Args:
            lca_input: The normalized input record.
            gwp: Total GWP in kg CO2e.
            energy_intensity: Energy intensity in MJ/kg.
            water_footprint: Net water footprint in m³.

        Returns:
            The sub-scores and overall score rounded to integers, plus
            the letter grade of the overall score.
        """
        material_kg = reference_material_kg(lca_input, self.factors)

        gwp_per_tonne = gwp / material_kg * 1000
        gwp_score = _linear_decay(gwp_per_tonne, GWP_ZERO_AT_KG_PER_TONNE)

        energy_score = _linear_decay(energy_intensity, ENERGY_ZERO_AT_MJ_PER_KG)

        water_per_tonne = water_footprint / material_kg * 1000
        water_score = _linear_decay(water_per_tonne, WATER_ZERO_AT_M3_PER_TONNE)

        waste_score = self._waste_score(lca_input)
        mci_score = calculate_mci(lca_input, self.factors)

        overall = round_half_up(
            gwp_score * GWP_WEIGHT
            + energy_score * ENERGY_WEIGHT
            + water_score * WATER_WEIGHT
            + waste_score * WASTE_WEIGHT
            + mci_score * MCI_WEIGHT
        )

        return SustainabilityScore(
            overall=int(overall),
            gwp_score=int(round_half_up(gwp_score)),
            energy_score=int(round_half_up(energy_score)),
            water_score=int(round_half_up(water_score)),
            waste_score=int(round_half_up(waste_score)),
            mci_score=int(round_half_up(mci_score)),
            grade=score_to_grade(overall),
        )

    def _waste_score(self, lca_input: LCAInput) -> float:
        """Waste recycling rate as a score; water recycling stands in
        when no waste streams are reported."""
        if lca_input.waste:
            rate = waste_recycle_rate(lca_input, self.factors)
        else:
            water = lca_input.water
            rate = water.recycled / max(water.consumption, 1.0)
        return _clamp(rate * 100)
