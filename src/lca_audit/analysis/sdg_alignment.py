# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Alignment with UN Sustainable Development Goals 9, 12, and 13.

Each goal is bucketed into positive / neutral / negative from a single
ratio:

- SDG 9 (Industry, Innovation & Infrastructure): renewable energy share
- SDG 12 (Responsible Consumption & Production): water recycling rate
- SDG 13 (Climate Action): GWP per tonne of material (lower is better)
"""

from __future__ import annotations

from lca_audit.data.factors import DEFAULT_FACTORS, FactorTables
from lca_audit.data.models import Alignment, LCAInput, SDGAlignment
from lca_audit.scoring.circularity import renewable_energy_share, water_recycle_rate
from lca_audit.scoring.normalizer import reference_material_kg
from lca_audit.scoring.thresholds import (
    SDG9_RENEWABLE_NEUTRAL_PCT,
    SDG9_RENEWABLE_POSITIVE_PCT,
    SDG12_RECYCLE_NEUTRAL_PCT,
    SDG12_RECYCLE_POSITIVE_PCT,
    SDG13_GWP_NEUTRAL_BELOW,
    SDG13_GWP_POSITIVE_BELOW,
    classify_higher_is_better,
    classify_lower_is_better,
)


def classify_sdg_alignment(
    lca_input: LCAInput,
    gwp: float,
    factors: FactorTables = DEFAULT_FACTORS,
) -> list[SDGAlignment]:
    """Return the SDG 9, 12, and 13 classifications, in that order."""
    return [
        _sdg9(lca_input),
        _sdg12(lca_input),
        _sdg13(lca_input, gwp, factors),
    ]


def _sdg9(lca_input: LCAInput) -> SDGAlignment:
    share_pct = renewable_energy_share(lca_input) * 100
    alignment = classify_higher_is_better(
        share_pct, SDG9_RENEWABLE_POSITIVE_PCT, SDG9_RENEWABLE_NEUTRAL_PCT
    )
    if alignment == Alignment.positive:
        description = (
            f"{share_pct:.0f}% renewable energy supports sustainable industrialization"
        )
    else:
        description = (
            f"Only {share_pct:.0f}% renewable energy - opportunity to increase "
            f"renewable energy adoption in operations"
        )
    return SDGAlignment(
        sdg=9,
        title="Industry, Innovation & Infrastructure",
        alignment=alignment,
        description=description,
    )


def _sdg12(lca_input: LCAInput) -> SDGAlignment:
    recycle_pct = water_recycle_rate(lca_input) * 100
    alignment = classify_higher_is_better(
        recycle_pct, SDG12_RECYCLE_POSITIVE_PCT, SDG12_RECYCLE_NEUTRAL_PCT
    )
    if alignment == Alignment.positive:
        description = (
            f"Excellent {recycle_pct:.0f}% water recycling rate supports circular economy"
        )
    else:
        description = (
            f"{recycle_pct:.0f}% water recycling rate - implement circular economy "
            f"practices for materials and water"
        )
    return SDGAlignment(
        sdg=12,
        title="Responsible Consumption & Production",
        alignment=alignment,
        description=description,
    )


def _sdg13(lca_input: LCAInput, gwp: float, factors: FactorTables) -> SDGAlignment:
    gwp_per_tonne = gwp / reference_material_kg(lca_input, factors) * 1000
    alignment = classify_lower_is_better(
        gwp_per_tonne, SDG13_GWP_POSITIVE_BELOW, SDG13_GWP_NEUTRAL_BELOW
    )
    if alignment == Alignment.positive:
        description = (
            f"Low carbon intensity of {gwp_per_tonne:.0f} kg CO2e/tonne aligns "
            f"with Paris Agreement goals"
        )
    else:
        description = (
            f"Carbon intensity of {gwp_per_tonne:.0f} kg CO2e/tonne - reduction "
            f"opportunities exist"
        )
    return SDGAlignment(
        sdg=13,
        title="Climate Action",
        alignment=alignment,
        description=description,
    )
