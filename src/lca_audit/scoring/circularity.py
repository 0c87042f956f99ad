# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Material Circularity Index (MCI) and the recirculation ratios behind it.

A simplified take on the Ellen MacArthur Foundation indicator: water
recycling, renewable energy share, and waste recycling are blended into
a single 0-100 index.
"""

from __future__ import annotations

from lca_audit.data.conversions import round_half_up
from lca_audit.data.factors import DEFAULT_FACTORS, FactorTables
from lca_audit.data.models import EnergyType, LCAInput
from lca_audit.scoring.weights import (
    MCI_RENEWABLE_WEIGHT,
    MCI_WASTE_WEIGHT,
    MCI_WATER_WEIGHT,
)


def water_recycle_rate(lca_input: LCAInput) -> float:
    """Recycled / consumed water as a fraction (0 when nothing consumed)."""
    water = lca_input.water
    if water.consumption <= 0:
        return 0.0
    return water.recycled / water.consumption


def renewable_energy_share(lca_input: LCAInput) -> float:
    """Fraction of the summed energy amounts that is renewable."""
    total = lca_input.total_energy_amount
    if total <= 0:
        return 0.0
    renewable = sum(
        e.amount for e in lca_input.energy if e.type == EnergyType.renewable
    )
    return renewable / total


def waste_recycle_rate(
    lca_input: LCAInput, factors: FactorTables = DEFAULT_FACTORS
) -> float:
    """Mean recycled fraction across waste streams.

    Streams smaller than one unit are divided by 1 to avoid inflated
    ratios.  Without waste data the industry benchmark rate is used.
    """
    if not lca_input.waste:
        return factors.benchmarks.waste_recycle_rate
    rates = [w.recycled / max(w.amount, 1.0) for w in lca_input.waste]
    return sum(rates) / len(rates)


def calculate_mci(
    lca_input: LCAInput, factors: FactorTables = DEFAULT_FACTORS
) -> float:
    """Material Circularity Index on a 0-100 scale, rounded to 1 dp.

    Returns 0.0 when no material mass is reported.
    """
    if lca_input.total_material_kg <= 0:
        return 0.0

    mci = 100 * (
        MCI_WATER_WEIGHT * water_recycle_rate(lca_input)
        + MCI_RENEWABLE_WEIGHT * renewable_energy_share(lca_input)
        + MCI_WASTE_WEIGHT * waste_recycle_rate(lca_input, factors)
    )
    return round_half_up(max(0.0, min(100.0, mci)), 1)
