# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Hotspot analysis.

Decomposes total GWP into energy, transport, direct-emission, and water
contributions, ranks them, and attaches a recommendation chosen by the
category's share of the total.
"""

from __future__ import annotations

from lca_audit.data.conversions import round_half_up
from lca_audit.data.factors import DEFAULT_FACTORS, FactorTables
from lca_audit.data.models import Hotspot, LCAInput
from lca_audit.recommendations.templates import (
    DIRECT_HOTSPOT,
    ENERGY_HOTSPOT,
    TRANSPORT_HOTSPOT,
    WATER_HOTSPOT,
    HotspotTemplate,
)
from lca_audit.scoring.circularity import water_recycle_rate
from lca_audit.scoring.impact import (
    calculate_gwp,
    direct_emissions_gwp,
    energy_gwp,
    transport_gwp,
    water_gwp,
)
from lca_audit.scoring.thresholds import (
    DIRECT_HOTSPOT_PRIORITY_PCT,
    ENERGY_HOTSPOT_PRIORITY_PCT,
    TRANSPORT_HOTSPOT_PRIORITY_PCT,
    WATER_RECYCLE_GOOD_PCT,
)


def category_breakdown(
    lca_input: LCAInput, factors: FactorTables = DEFAULT_FACTORS
) -> dict[str, float]:
    """Return unrounded GWP per category, in evaluation order."""
    return {
        "energy": energy_gwp(lca_input.energy, factors),
        "transport": transport_gwp(lca_input.transport, factors),
        "direct": direct_emissions_gwp(lca_input.emissions, factors),
        "water": water_gwp(lca_input.water, factors),
    }


def identify_hotspots(
    lca_input: LCAInput, factors: FactorTables = DEFAULT_FACTORS
) -> list[Hotspot]:
    """Rank process categories by their share of total GWP.

    Categories with no GWP are omitted and an input with zero total GWP
    yields an empty list.  The result is sorted by contribution,
    descending; ties keep the energy, transport, direct, water order.
    """
    total = calculate_gwp(lca_input, factors)
    if total == 0:
        return []

    breakdown = category_breakdown(lca_input, factors)
    hotspots: list[Hotspot] = []

    for key, category_gwp in breakdown.items():
        if category_gwp <= 0:
            continue
        share = category_gwp / total * 100
        template = _TEMPLATES[key]
        hotspots.append(Hotspot(
            area=template.area,
            impact=round_half_up(category_gwp, 2),
            contribution=min(100, int(round_half_up(share))),
            recommendation=(
                template.priority
                if _is_priority(key, share, lca_input)
                else template.routine
            ),
        ))

    # list.sort is stable, so ties keep evaluation order
    hotspots.sort(key=lambda h: h.contribution, reverse=True)
    return hotspots


_TEMPLATES: dict[str, HotspotTemplate] = {
    "energy": ENERGY_HOTSPOT,
    "transport": TRANSPORT_HOTSPOT,
    "direct": DIRECT_HOTSPOT,
    "water": WATER_HOTSPOT,
}


def _is_priority(key: str, share: float, lca_input: LCAInput) -> bool:
    if key == "energy":
        return share > ENERGY_HOTSPOT_PRIORITY_PCT
    if key == "transport":
        return share > TRANSPORT_HOTSPOT_PRIORITY_PCT
    if key == "direct":
        return share > DIRECT_HOTSPOT_PRIORITY_PCT
    # Water priority depends on the recycling rate, not the GWP share
    return water_recycle_rate(lca_input) * 100 < WATER_RECYCLE_GOOD_PCT
