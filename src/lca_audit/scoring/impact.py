# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Physical impact metrics: GWP, energy intensity, and water footprint.

The per-category GWP helpers are shared with the hotspot analyzer so the
category breakdown always adds up to the reported total.
"""

from __future__ import annotations

import re

from lca_audit.data.conversions import round_half_up, to_megajoules
from lca_audit.data.factors import DEFAULT_FACTORS, FactorTables
from lca_audit.data.models import (
    Emission,
    EnergyInput,
    LCAInput,
    Transport,
    WaterUsage,
)

_NON_ALNUM = re.compile(r"[^a-z0-9]")


# ---------------------------------------------------------------------------
# Per-category GWP (kg CO2e)
# ---------------------------------------------------------------------------

def resolve_gwp_multiplier(
    species: str, factors: FactorTables = DEFAULT_FACTORS
) -> float:
    """Return the GWP100 multiplier for an emission species label.

    The label is lower-cased and stripped of non-alphanumerics, then
    matched against the factor keys in table order; the first key
    contained in the label wins.  Unknown species count as CO2.

    >>> resolve_gwp_multiplier("Methane (CH4)")
    29.8
    """
    label = _NON_ALNUM.sub("", species.lower())
    for key, multiplier in factors.gwp.items():
        if key in label:
            return multiplier
    return factors.default_gwp_multiplier


def energy_gwp(
    energy: list[EnergyInput], factors: FactorTables = DEFAULT_FACTORS
) -> float:
    return sum(e.amount * factors.energy_factor(e.type.value) for e in energy)


def direct_emissions_gwp(
    emissions: list[Emission], factors: FactorTables = DEFAULT_FACTORS
) -> float:
    return sum(
        e.amount * resolve_gwp_multiplier(e.type, factors) for e in emissions
    )


def transport_gwp(
    transport: list[Transport], factors: FactorTables = DEFAULT_FACTORS
) -> float:
    # distance (km) * load (kg) / 1000 -> tonne-km
    return sum(
        t.distance * t.load_weight * factors.transport_factor(t.mode.value) / 1000
        for t in transport
    )


def water_gwp(water: WaterUsage, factors: FactorTables = DEFAULT_FACTORS) -> float:
    return water.consumption * factors.water


# ---------------------------------------------------------------------------
# Headline metrics
# ---------------------------------------------------------------------------

def calculate_gwp(
    lca_input: LCAInput, factors: FactorTables = DEFAULT_FACTORS
) -> float:
    """Total global warming potential in kg CO2e, rounded to 2 dp."""
    total = (
        energy_gwp(lca_input.energy, factors)
        + direct_emissions_gwp(lca_input.emissions, factors)
        + transport_gwp(lca_input.transport, factors)
        + water_gwp(lca_input.water, factors)
    )
    return round_half_up(total, 2)


def calculate_energy_intensity(lca_input: LCAInput) -> float:
    """Energy consumed per kg of processed material (MJ/kg).

    Only materials reported in kg or tonnes count towards the mass.
    Returns 0.0 when no such material is present.
    """
    total_mj = sum(to_megajoules(e.amount, e.unit) for e in lca_input.energy)
    mass_kg = lca_input.processed_mass_kg
    if mass_kg <= 0:
        return 0.0
    return round_half_up(total_mj / mass_kg, 2)


def calculate_water_footprint(lca_input: LCAInput) -> float:
    """Net water consumption after recycling (m³), never negative."""
    net = lca_input.water.consumption - lca_input.water.recycled
    return round_half_up(max(0.0, net), 2)
