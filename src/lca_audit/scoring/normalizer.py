# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Input validation and benchmark imputation.

Missing or all-zero energy, water, and transport data are replaced with
industry benchmarks scaled by the processed material mass, so every
downstream calculation stays well-defined.  Each substitution produces a
:class:`ValidationWarning` that is carried into the final result.
"""

from __future__ import annotations

import logging

from lca_audit.data.factors import DEFAULT_FACTORS, FactorTables
from lca_audit.data.models import (
    EnergyInput,
    EnergyType,
    LCAInput,
    Transport,
    TransportMode,
    ValidationWarning,
)

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_NAME = "Unnamed LCA Project"


def reference_material_kg(
    lca_input: LCAInput, factors: FactorTables = DEFAULT_FACTORS
) -> float:
    """Material mass used for benchmark and per-tonne math.

    Falls back to the benchmark default mass when no materials are
    reported (or they sum to zero).
    """
    return lca_input.total_material_kg or factors.benchmarks.default_material_kg


def normalize_input(
    lca_input: LCAInput,
    factors: FactorTables = DEFAULT_FACTORS,
) -> tuple[LCAInput, list[ValidationWarning]]:
    """Validate *lca_input* and substitute benchmarks for missing data.

    The caller's record is never modified; a deep copy is normalized
    and returned together with the warnings raised along the way.
    """
    benchmarks = factors.benchmarks
    normalized = lca_input.model_copy(deep=True)
    warnings: list[ValidationWarning] = []

    material_kg = reference_material_kg(lca_input, factors)
    material_tonnes = material_kg / 1000

    # Energy
    if all(e.amount == 0 for e in lca_input.energy):
        amount = material_tonnes * benchmarks.energy_kwh_per_tonne
        normalized.energy = [
            EnergyInput(type=EnergyType.electricity, amount=amount, unit="kWh")
        ]
        warnings.append(ValidationWarning(
            field="Energy",
            message=(
                f"No energy data provided. Using industry benchmark: "
                f"{amount:.0f} kWh"
            ),
            used_benchmark=True,
            benchmark_value=amount,
        ))
        logger.debug("Imputed energy benchmark: %.2f kWh", amount)

    # Water
    if lca_input.water.consumption == 0:
        consumption = material_tonnes * benchmarks.water_m3_per_tonne
        normalized.water.consumption = consumption
        warnings.append(ValidationWarning(
            field="Water",
            message=(
                f"No water consumption data. Using industry benchmark: "
                f"{consumption:.1f} m³"
            ),
            used_benchmark=True,
            benchmark_value=consumption,
        ))
        logger.debug("Imputed water benchmark: %.2f m³", consumption)

    # Transport
    if all(t.distance == 0 for t in lca_input.transport):
        distance = benchmarks.transport_distance_km
        normalized.transport = [
            Transport(
                mode=TransportMode.truck,
                distance=distance,
                load_weight=material_kg,
            )
        ]
        warnings.append(ValidationWarning(
            field="Transport",
            message=(
                f"No transport data. Using industry average: "
                f"{distance:.0f} km by truck"
            ),
            used_benchmark=True,
            benchmark_value=distance,
        ))
        logger.debug("Imputed transport benchmark: %.0f km by truck", distance)

    # Direct emissions are never imputed
    if all(e.amount == 0 for e in lca_input.emissions):
        warnings.append(ValidationWarning(
            field="Emissions",
            message=(
                "No direct emissions specified. Only indirect emissions "
                "from energy will be calculated."
            ),
            used_benchmark=False,
        ))

    if not lca_input.project_name.strip():
        normalized.project_name = DEFAULT_PROJECT_NAME
        warnings.append(ValidationWarning(
            field="Project Name",
            message="Project name was empty. Using default name.",
            used_benchmark=False,
        ))

    return normalized, warnings
