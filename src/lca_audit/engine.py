# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Assessment orchestrator.

Runs normalization, impact metrics, scoring, hotspot analysis, and goal
alignment in sequence and assembles the :class:`LCAResult`.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from lca_audit.analysis.hotspots import identify_hotspots
from lca_audit.analysis.sdg_alignment import classify_sdg_alignment
from lca_audit.data.factors import DEFAULT_FACTORS, FactorTables
from lca_audit.data.models import ImpactResult, LCAInput, LCAResult
from lca_audit.recommendations.engine import RecommendationEngine
from lca_audit.scoring.engine import ScoringEngine
from lca_audit.scoring.impact import (
    calculate_energy_intensity,
    calculate_gwp,
    calculate_water_footprint,
)
from lca_audit.scoring.normalizer import normalize_input
from lca_audit.scoring.thresholds import (
    ENERGY_INTENSITY_BENCHMARK,
    ENERGY_INTENSITY_GOOD_BELOW,
    ENERGY_INTENSITY_WARNING_BELOW,
    GWP_BENCHMARK,
    GWP_GOOD_BELOW,
    GWP_WARNING_BELOW,
    WATER_BENCHMARK,
    WATER_GOOD_BELOW,
    WATER_WARNING_BELOW,
    classify_status,
)

logger = logging.getLogger(__name__)


class LCAEngine:
    """Produce a complete life-cycle assessment from one input record.

    Usage::

        engine = LCAEngine()
        result = engine.assess(lca_input)

    The engine holds only the factor tables and is safe to share between
    threads; each call is independent.
    """

    def __init__(self, factors: FactorTables = DEFAULT_FACTORS) -> None:
        self.factors = factors
        self._scoring = ScoringEngine(factors)
        self._recommendations = RecommendationEngine()

    def assess(
        self,
        lca_input: LCAInput,
        ai_recommendations: Optional[list[str]] = None,
    ) -> LCAResult:
        """Run the full pipeline.

        Args:
            lca_input: The input record; it is not modified.
            ai_recommendations: Externally generated advice, copied into
                the result verbatim.  ``is_ai_powered`` is set when the
                list is non-empty.

        Returns:
            The assembled :class:`LCAResult`, timestamped in UTC.
        """
        normalized, warnings = normalize_input(lca_input, self.factors)

        gwp = calculate_gwp(normalized, self.factors)
        energy_intensity = calculate_energy_intensity(normalized)
        water_footprint = calculate_water_footprint(normalized)
        logger.debug(
            "Metrics for %s: gwp=%.2f kg CO2e, intensity=%.2f MJ/kg, water=%.2f m³",
            normalized.project_name, gwp, energy_intensity, water_footprint,
        )

        score = self._scoring.score(normalized, gwp, energy_intensity, water_footprint)
        hotspots = identify_hotspots(normalized, self.factors)
        sdg_alignments = classify_sdg_alignment(normalized, gwp, self.factors)

        recommendations = self._recommendations.generate(
            hotspots, sdg_alignments, energy_intensity, score
        )

        result = LCAResult(
            project_name=normalized.project_name,
            company_name=normalized.company_name,
            timestamp=datetime.now(timezone.utc),
            impacts=build_impacts(gwp, energy_intensity, water_footprint),
            hotspots=hotspots,
            sdg_alignments=sdg_alignments,
            recommendations=recommendations,
            circular_economy_suggestions=self._recommendations.circular_economy_suggestions(),
            overall_score=score.overall,
            sustainability_score=score,
            validation_warnings=warnings,
            ai_recommendations=(
                list(ai_recommendations) if ai_recommendations is not None else None
            ),
            is_ai_powered=bool(ai_recommendations),
        )

        logger.info(
            "Assessed '%s': score %d (grade %s), %d warning(s)",
            result.project_name, score.overall, score.grade.value, len(warnings),
        )
        return result


def build_impacts(
    gwp: float, energy_intensity: float, water_footprint: float
) -> list[ImpactResult]:
    """The three headline impact metrics with benchmarks and status."""
    return [
        ImpactResult(
            category="Global Warming Potential (GWP)",
            value=gwp,
            unit="kg CO2e",
            benchmark=GWP_BENCHMARK,
            status=classify_status(gwp, GWP_GOOD_BELOW, GWP_WARNING_BELOW),
            description="Total greenhouse gas emissions (IPCC AR6 factors)",
        ),
        ImpactResult(
            category="Energy Intensity",
            value=energy_intensity,
            unit="MJ/kg",
            benchmark=ENERGY_INTENSITY_BENCHMARK,
            status=classify_status(
                energy_intensity,
                ENERGY_INTENSITY_GOOD_BELOW,
                ENERGY_INTENSITY_WARNING_BELOW,
            ),
            description="Energy consumed per unit of material processed",
        ),
        ImpactResult(
            category="Water Footprint",
            value=water_footprint,
            unit="m³",
            benchmark=WATER_BENCHMARK,
            status=classify_status(water_footprint, WATER_GOOD_BELOW, WATER_WARNING_BELOW),
            description="Net water consumption after recycling",
        ),
    ]


def generate_lca_result(
    lca_input: LCAInput,
    ai_recommendations: Optional[list[str]] = None,
    factors: FactorTables = DEFAULT_FACTORS,
) -> LCAResult:
    """Convenience wrapper around :meth:`LCAEngine.assess`."""
    return LCAEngine(factors).assess(lca_input, ai_recommendations)
