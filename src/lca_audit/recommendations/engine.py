# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Narrative recommendation engine.

Turns the top hotspot, the first unmet sustainability goal, the energy
intensity, and the circularity score into four headline recommendations.
"""

from __future__ import annotations

from lca_audit.data.models import (
    Alignment,
    Hotspot,
    SDGAlignment,
    SustainabilityScore,
)
from lca_audit.recommendations.templates import (
    CIRCULAR_ECONOMY_SUGGESTIONS,
    DOMINANT_HOTSPOT,
    ENERGY_AUDIT_NEEDED,
    ENERGY_PERFORMING,
    GOOD_CIRCULARITY,
    LOW_CIRCULARITY,
    NO_DOMINANT_HOTSPOT,
    SDG_ALL_ALIGNED,
    SDG_GAP,
)
from lca_audit.scoring.thresholds import (
    DOMINANT_HOTSPOT_PCT,
    ENERGY_AUDIT_INTENSITY,
    LOW_CIRCULARITY_MCI,
)


class RecommendationEngine:
    """Generate the narrative recommendations for an assessment.

    Usage::

        engine = RecommendationEngine()
        recommendations = engine.generate(hotspots, alignments, intensity, score)
    """

    def generate(
        self,
        hotspots: list[Hotspot],
        sdg_alignments: list[SDGAlignment],
        energy_intensity: float,
        score: SustainabilityScore,
    ) -> list[str]:
        """Return exactly four recommendation strings.

        Parameters
        ----------
        hotspots:
            Hotspots sorted by contribution, descending.
        sdg_alignments:
            Goal classifications; the first negative one is reported.
        energy_intensity:
            Energy intensity in MJ/kg.
        score:
            The sustainability score; its rounded MCI sub-score is used.
        """
        recommendations: list[str] = []

        top = hotspots[0] if hotspots else None
        if top is not None and top.contribution > DOMINANT_HOTSPOT_PCT:
            recommendations.append(
                DOMINANT_HOTSPOT.format(area=top.area, contribution=top.contribution)
            )
        else:
            recommendations.append(NO_DOMINANT_HOTSPOT)

        gap = next(
            (s for s in sdg_alignments if s.alignment == Alignment.negative), None
        )
        if gap is not None:
            recommendations.append(SDG_GAP.format(title=gap.title))
        else:
            recommendations.append(SDG_ALL_ALIGNED)

        if energy_intensity > ENERGY_AUDIT_INTENSITY:
            recommendations.append(ENERGY_AUDIT_NEEDED)
        else:
            recommendations.append(ENERGY_PERFORMING)

        if score.mci_score < LOW_CIRCULARITY_MCI:
            recommendations.append(LOW_CIRCULARITY)
        else:
            recommendations.append(GOOD_CIRCULARITY)

        return recommendations

    @staticmethod
    def circular_economy_suggestions() -> list[str]:
        """The fixed set of circular-economy suggestions."""
        return list(CIRCULAR_ECONOMY_SUGGESTIONS)
