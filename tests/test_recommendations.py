# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the recommendation engine."""

from __future__ import annotations

from lca_audit.data.models import (
    Alignment,
    Grade,
    Hotspot,
    SDGAlignment,
    SustainabilityScore,
)
from lca_audit.recommendations.engine import RecommendationEngine
from lca_audit.recommendations.templates import (
    CIRCULAR_ECONOMY_SUGGESTIONS,
    ENERGY_AUDIT_NEEDED,
    GOOD_CIRCULARITY,
    NO_DOMINANT_HOTSPOT,
    SDG_ALL_ALIGNED,
)


def _score(mci: int) -> SustainabilityScore:
    return SustainabilityScore(
        overall=50, gwp_score=50, energy_score=50, water_score=50,
        waste_score=50, mci_score=mci, grade=Grade.C,
    )


def _sdg(sdg: int, title: str, alignment: Alignment) -> SDGAlignment:
    return SDGAlignment(sdg=sdg, title=title, alignment=alignment, description="")


class TestRecommendationEngine:
    """Tests for RecommendationEngine.generate()."""

    def test_copper_recommendations(self, copper_result):
        assert copper_result.recommendations == [
            "PRIORITY: Address Energy Consumption - contributing 45% of total impact",
            "SDG Gap: Climate Action needs attention",
            "Energy efficiency is performing well",
            "Improve material circularity through recycling and renewable inputs",
        ]

    def test_always_four(self):
        recs = RecommendationEngine().generate([], [], 0.0, _score(0))
        assert len(recs) == 4

    def test_no_dominant_hotspot(self):
        hotspots = [
            Hotspot(area="Transportation", impact=10, contribution=40, recommendation=""),
        ]
        recs = RecommendationEngine().generate(hotspots, [], 10.0, _score(50))
        assert recs[0] == NO_DOMINANT_HOTSPOT

    def test_first_negative_goal_reported(self):
        alignments = [
            _sdg(9, "Industry, Innovation & Infrastructure", Alignment.positive),
            _sdg(12, "Responsible Consumption & Production", Alignment.negative),
            _sdg(13, "Climate Action", Alignment.negative),
        ]
        recs = RecommendationEngine().generate([], alignments, 10.0, _score(50))
        assert recs[1] == "SDG Gap: Responsible Consumption & Production needs attention"

    def test_all_aligned(self):
        alignments = [_sdg(9, "Industry", Alignment.neutral)]
        recs = RecommendationEngine().generate([], alignments, 10.0, _score(50))
        assert recs[1] == SDG_ALL_ALIGNED

    def test_high_energy_intensity(self):
        recs = RecommendationEngine().generate([], [], 50.1, _score(50))
        assert recs[2] == ENERGY_AUDIT_NEEDED

    def test_good_circularity(self):
        recs = RecommendationEngine().generate([], [], 10.0, _score(30))
        assert recs[3] == GOOD_CIRCULARITY

    def test_circular_economy_suggestions(self):
        suggestions = RecommendationEngine.circular_economy_suggestions()
        assert suggestions == list(CIRCULAR_ECONOMY_SUGGESTIONS)
        assert len(suggestions) == 5
