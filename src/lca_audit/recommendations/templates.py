# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Recommendation text templates.

Hotspot templates carry a display name plus the priority and routine
advice chosen by the hotspot thresholds.  Narrative templates use
``{placeholder}`` fields filled in by the recommendation engine.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HotspotTemplate:
    """Immutable advice pair for one hotspot category."""

    area: str
    priority: str
    routine: str


ENERGY_HOTSPOT = HotspotTemplate(
    area="Energy Consumption",
    priority="PRIORITY: Transition to renewable energy sources - potential 80%+ reduction",
    routine="Optimize energy efficiency through process improvements",
)

TRANSPORT_HOTSPOT = HotspotTemplate(
    area="Transportation",
    priority="PRIORITY: Shift to rail/ship transport or optimize routes",
    routine="Consider local sourcing to reduce transport distances",
)

DIRECT_HOTSPOT = HotspotTemplate(
    area="Direct Process Emissions",
    priority="PRIORITY: Implement emission capture or process optimization",
    routine="Monitor and report emissions for continuous improvement",
)

WATER_HOTSPOT = HotspotTemplate(
    area="Water Usage",
    priority="Implement closed-loop water recycling systems",
    routine="Good recycling rate - focus on water treatment efficiency",
)


# ---------------------------------------------------------------------------
# Narrative recommendations
# ---------------------------------------------------------------------------

DOMINANT_HOTSPOT = (
    "PRIORITY: Address {area} - contributing {contribution}% of total impact"
)
NO_DOMINANT_HOTSPOT = (
    "No single hotspot dominates - focus on incremental improvements across all areas"
)
SDG_GAP = "SDG Gap: {title} needs attention"
SDG_ALL_ALIGNED = "Strong SDG alignment across all measured goals"
ENERGY_AUDIT_NEEDED = "Consider energy audits to identify efficiency opportunities"
ENERGY_PERFORMING = "Energy efficiency is performing well"
LOW_CIRCULARITY = "Improve material circularity through recycling and renewable inputs"
GOOD_CIRCULARITY = "Good circularity practices - continue optimization"


CIRCULAR_ECONOMY_SUGGESTIONS: tuple[str, ...] = (
    "Implement industrial symbiosis - partner with nearby facilities for "
    "waste-to-resource exchanges",
    "Design for recyclability in product specifications",
    "Explore renewable energy PPAs (Power Purchase Agreements) for long-term "
    "decarbonization",
    "Consider carbon capture technologies for high-emission processes",
    "Optimize packaging and logistics for reduced material use",
)
