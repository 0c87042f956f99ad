# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Grade thresholds, impact status cut points, and classification limits.

Every threshold the engine classifies against lives here so reviewers
can trace each status, hotspot priority, and SDG bucket to one number.
"""

from lca_audit.data.models import Alignment, Grade, ImpactStatus

# ---------------------------------------------------------------------------
# Grade thresholds (overall score -> letter grade)
# ---------------------------------------------------------------------------
GRADE_A_MIN = 80
GRADE_B_MIN = 65
GRADE_C_MIN = 50
GRADE_D_MIN = 35
# Below 35 = F

# ---------------------------------------------------------------------------
# Color thresholds
# ---------------------------------------------------------------------------
GREEN_MIN = 80
YELLOW_MIN = 50

# ---------------------------------------------------------------------------
# Impact benchmarks and status cut points (value < good -> good, etc.)
# ---------------------------------------------------------------------------
GWP_BENCHMARK = 1000.0          # kg CO2e
GWP_GOOD_BELOW = 500.0
GWP_WARNING_BELOW = 1500.0

ENERGY_INTENSITY_BENCHMARK = 50.0   # MJ/kg
ENERGY_INTENSITY_GOOD_BELOW = 30.0
ENERGY_INTENSITY_WARNING_BELOW = 70.0

WATER_BENCHMARK = 100.0         # m³
WATER_GOOD_BELOW = 50.0
WATER_WARNING_BELOW = 150.0

# ---------------------------------------------------------------------------
# Hotspot priority thresholds (% of total GWP)
# ---------------------------------------------------------------------------
ENERGY_HOTSPOT_PRIORITY_PCT = 40.0
TRANSPORT_HOTSPOT_PRIORITY_PCT = 20.0
DIRECT_HOTSPOT_PRIORITY_PCT = 30.0
WATER_RECYCLE_GOOD_PCT = 50.0

# ---------------------------------------------------------------------------
# SDG alignment thresholds
# ---------------------------------------------------------------------------
SDG9_RENEWABLE_POSITIVE_PCT = 30.0
SDG9_RENEWABLE_NEUTRAL_PCT = 10.0
SDG12_RECYCLE_POSITIVE_PCT = 50.0
SDG12_RECYCLE_NEUTRAL_PCT = 25.0
SDG13_GWP_POSITIVE_BELOW = 500.0    # kg CO2e / tonne
SDG13_GWP_NEUTRAL_BELOW = 1000.0

# ---------------------------------------------------------------------------
# Narrative recommendation triggers
# ---------------------------------------------------------------------------
DOMINANT_HOTSPOT_PCT = 40
ENERGY_AUDIT_INTENSITY = 50.0       # MJ/kg
LOW_CIRCULARITY_MCI = 30


# ---------------------------------------------------------------------------
# Utility functions
# ---------------------------------------------------------------------------

def score_to_grade(score: float) -> Grade:
    """Convert a 0-100 overall score to a letter grade."""
    if score >= GRADE_A_MIN:
        return Grade.A
    if score >= GRADE_B_MIN:
        return Grade.B
    if score >= GRADE_C_MIN:
        return Grade.C
    if score >= GRADE_D_MIN:
        return Grade.D
    return Grade.F


def score_to_color(score: float) -> str:
    """Convert a 0-100 score to 'green', 'yellow', or 'red'."""
    if score >= GREEN_MIN:
        return "green"
    if score >= YELLOW_MIN:
        return "yellow"
    return "red"


def classify_status(value: float, good_below: float, warning_below: float) -> ImpactStatus:
    """Bucket a lower-is-better metric into good / warning / critical."""
    if value < good_below:
        return ImpactStatus.good
    if value < warning_below:
        return ImpactStatus.warning
    return ImpactStatus.critical


def classify_higher_is_better(
    value: float, positive_above: float, neutral_above: float
) -> Alignment:
    if value > positive_above:
        return Alignment.positive
    if value > neutral_above:
        return Alignment.neutral
    return Alignment.negative


def classify_lower_is_better(
    value: float, positive_below: float, neutral_below: float
) -> Alignment:
    if value < positive_below:
        return Alignment.positive
    if value < neutral_below:
        return Alignment.neutral
    return Alignment.negative
