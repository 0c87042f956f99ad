# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Normalization, impact metrics, circularity, and sustainability scoring."""

from lca_audit.scoring.circularity import calculate_mci
from lca_audit.scoring.engine import ScoringEngine
from lca_audit.scoring.impact import (
    calculate_energy_intensity,
    calculate_gwp,
    calculate_water_footprint,
)
from lca_audit.scoring.normalizer import normalize_input

__all__ = [
    "ScoringEngine",
    "calculate_energy_intensity",
    "calculate_gwp",
    "calculate_mci",
    "calculate_water_footprint",
    "normalize_input",
]
