# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Hotspot and sustainability-goal analyzers."""

from lca_audit.analysis.hotspots import identify_hotspots
from lca_audit.analysis.sdg_alignment import classify_sdg_alignment

__all__ = [
    "classify_sdg_alignment",
    "identify_hotspots",
]
