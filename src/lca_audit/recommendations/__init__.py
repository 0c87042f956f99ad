# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Hotspot advice and narrative recommendation generation."""

from lca_audit.recommendations.engine import RecommendationEngine

__all__ = ["RecommendationEngine"]
