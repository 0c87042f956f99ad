# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""LCA Audit - Life Cycle Assessment for Metallurgical Processes."""

__version__ = "0.1.0"

from lca_audit.data.factors import DEFAULT_FACTORS, Benchmarks, FactorTables
from lca_audit.data.models import (
    Grade,
    Hotspot,
    ImpactResult,
    LCAInput,
    LCAResult,
    SDGAlignment,
    SustainabilityScore,
    ValidationWarning,
)
from lca_audit.data.samples import SAMPLES, get_sample
from lca_audit.engine import LCAEngine, generate_lca_result
from lca_audit.scoring.normalizer import normalize_input

__all__ = [
    "Benchmarks",
    "DEFAULT_FACTORS",
    "FactorTables",
    "Grade",
    "Hotspot",
    "ImpactResult",
    "LCAEngine",
    "LCAInput",
    "LCAResult",
    "SAMPLES",
    "SDGAlignment",
    "SustainabilityScore",
    "ValidationWarning",
    "generate_lca_result",
    "get_sample",
    "normalize_input",
]
