# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Data models, factor tables, unit conversion, and sample projects."""

from lca_audit.data.factors import DEFAULT_FACTORS, Benchmarks, FactorTables
from lca_audit.data.models import (
    Emission,
    EnergyInput,
    EnergyType,
    Grade,
    Hotspot,
    ImpactResult,
    LCAInput,
    LCAResult,
    RawMaterial,
    SDGAlignment,
    SustainabilityScore,
    Transport,
    TransportMode,
    ValidationWarning,
    WasteOutput,
    WaterUsage,
)
from lca_audit.data.samples import SAMPLES, SampleProject, get_sample

__all__ = [
    "Benchmarks",
    "DEFAULT_FACTORS",
    "Emission",
    "EnergyInput",
    "EnergyType",
    "FactorTables",
    "Grade",
    "Hotspot",
    "ImpactResult",
    "LCAInput",
    "LCAResult",
    "RawMaterial",
    "SAMPLES",
    "SDGAlignment",
    "SampleProject",
    "SustainabilityScore",
    "Transport",
    "TransportMode",
    "ValidationWarning",
    "WasteOutput",
    "WaterUsage",
    "get_sample",
]
