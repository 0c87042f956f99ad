# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Core Pydantic v2 data models for the LCA assessment engine.

This module defines the complete data contract shared by ingestion,
normalization, scoring, analysis, reporting, CLI, and API layers.
Multi-word fields accept the camelCase names used by the web front-end
(``loadWeight``, ``projectName``, ...) as aliases.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field

from lca_audit.data.conversions import to_kg


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class EnergyType(str, Enum):
    """Energy carrier consumed by the process."""

    electricity = "electricity"
    natural_gas = "natural_gas"
    diesel = "diesel"
    coal = "coal"
    renewable = "renewable"


class TransportMode(str, Enum):
    """Freight transport mode."""

    truck = "truck"
    rail = "rail"
    ship = "ship"
    air = "air"


class ImpactStatus(str, Enum):
    """Traffic-light status of an impact metric against its cut points."""

    good = "good"
    warning = "warning"
    critical = "critical"

    @property
    def color(self) -> str:
        return {"good": "green", "warning": "yellow", "critical": "red"}[self.value]


class Alignment(str, Enum):
    """Direction of alignment with a sustainability goal."""

    positive = "positive"
    neutral = "neutral"
    negative = "negative"

    @property
    def color(self) -> str:
        return {"positive": "green", "neutral": "yellow", "negative": "red"}[self.value]


class Grade(str, Enum):
    """Letter grade for the overall sustainability score."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @property
    def color(self) -> str:
        """Terminal / report color associated with this grade."""
        if self in (Grade.A, Grade.B):
            return "green"
        if self is Grade.C:
            return "yellow"
        return "red"


# ---------------------------------------------------------------------------
# Input models
# ---------------------------------------------------------------------------

class RawMaterial(BaseModel):
    """A material fed into the process."""

    model_config = {"frozen": False, "populate_by_name": True}

    name: str = Field(..., description="Material name")
    quantity: float = Field(..., ge=0, description="Quantity in *unit*")
    unit: str = Field(default="kg", description="kg, tonnes, L, ...")
    source: str = Field(default="", description="Origin of the material")

    @property
    def mass_kg(self) -> float | None:
        """Mass in kg, or None when the unit is not a mass unit."""
        return to_kg(self.quantity, self.unit)


class EnergyInput(BaseModel):
    """Energy consumed by the process."""

    model_config = {"frozen": False, "populate_by_name": True}

    type: EnergyType = Field(..., description="Energy carrier")
    amount: float = Field(..., ge=0, description="Amount consumed in *unit*")
    unit: str = Field(default="kWh", description="kWh, MJ, L, m³, ...")


class Emission(BaseModel):
    """A direct process emission."""

    model_config = {"frozen": False, "populate_by_name": True}

    type: str = Field(..., description="Free-text species label, e.g. 'CO2', 'CH4'")
    amount: float = Field(..., ge=0, description="Amount emitted in *unit*")
    unit: str = Field(default="kg")


class WaterUsage(BaseModel):
    """Process water balance.

    ``recycled`` may exceed ``consumption``; the water footprint is
    floored at zero by the calculator.
    """

    model_config = {"frozen": False, "populate_by_name": True}

    consumption: float = Field(default=0.0, ge=0, description="Water consumed (m³)")
    discharge: float = Field(default=0.0, ge=0, description="Water discharged (m³)")
    recycled: float = Field(default=0.0, ge=0, description="Water recycled (m³)")
    unit: str = Field(default="m³")


class Transport(BaseModel):
    """A single freight leg."""

    model_config = {"frozen": False, "populate_by_name": True}

    mode: TransportMode = Field(..., description="Transport mode")
    distance: float = Field(..., ge=0, description="Distance in km")
    load_weight: float = Field(
        ..., ge=0, alias="loadWeight", description="Load carried in kg"
    )


class WasteOutput(BaseModel):
    """A waste stream leaving the process."""

    model_config = {"frozen": False, "populate_by_name": True}

    type: str = Field(..., description="Waste stream label")
    amount: float = Field(..., ge=0)
    unit: str = Field(default="kg")
    recycled: float = Field(default=0.0, ge=0, description="Portion recycled, same unit")


class LCAInput(BaseModel):
    """Top-level input record for one assessment run.

    Built by the ingestion layer (CSV/JSON, API request) and consumed once
    by :class:`~lca_audit.engine.LCAEngine`.
    """

    model_config = {"frozen": False, "populate_by_name": True}

    project_name: str = Field(default="", alias="projectName")
    process_type: str = Field(default="", alias="processType")
    raw_materials: list[RawMaterial] = Field(
        default_factory=list, alias="rawMaterials"
    )
    energy: list[EnergyInput] = Field(default_factory=list)
    emissions: list[Emission] = Field(default_factory=list)
    water: WaterUsage = Field(default_factory=WaterUsage)
    transport: list[Transport] = Field(default_factory=list)
    waste: list[WasteOutput] = Field(default_factory=list)
    company_name: Optional[str] = Field(default=None, alias="companyName")

    # -- Aggregates ------------------------------------------------------------

    @property
    def total_material_kg(self) -> float:
        """Sum of material quantities; tonnes are converted, other units
        are counted as-is.  Used for benchmark and per-tonne ratios."""
        return sum(
            m.quantity if m.mass_kg is None else m.mass_kg
            for m in self.raw_materials
        )

    @property
    def processed_mass_kg(self) -> float:
        """Mass of materials reported in a mass unit (kg or tonnes) only."""
        return sum(
            m.mass_kg for m in self.raw_materials if m.mass_kg is not None
        )

    @property
    def total_energy_amount(self) -> float:
        """Raw sum of energy amounts across all carriers (mixed units)."""
        return sum(e.amount for e in self.energy)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------

class ValidationWarning(BaseModel):
    """Advisory raised while normalizing the input."""

    model_config = {"frozen": False, "populate_by_name": True}

    field: str = Field(..., description="Input area the warning refers to")
    message: str = Field(..., description="Human-readable explanation")
    used_benchmark: bool = Field(
        default=False, alias="usedBenchmark",
        description="True when an industry benchmark replaced missing data",
    )
    benchmark_value: Optional[float] = Field(
        default=None, alias="benchmarkValue",
        description="The substituted value, when a benchmark was used",
    )


class ImpactResult(BaseModel):
    """A single physical impact metric with its benchmark and status."""

    model_config = {"frozen": False, "populate_by_name": True}

    category: str
    value: float
    unit: str
    benchmark: float
    status: ImpactStatus
    description: str


class Hotspot(BaseModel):
    """A process category ranked by its share of total GWP."""

    model_config = {"frozen": False, "populate_by_name": True}

    area: str = Field(..., description="Process category name")
    impact: float = Field(..., ge=0, description="Category GWP in kg CO2e")
    contribution: int = Field(
        ..., ge=0, le=100, description="Share of total GWP, whole percent"
    )
    recommendation: str


class SDGAlignment(BaseModel):
    """Alignment with one UN Sustainable Development Goal."""

    model_config = {"frozen": False, "populate_by_name": True}

    sdg: int = Field(..., ge=1, le=17)
    title: str
    alignment: Alignment
    description: str


class SustainabilityScore(BaseModel):
    """Normalized 0-100 sub-scores, the weighted overall, and its grade."""

    model_config = {"frozen": False, "populate_by_name": True}

    overall: int = Field(..., ge=0, le=100)
    gwp_score: int = Field(..., ge=0, le=100, alias="gwpScore")
    energy_score: int = Field(..., ge=0, le=100, alias="energyScore")
    water_score: int = Field(..., ge=0, le=100, alias="waterScore")
    waste_score: int = Field(..., ge=0, le=100, alias="wasteScore")
    mci_score: int = Field(
        ..., ge=0, le=100, alias="mciScore",
        description="Material Circularity Index",
    )
    grade: Grade


class LCAResult(BaseModel):
    """Complete output of one assessment run.

    Consumed verbatim by the terminal, PDF, JSON, and API layers; none of
    them recompute any value held here.
    """

    model_config = {"frozen": False, "populate_by_name": True}

    project_name: str = Field(..., alias="projectName")
    company_name: Optional[str] = Field(default=None, alias="companyName")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="UTC timestamp when the assessment was generated",
    )

    impacts: list[ImpactResult] = Field(default_factory=list)
    hotspots: list[Hotspot] = Field(default_factory=list)
    sdg_alignments: list[SDGAlignment] = Field(
        default_factory=list, alias="sdgAlignments"
    )
    recommendations: list[str] = Field(default_factory=list)
    circular_economy_suggestions: list[str] = Field(
        default_factory=list, alias="circularEconomySuggestions"
    )

    overall_score: int = Field(..., ge=0, le=100, alias="overallScore")
    sustainability_score: SustainabilityScore = Field(
        ..., alias="sustainabilityScore"
    )
    validation_warnings: list[ValidationWarning] = Field(
        default_factory=list, alias="validationWarnings"
    )
    ai_recommendations: Optional[list[str]] = Field(
        default=None, alias="aiRecommendations"
    )
    is_ai_powered: bool = Field(default=False, alias="isAIPowered")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def benchmark_warning_count(self) -> int:
        """Number of inputs that were replaced by an industry benchmark."""
        return sum(1 for w in self.validation_warnings if w.used_benchmark)
