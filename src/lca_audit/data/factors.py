# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Emission, transport, and GWP factor tables plus industry benchmarks.

Values come from IPCC AR6 (energy and GWP100 factors) and Ecoinvent 3.9
(transport, water, and process benchmarks).  ``FactorTables`` is frozen
and is passed explicitly to every calculator, so an alternate factor set
(e.g. a different IPCC assessment report) can be swapped in without
touching module state.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator


class Benchmarks(BaseModel):
    """Industry-average values used to impute missing inputs."""

    model_config = {"frozen": True}

    energy_kwh_per_tonne: float = Field(
        default=500.0, ge=0, description="Electricity per tonne of processed material (kWh)"
    )
    water_m3_per_tonne: float = Field(
        default=5.0, ge=0, description="Water consumption per tonne of material (m³)"
    )
    transport_distance_km: float = Field(
        default=200.0, ge=0, description="Average inbound transport distance (km)"
    )
    waste_recycle_rate: float = Field(
        default=0.30, ge=0, le=1.0, description="Average waste recycling fraction (0.0-1.0)"
    )
    default_material_kg: float = Field(
        default=1000.0, gt=0,
        description="Material mass assumed when no materials are reported (kg)",
    )


class FactorTables(BaseModel):
    """Immutable set of factors consumed by the impact calculators."""

    model_config = {"frozen": True}

    energy: Mapping[str, float] = Field(
        default_factory=lambda: {
            "electricity": 0.436,   # kg CO2e/kWh, global grid average
            "natural_gas": 2.02,    # kg CO2e/m³
            "diesel": 2.68,         # kg CO2e/L
            "coal": 2.42,           # kg CO2e/kg
            "renewable": 0.012,     # kg CO2e/kWh, lifecycle
        },
        description="Energy source -> kg CO2e per unit consumed",
        validate_default=True,
    )
    transport: Mapping[str, float] = Field(
        default_factory=lambda: {
            "truck": 0.0621,
            "rail": 0.0224,
            "ship": 0.0082,
            "air": 0.6023,
        },
        description="Transport mode -> kg CO2e per tonne-km",
        validate_default=True,
    )
    # Order matters: species labels are matched against these keys in
    # insertion order and the first substring hit wins.
    gwp: Mapping[str, float] = Field(
        default_factory=lambda: {
            "co2": 1.0,
            "ch4": 29.8,
            "n2o": 273.0,
            "sf6": 25200.0,
            "hfc": 1530.0,
            "pfc": 9200.0,
        },
        description="Emission species key -> GWP100 multiplier",
        validate_default=True,
    )
    water: float = Field(
        default=0.344, ge=0, description="kg CO2e per m³ of water consumed"
    )
    benchmarks: Benchmarks = Field(default_factory=Benchmarks)

    # Fallback keys for values outside the tables
    default_energy_type: str = Field(default="electricity")
    default_transport_mode: str = Field(default="truck")
    default_gwp_multiplier: float = Field(default=1.0, ge=0)

    @field_validator("energy", "transport", "gwp", mode="after")
    @classmethod
    def _read_only_table(cls, table: Mapping[str, float]) -> Mapping[str, float]:
        return MappingProxyType(dict(table))

    @field_serializer("energy", "transport", "gwp")
    def _dump_table(self, table: Mapping[str, float]) -> dict[str, float]:
        return dict(table)

    @model_validator(mode="after")
    def _check_fallback_keys(self) -> FactorTables:
        if self.default_energy_type not in self.energy:
            raise ValueError(
                f"default_energy_type {self.default_energy_type!r} is not in the energy table"
            )
        if self.default_transport_mode not in self.transport:
            raise ValueError(
                f"default_transport_mode {self.default_transport_mode!r} is not in the "
                "transport table"
            )
        return self

    def energy_factor(self, energy_type: str) -> float:
        """Factor for *energy_type*, falling back to the default source."""
        factor = self.energy.get(energy_type)
        if factor is None:
            return self.energy[self.default_energy_type]
        return factor

    def transport_factor(self, mode: str) -> float:
        """Factor for *mode*, falling back to the default mode."""
        factor = self.transport.get(mode)
        if factor is None:
            return self.transport[self.default_transport_mode]
        return factor


DEFAULT_FACTORS = FactorTables()
