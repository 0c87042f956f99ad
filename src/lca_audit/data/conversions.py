# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Unit conversion table and rounding helpers.

Every conversion factor used by the calculators lives in
``UNIT_CONVERSIONS`` keyed by ``(QuantityKind, unit)`` so adding a new
unit is a one-line change.
"""

from __future__ import annotations

import math
from enum import Enum


class QuantityKind(str, Enum):
    """Physical quantity a unit belongs to."""

    mass = "mass"        # canonical: kg
    energy = "energy"    # canonical: MJ


# ---------------------------------------------------------------------------
# Conversion table: (kind, unit) -> multiplier to the canonical unit
# ---------------------------------------------------------------------------
UNIT_CONVERSIONS: dict[tuple[QuantityKind, str], float] = {
    (QuantityKind.mass, "kg"): 1.0,
    (QuantityKind.mass, "tonnes"): 1000.0,
    (QuantityKind.energy, "kWh"): 3.6,
    (QuantityKind.energy, "MJ"): 1.0,
}

# Energy entries with an unknown unit are read as kWh.
DEFAULT_ENERGY_UNIT = "kWh"


def conversion_factor(kind: QuantityKind, unit: str) -> float | None:
    """Return the multiplier to the canonical unit, or None if unknown."""
    return UNIT_CONVERSIONS.get((kind, unit))


def to_kg(quantity: float, unit: str) -> float | None:
    """Convert a mass to kilograms.  Returns None for non-mass units."""
    factor = conversion_factor(QuantityKind.mass, unit)
    if factor is None:
        return None
    return quantity * factor


def to_megajoules(amount: float, unit: str) -> float:
    """Convert an energy amount to MJ, treating unknown units as kWh."""
    factor = conversion_factor(QuantityKind.energy, unit)
    if factor is None:
        factor = UNIT_CONVERSIONS[(QuantityKind.energy, DEFAULT_ENERGY_UNIT)]
    return amount * factor


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round *value* to *ndigits* with halves rounded towards +infinity.

    Python's built-in ``round`` uses banker's rounding; published scores
    are rounded half-up so that 44.5 reports as 45.
    """
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale
