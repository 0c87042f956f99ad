# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Factor table configuration loader.

An alternate factor set is described in YAML, for example::

    energy:
      electricity: 0.38
      natural_gas: 2.02
      diesel: 2.68
      coal: 2.42
      renewable: 0.012
    water: 0.30
    benchmarks:
      energy_kwh_per_tonne: 450

Any table given replaces the default table wholesale (its key order is
the species matching order for ``gwp``).  ``benchmarks`` is merged key by
key.  Omitted keys keep their defaults.  A replaced ``energy`` or
``transport`` table must still hold the fallback key
(``default_energy_type`` / ``default_transport_mode``).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from lca_audit.data.factors import DEFAULT_FACTORS, FactorTables

logger = logging.getLogger(__name__)


def factor_tables_from_dict(
    raw: dict[str, Any], base: FactorTables = DEFAULT_FACTORS
) -> FactorTables:
    """Overlay *raw* on *base* and validate the result."""
    merged = base.model_dump()
    for key, value in raw.items():
        if key == "benchmarks" and isinstance(value, dict):
            merged["benchmarks"].update(value)
        else:
            merged[key] = value
    return FactorTables.model_validate(merged)


def load_factor_tables(path: str | Path) -> FactorTables:
    """Load a :class:`FactorTables` override from a YAML file.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the document is not a mapping.
        pydantic.ValidationError: If a value fails validation.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Factor file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Factor file must contain a mapping: {config_path}")

    logger.debug("Loaded factor overrides from %s: %s", config_path, sorted(raw))
    return factor_tables_from_dict(raw)
