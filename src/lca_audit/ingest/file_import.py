# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""CSV and JSON import of assessment inputs.

CSV files carry one line item per row (a material, an energy source, an
emission, a transport leg, a waste stream, or any combination of them on
the same row), matching the export format of the web form.  JSON files
hold a single ``LCAInput`` document.  Uses only stdlib for parsing.

Incomplete line items are dropped before the record reaches the engine:
materials without a name or quantity, zero energy amounts, unnamed or
zero emissions, zero-distance transport legs, and zero waste streams.
"""

from __future__ import annotations

import csv
import json
import logging
import re
from pathlib import Path
from typing import Any, Optional

from lca_audit.data.models import (
    Emission,
    EnergyInput,
    EnergyType,
    LCAInput,
    RawMaterial,
    Transport,
    TransportMode,
    WasteOutput,
    WaterUsage,
)

logger = logging.getLogger(__name__)

DEFAULT_PROCESS_TYPE = "Metallurgical Processing"
DEFAULT_PROJECT_NAME = "LCA Analysis Project"

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class LCAFileImporter:
    """Build an :class:`LCAInput` from a CSV or JSON file.

    Usage::

        importer = LCAFileImporter("plant_a.csv", company_name="Acme Metals")
        lca_input = importer.load()
    """

    def __init__(self, path: str | Path, company_name: Optional[str] = None) -> None:
        self.path = Path(path).expanduser()
        self.company_name = company_name

    def load(self) -> LCAInput:
        """Read the file and return a filtered input record.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: For unsupported file types, malformed content,
                or a file without any usable data.
        """
        if not self.path.exists():
            raise FileNotFoundError(f"File not found: {self.path}")

        suffix = self.path.suffix.lower()
        if suffix == ".csv":
            lca_input = self._read_csv()
        elif suffix == ".json":
            lca_input = self._read_json()
        else:
            raise ValueError(f"Unsupported file type: {self.path.suffix}")

        lca_input = drop_incomplete_items(lca_input)
        if self.company_name:
            lca_input.company_name = self.company_name

        if not _has_data(lca_input):
            raise ValueError(
                f"{self.path.name} does not contain valid LCA data. "
                "Please check the format."
            )

        logger.debug(
            "Imported %s: %d materials, %d energy, %d emissions, %d transport",
            self.path.name,
            len(lca_input.raw_materials),
            len(lca_input.energy),
            len(lca_input.emissions),
            len(lca_input.transport),
        )
        return lca_input

    # ------------------------------------------------------------------
    # CSV parsing
    # ------------------------------------------------------------------

    def _read_csv(self) -> LCAInput:
        with open(self.path, newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            if not reader.fieldnames:
                raise ValueError(f"{self.path.name} has no header row")
            rows = [_normalize_keys(row) for row in reader]

        first = rows[0] if rows else {}
        project_name = (
            first.get("project_name")
            or self.path.stem.replace("_", " ")
            or DEFAULT_PROJECT_NAME
        )
        process_type = (
            first.get("process_type") or first.get("process") or DEFAULT_PROCESS_TYPE
        )

        materials = [
            RawMaterial(
                name=row.get("material_name", ""),
                quantity=_float_or_zero(row.get("quantity")),
                unit=row.get("unit") or "kg",
                source=row.get("source", ""),
            )
            for row in rows
            if row.get("material_name")
        ]

        energy = []
        for row in rows:
            raw_type = row.get("energy_type")
            if not raw_type:
                continue
            energy_type = _enum_or_none(EnergyType, raw_type)
            if energy_type is None:
                logger.warning("Skipping row with unknown energy type %r", raw_type)
                continue
            energy.append(EnergyInput(
                type=energy_type,
                amount=_float_or_zero(row.get("energy_amount")),
                unit=row.get("energy_unit") or "kWh",
            ))

        emissions = [
            Emission(
                type=row.get("emission_type") or row.get("emission") or "CO2",
                amount=_float_or_zero(row.get("emission_amount")),
                unit=row.get("emission_unit") or "kg",
            )
            for row in rows
            if row.get("emission_type") or row.get("emission")
        ]

        transport = []
        for row in rows:
            raw_mode = row.get("transport_mode") or row.get("transport")
            if not raw_mode:
                continue
            mode = _enum_or_none(TransportMode, raw_mode)
            if mode is None:
                logger.warning("Skipping row with unknown transport mode %r", raw_mode)
                continue
            transport.append(Transport(
                mode=mode,
                distance=_float_or_zero(row.get("distance")),
                load_weight=_float_or_zero(row.get("load_weight")),
            ))

        waste = [
            WasteOutput(
                type=row["waste_type"],
                amount=_float_or_zero(row.get("waste_amount")),
                unit=row.get("waste_unit") or "kg",
                recycled=_float_or_zero(row.get("waste_recycled")),
            )
            for row in rows
            if row.get("waste_type")
        ]

        water = WaterUsage()
        water_row = next((row for row in rows if row.get("water_consumption")), None)
        if water_row is not None:
            water = WaterUsage(
                consumption=_float_or_zero(water_row.get("water_consumption")),
                discharge=_float_or_zero(water_row.get("water_discharge")),
                recycled=_float_or_zero(water_row.get("water_recycled")),
            )

        return LCAInput(
            project_name=project_name,
            process_type=process_type,
            raw_materials=materials,
            energy=energy,
            emissions=emissions,
            water=water,
            transport=transport,
            waste=waste,
        )

    # ------------------------------------------------------------------
    # JSON parsing
    # ------------------------------------------------------------------

    def _read_json(self) -> LCAInput:
        with open(self.path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid JSON in {self.path.name}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError(f"{self.path.name} must contain a JSON object")
        return LCAInput.model_validate(data)


def load_input(path: str | Path, company_name: Optional[str] = None) -> LCAInput:
    """Load an :class:`LCAInput` from *path* (CSV or JSON)."""
    return LCAFileImporter(path, company_name=company_name).load()


def drop_incomplete_items(lca_input: LCAInput) -> LCAInput:
    """Return a copy without line items the engine should never see."""
    filtered = lca_input.model_copy(deep=True)
    filtered.raw_materials = [
        m for m in filtered.raw_materials if m.name.strip() and m.quantity > 0
    ]
    filtered.energy = [e for e in filtered.energy if e.amount > 0]
    filtered.emissions = [
        e for e in filtered.emissions if e.type.strip() and e.amount > 0
    ]
    filtered.transport = [t for t in filtered.transport if t.distance > 0]
    filtered.waste = [w for w in filtered.waste if w.amount > 0]
    return filtered


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _has_data(lca_input: LCAInput) -> bool:
    return bool(
        lca_input.raw_materials
        or lca_input.energy
        or lca_input.emissions
        or lca_input.water.consumption > 0
    )


def _normalize_keys(row: dict[str, Any]) -> dict[str, str]:
    """Snake-case the column names and strip cell values.

    ``materialName`` and ``material_name`` both become ``material_name``.
    """
    result: dict[str, str] = {}
    for key, value in row.items():
        if key is None:
            continue
        snake = _CAMEL_BOUNDARY.sub("_", key.strip()).lower()
        snake = re.sub(r"[\s_]+", "_", snake)
        result[snake] = value.strip() if isinstance(value, str) else ""
    return result


def _float_or_zero(val: Any) -> float:
    if val is None or val == "":
        return 0.0
    try:
        return max(0.0, float(val))
    except (ValueError, TypeError):
        return 0.0


def _enum_or_none(enum_cls, value: str):
    try:
        return enum_cls(value.strip().lower())
    except ValueError:
        return None
