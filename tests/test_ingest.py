# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for CSV and JSON input import."""

from __future__ import annotations

import json
import logging

import pytest
from pydantic import ValidationError

from lca_audit.data.models import EnergyType, LCAInput, TransportMode
from lca_audit.ingest.file_import import (
    LCAFileImporter,
    drop_incomplete_items,
    load_input,
)

_CSV = """\
projectName,processType,materialName,quantity,unit,source,energyType,energyAmount,energyUnit,emissionType,emissionAmount,waterConsumption,waterDischarge,waterRecycled,transportMode,distance,loadWeight
Iron Ore Processing,Pyrometallurgy,Iron Ore,50000,kg,Underground Mine,electricity,25000,kWh,CO2,15000,8000,6000,3000,truck,200,50000
,,Coke,5000,kg,Coal Plant,coal,8000,kg,CH4,50,,,,rail,800,50000
,,Limestone,3000,kg,Quarry,,,,,,,,,,,
"""


@pytest.fixture()
def csv_file(tmp_path):
    path = tmp_path / "iron_ore.csv"
    path.write_text(_CSV)
    return path


class TestCSVImport:
    """Tests for CSV files."""

    def test_header_fields(self, csv_file):
        record = LCAFileImporter(csv_file).load()
        assert record.project_name == "Iron Ore Processing"
        assert record.process_type == "Pyrometallurgy"

    def test_line_items(self, csv_file):
        record = LCAFileImporter(csv_file).load()
        assert [m.name for m in record.raw_materials] == ["Iron Ore", "Coke", "Limestone"]
        assert [e.type for e in record.energy] == [EnergyType.electricity, EnergyType.coal]
        assert [e.type for e in record.emissions] == ["CO2", "CH4"]
        assert [t.mode for t in record.transport] == [TransportMode.truck, TransportMode.rail]
        assert record.transport[1].load_weight == 50000

    def test_water_from_first_row(self, csv_file):
        record = LCAFileImporter(csv_file).load()
        assert record.water.consumption == 8000
        assert record.water.discharge == 6000
        assert record.water.recycled == 3000

    def test_company_name(self, csv_file):
        record = load_input(csv_file, company_name="Acme Metals")
        assert record.company_name == "Acme Metals"

    def test_project_name_from_file_stem(self, tmp_path):
        path = tmp_path / "zinc_roaster.csv"
        path.write_text("materialName,quantity\nZinc Concentrate,1000\n")
        record = LCAFileImporter(path).load()
        assert record.project_name == "zinc roaster"
        assert record.process_type == "Metallurgical Processing"

    def test_snake_case_headers(self, tmp_path):
        path = tmp_path / "plant.csv"
        path.write_text("material_name,quantity,energy_type,energy_amount\nOre,10,diesel,40\n")
        record = LCAFileImporter(path).load()
        assert record.raw_materials[0].name == "Ore"
        assert record.energy[0].amount == 40

    def test_unknown_energy_type_skipped(self, tmp_path, caplog):
        path = tmp_path / "plant.csv"
        path.write_text("materialName,quantity,energyType,energyAmount\nOre,10,nuclear,40\n")
        with caplog.at_level(logging.WARNING, logger="lca_audit.ingest.file_import"):
            record = LCAFileImporter(path).load()
        assert record.energy == []
        assert "nuclear" in caplog.text

    def test_zero_rows_dropped(self, tmp_path):
        path = tmp_path / "plant.csv"
        path.write_text(
            "materialName,quantity,energyType,energyAmount,transportMode,distance\n"
            "Ore,10,electricity,0,truck,0\n"
            "Flux,0,,,,\n"
        )
        record = LCAFileImporter(path).load()
        assert [m.name for m in record.raw_materials] == ["Ore"]
        assert record.energy == []
        assert record.transport == []

    def test_no_usable_data(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("materialName,quantity\n,\n")
        with pytest.raises(ValueError, match="does not contain valid LCA data"):
            LCAFileImporter(path).load()


class TestJSONImport:
    """Tests for JSON files."""

    def test_camel_case_document(self, tmp_path):
        path = tmp_path / "input.json"
        path.write_text(json.dumps({
            "projectName": "Nickel Matte",
            "processType": "Smelting",
            "rawMaterials": [{"name": "Nickel Ore", "quantity": 5, "unit": "tonnes"}],
            "energy": [{"type": "natural_gas", "amount": 900, "unit": "m³"}],
            "emissions": [{"type": "SO2", "amount": 0, "unit": "kg"}],
            "water": {"consumption": 40, "discharge": 10, "recycled": 5},
            "transport": [{"mode": "ship", "distance": 3000, "loadWeight": 5000}],
        }))
        record = LCAFileImporter(path).load()
        assert record.project_name == "Nickel Matte"
        assert record.raw_materials[0].mass_kg == 5000
        assert record.transport[0].load_weight == 5000
        # Zero-amount emission is filtered out
        assert record.emissions == []

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            LCAFileImporter(path).load()

    def test_non_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ValueError, match="JSON object"):
            LCAFileImporter(path).load()

    def test_schema_violation(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"rawMaterials": [{"name": "Ore", "quantity": -5}]}))
        with pytest.raises(ValidationError):
            LCAFileImporter(path).load()


class TestImportErrors:
    """Tests for missing and unsupported files."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LCAFileImporter(tmp_path / "nope.csv").load()

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "input.xlsx"
        path.write_text("")
        with pytest.raises(ValueError, match="Unsupported file type"):
            LCAFileImporter(path).load()


class TestDropIncompleteItems:
    """Tests for drop_incomplete_items()."""

    def test_returns_filtered_copy(self, copper_input: LCAInput):
        copper_input.energy[0].amount = 0
        filtered = drop_incomplete_items(copper_input)
        assert len(filtered.energy) == 2
        assert len(copper_input.energy) == 3
        filtered.raw_materials[0].name = "changed"
        assert copper_input.raw_materials[0].name == "Copper Ore"
