# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""File ingestion: CSV and JSON inputs to ``LCAInput`` records."""

from lca_audit.ingest.file_import import LCAFileImporter, drop_incomplete_items, load_input

__all__ = ["LCAFileImporter", "drop_incomplete_items", "load_input"]
