# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Shared test fixtures for the LCA audit test suite."""

from __future__ import annotations

import pytest

from lca_audit.data.models import LCAInput, LCAResult
from lca_audit.data.samples import get_sample
from lca_audit.engine import LCAEngine


@pytest.fixture()
def copper_input() -> LCAInput:
    """The copper concentrate sample: 10 t ore, grid + diesel + renewable."""
    return get_sample("copper_concentrate")


@pytest.fixture()
def empty_input() -> LCAInput:
    """An input record with every section left empty."""
    return LCAInput()


@pytest.fixture()
def engine() -> LCAEngine:
    return LCAEngine()


@pytest.fixture()
def copper_result(engine: LCAEngine, copper_input: LCAInput) -> LCAResult:
    """A fully assessed copper concentrate result."""
    return engine.assess(copper_input)


@pytest.fixture()
def empty_result(engine: LCAEngine, empty_input: LCAInput) -> LCAResult:
    """The assessment of an empty input (everything imputed)."""
    return engine.assess(empty_input)
