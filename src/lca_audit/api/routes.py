# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""FastAPI router with REST endpoints for the LCA API."""

from __future__ import annotations

import logging

from lca_audit.api import check_dependency

check_dependency("fastapi", "pip install -e '.[api]'")

from fastapi import APIRouter, Depends  # noqa: E402

from lca_audit import __version__  # noqa: E402
from lca_audit.api.models import AssessRequest, HealthResponse  # noqa: E402
from lca_audit.data.factors import FactorTables  # noqa: E402
from lca_audit.data.models import LCAResult  # noqa: E402
from lca_audit.engine import LCAEngine  # noqa: E402

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["lca-audit"])

_DEFAULT_ENGINE = LCAEngine()


# ---------------------------------------------------------------------------
# Dependency injection: assessment engine
# ---------------------------------------------------------------------------

def get_engine() -> LCAEngine:
    """Return the engine used by the endpoints.

    Used as a FastAPI dependency so a differently configured engine
    (custom factor tables) can be swapped in via ``dependency_overrides``.
    """
    return _DEFAULT_ENGINE


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Return service health status and version information."""
    return HealthResponse(status="ok", version=__version__)


@router.get("/factors", response_model=FactorTables)
async def factors(engine: LCAEngine = Depends(get_engine)) -> FactorTables:
    """Return the emission factor tables the engine is using."""
    return engine.factors


@router.post("/assess", response_model=LCAResult)
async def assess(
    request: AssessRequest,
    engine: LCAEngine = Depends(get_engine),
) -> LCAResult:
    """Run a life cycle assessment on the posted inventory.

    Malformed inventories are rejected by request validation (HTTP 422);
    degenerate values (zeros, empty lists) are imputed and reported in
    ``validationWarnings``.
    """
    result = engine.assess(request.input, ai_recommendations=request.ai_recommendations)
    logger.debug("API assessment for %r scored %d", result.project_name, result.overall_score)
    return result
