# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""API request/response Pydantic models for the REST interface."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from lca_audit.data.models import LCAInput


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class AssessRequest(BaseModel):
    """Request body for the ``POST /api/v1/assess`` endpoint."""

    model_config = {"frozen": False, "populate_by_name": True}

    input: LCAInput = Field(
        ..., description="Process inventory to assess."
    )
    ai_recommendations: Optional[list[str]] = Field(
        default=None,
        alias="aiRecommendations",
        description="Externally generated recommendations to attach to the result.",
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class HealthResponse(BaseModel):
    """Response body returned by the ``GET /api/v1/health`` endpoint."""

    status: str = Field(
        ..., description="Service health status (e.g. 'ok')."
    )
    version: str = Field(
        ..., description="Application version string."
    )
