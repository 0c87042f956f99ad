# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""FastAPI application factory for the LCA REST API."""

from __future__ import annotations

from lca_audit.api import check_dependency

check_dependency("fastapi", "pip install -e '.[api]'")

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from lca_audit import __version__  # noqa: E402
from lca_audit.api.routes import router  # noqa: E402


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns
    -------
    FastAPI
        A configured application instance with CORS middleware and all
        API routes included.
    """
    app = FastAPI(
        title="LCA Audit API",
        description=(
            "REST API for life cycle assessments of metallurgical "
            "processes. Submit a process inventory and receive impact "
            "metrics, hotspots, SDG alignment, and a sustainability score."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Browser front-ends call the API cross-origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    return app
