"""
CRD Graph — FastAPI Backend
Serves CRD dependency analyses for cluster snapshots.
"""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crdgraph.config import load_config
from crdgraph.observability.logging import get_logger, setup_logging
from crdgraph.routers import analysis, dependencies, graph


def create_app() -> FastAPI:
    config = load_config()
    setup_logging(config.log.level, config.log.format)

    app = FastAPI(title="CRD Graph API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    for module in (analysis, graph, dependencies):
        app.include_router(module.router)

    get_logger("app").info(
        "app_created",
        data_dir=str(config.data_dir),
        cycle_mode=config.analysis.cycle_mode,
        layout=config.analysis.layout,
    )
    return app


app = create_app()
