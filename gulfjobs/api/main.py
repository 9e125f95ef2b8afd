from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gulfjobs.api.routes import router
from gulfjobs.sources import DataSource
from gulfjobs.sources.factory import build_source
from gulfjobs.utils.config import settings


def create_app(source: Optional[DataSource] = None) -> FastAPI:
    """FastAPI application factory. ``source`` overrides the configured backend."""

    app = FastAPI(title="Gulf Jobs API", version="0.1.0")
    app.state.source = source or build_source(settings)

    if settings.environment != "production":
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        await app.state.source.connect()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        await app.state.source.disconnect()

    app.include_router(router)
    return app


app = create_app()
