"""
Orchid Dashboard: FastAPI ASGI entry point.
"""
import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from orchid import __version__
from orchid.api.router import router as entity_router
from orchid.config import Settings, get_settings
from orchid.services.data_loader import DataLoader, FixtureStore
from orchid.services.randomizer import Randomizer

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan: shared HTTP client and fixture-backed data loader."""
        async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS) as client:
            app.state.data_loader = DataLoader(
                settings,
                client,
                store=FixtureStore(settings.DATA_DIR),
                randomizer=Randomizer(seed=settings.RANDOM_SEED),
            )
            logger.info(
                "Orchid API started (api=%s, randomize=%s, data=%s)",
                settings.API_URL, settings.RANDOMIZE, settings.DATA_DIR,
            )
            yield

    app = FastAPI(
        title=settings.SITE_TITLE,
        description="Entity-driven admin dashboard API",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health():
        """Health check for load balancers and Docker."""
        return {"status": "ok", "service": "orchid"}

    app.include_router(entity_router, prefix="/api", tags=["entities"])
    return app


app = create_app()
