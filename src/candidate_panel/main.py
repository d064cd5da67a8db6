import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from candidate_panel.api.v1.router import api_v1_router
from candidate_panel.core.config import get_settings
from candidate_panel.core.logging import setup_logging
from candidate_panel.services.candidate_store import CandidateStore
from candidate_panel.services.list_view import ListView

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Startup
    setup_logging()
    logger.info("Candidate panel starting up")
    yield
    # Shutdown
    store: CandidateStore = app.state.candidate_store
    logger.info("Discarding %d candidate record(s)", len(store))
    store.clear()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    store = CandidateStore()
    app.state.candidate_store = store
    app.state.list_view = ListView(store)
    app.include_router(api_v1_router, prefix="/api/v1")
    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "candidate_panel.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )
