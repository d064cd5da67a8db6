from fastapi import APIRouter, Depends

from candidate_panel.api.deps import get_candidate_store
from candidate_panel.core.config import get_settings
from candidate_panel.schemas.health import HealthResponse, StatusResponse
from candidate_panel.services.candidate_store import CandidateStore

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    store: CandidateStore = Depends(get_candidate_store),
) -> HealthResponse:
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        candidates=len(store),
        version=settings.app_version,
    )


@router.get("/status", response_model=StatusResponse)
async def liveness() -> StatusResponse:
    return StatusResponse(status="ok")
