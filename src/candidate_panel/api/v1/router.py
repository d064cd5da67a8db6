from fastapi import APIRouter

from candidate_panel.api.v1 import candidates, health, view

api_v1_router = APIRouter()
api_v1_router.include_router(health.router)
api_v1_router.include_router(candidates.router)
api_v1_router.include_router(view.router)
