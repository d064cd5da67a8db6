from fastapi import Request

from candidate_panel.services.candidate_store import CandidateStore
from candidate_panel.services.list_view import ListView

__all__ = ["get_candidate_store", "get_list_view"]


def get_candidate_store(request: Request) -> CandidateStore:
    return request.app.state.candidate_store


def get_list_view(request: Request) -> ListView:
    return request.app.state.list_view
