from fastapi import APIRouter, Depends

from candidate_panel.api.deps import get_list_view
from candidate_panel.models.candidate import Candidate
from candidate_panel.schemas.candidate import CandidateFormValues, CandidateRead
from candidate_panel.schemas.view import FilterUpdate, SortField, ViewRead
from candidate_panel.services import form_validator
from candidate_panel.services.list_view import ListView, summary

router = APIRouter(prefix="/view", tags=["view"])


def _render(view: ListView, items: list[Candidate]) -> ViewRead:
    total = len(view.store)
    return ViewRead(
        state=view.state,
        items=[CandidateRead.model_validate(c) for c in items],
        total=total,
        shown=len(items),
        summary=summary(total),
    )


@router.get("/", response_model=ViewRead)
async def get_view(view: ListView = Depends(get_list_view)) -> ViewRead:
    return _render(view, view.projection())


@router.put("/filters", response_model=ViewRead)
async def update_filters(
    data: FilterUpdate,
    view: ListView = Depends(get_list_view),
) -> ViewRead:
    update_data = data.model_dump(exclude_none=True)
    if "search" in update_data:
        view.set_search(update_data["search"])
    if "area" in update_data:
        view.set_area(update_data["area"])
    if "status" in update_data:
        view.set_status(update_data["status"])
    return _render(view, view.projection())


@router.post("/sort/{field}", response_model=ViewRead)
async def toggle_sort(
    field: SortField,
    view: ListView = Depends(get_list_view),
) -> ViewRead:
    return _render(view, view.toggle_sort(field))


@router.delete("/", response_model=ViewRead)
async def reset_view(view: ListView = Depends(get_list_view)) -> ViewRead:
    return _render(view, view.reset())


@router.get("/form-defaults", response_model=CandidateFormValues)
async def get_form_defaults() -> CandidateFormValues:
    return form_validator.form_defaults()
