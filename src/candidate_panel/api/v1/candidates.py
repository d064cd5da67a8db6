import uuid
from typing import Any, Literal

from fastapi import APIRouter, Body, Depends, Query, status

from candidate_panel.api.deps import get_candidate_store
from candidate_panel.core.config import get_settings
from candidate_panel.core.exceptions import FormValidationError, NotFoundError
from candidate_panel.schemas.candidate import (
    CandidateArea,
    CandidateList,
    CandidateMutation,
    CandidateRead,
    CandidateStatus,
    Notification,
)
from candidate_panel.schemas.view import ALL, ListViewState, SortDirection, SortField
from candidate_panel.services import form_validator, list_view
from candidate_panel.services.candidate_store import CandidateStore

router = APIRouter(prefix="/candidates", tags=["candidates"])

CREATED_MESSAGE = "Candidato cadastrado com sucesso!"
UPDATED_MESSAGE = "Candidato atualizado com sucesso!"
DELETED_MESSAGE = "Candidato excluído com sucesso!"


def _validate(
    payload: dict[str, Any],
    store: CandidateStore,
    candidate_id: uuid.UUID | None = None,
) -> form_validator.ValidationResult:
    settings = get_settings()
    result = form_validator.validate_candidate(
        payload,
        existing_emails=store.emails(exclude=candidate_id),
        unique_email=settings.enforce_unique_email,
    )
    if not result.ok:
        raise FormValidationError(result.errors)
    return result


@router.post("/", response_model=CandidateMutation, status_code=status.HTTP_201_CREATED)
async def create_candidate(
    payload: dict[str, Any] = Body(...),
    store: CandidateStore = Depends(get_candidate_store),
) -> CandidateMutation:
    result = _validate(payload, store)
    candidate = store.create(result.form)
    return CandidateMutation(
        candidate=CandidateRead.model_validate(candidate),
        notification=Notification(message=CREATED_MESSAGE),
        form=form_validator.form_defaults(),
    )


@router.get("/", response_model=CandidateList)
async def list_candidates(
    search: str = Query(""),
    area: CandidateArea | Literal["all"] = Query(ALL),
    status_filter: CandidateStatus | Literal["all"] = Query(ALL, alias="status"),
    sort: SortField | None = Query(None),
    direction: SortDirection = Query(SortDirection.ASC),
    store: CandidateStore = Depends(get_candidate_store),
) -> CandidateList:
    state = ListViewState(
        search=search,
        area=area,
        status=status_filter,
        sort_field=sort,
        sort_direction=direction,
    )
    items = list_view.project(store.records(), state)
    return CandidateList(
        items=[CandidateRead.model_validate(c) for c in items],
        total=len(store),
        shown=len(items),
        summary=list_view.summary(len(store)),
    )


@router.get("/{candidate_id}", response_model=CandidateRead)
async def get_candidate(
    candidate_id: uuid.UUID,
    store: CandidateStore = Depends(get_candidate_store),
) -> CandidateRead:
    candidate = store.get(candidate_id)
    if not candidate:
        raise NotFoundError("Candidate", str(candidate_id))
    return CandidateRead.model_validate(candidate)


@router.put("/{candidate_id}", response_model=CandidateMutation)
async def update_candidate(
    candidate_id: uuid.UUID,
    payload: dict[str, Any] = Body(...),
    store: CandidateStore = Depends(get_candidate_store),
) -> CandidateMutation:
    existing = store.get(candidate_id)
    if not existing:
        raise NotFoundError("Candidate", str(candidate_id))
    # An update without status keeps the stored one
    payload = {"status": existing.status, **payload}
    result = _validate(payload, store, candidate_id=candidate_id)
    updated = store.update(candidate_id, result.form)
    if not updated:
        raise NotFoundError("Candidate", str(candidate_id))
    return CandidateMutation(
        candidate=CandidateRead.model_validate(updated),
        notification=Notification(message=UPDATED_MESSAGE),
        form=form_validator.form_values(result.form),
    )


@router.delete("/{candidate_id}", response_model=Notification)
async def delete_candidate(
    candidate_id: uuid.UUID,
    store: CandidateStore = Depends(get_candidate_store),
) -> Notification:
    if not store.delete(candidate_id):
        raise NotFoundError("Candidate", str(candidate_id))
    return Notification(message=DELETED_MESSAGE)
