"""Unit tests for Pydantic schema validation."""

import uuid
from datetime import date

import pytest
from pydantic import ValidationError

from candidate_panel.models.candidate import Candidate
from candidate_panel.schemas.candidate import (
    CandidateArea,
    CandidateForm,
    CandidateRead,
    CandidateStatus,
)
from candidate_panel.schemas.view import ListViewState, SortDirection
from tests.conftest import make_candidate_payload


@pytest.mark.unit
class TestCandidateForm:
    def test_candidate_form_valid(self) -> None:
        form = CandidateForm(**make_candidate_payload(email="ana@x.com"))
        assert form.name == "Ana Silva"
        assert form.email == "ana@x.com"
        assert form.area == CandidateArea.TECHNOLOGY
        assert form.status == CandidateStatus.NEW
        assert form.registration_date == date(2024, 3, 15)

    def test_status_defaults_to_new(self) -> None:
        payload = make_candidate_payload()
        del payload["status"]
        form = CandidateForm(**payload)
        assert form.status == CandidateStatus.NEW

    def test_name_is_trimmed(self) -> None:
        form = CandidateForm(**make_candidate_payload(name="  Ana Silva  "))
        assert form.name == "Ana Silva"

    def test_unknown_area_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CandidateForm(**make_candidate_payload(area="Finanças"))
        assert any(e["loc"] == ("area",) for e in exc_info.value.errors())

    def test_all_statuses_accepted(self) -> None:
        for value in ["Novo", "Em Análise", "Entrevista Agendada", "Aprovado", "Reprovado"]:
            form = CandidateForm(**make_candidate_payload(status=value))
            assert form.status == value


@pytest.mark.unit
class TestCandidateRead:
    def test_from_attributes_with_display_date(self) -> None:
        candidate = Candidate(
            name="Ana Silva",
            email="ana@x.com",
            phone="11999998888",
            area=CandidateArea.DESIGN,
            status=CandidateStatus.APPROVED,
            registration_date=date(2024, 1, 5),
        )
        read = CandidateRead.model_validate(candidate)
        assert isinstance(read.id, uuid.UUID)
        assert read.id == candidate.id
        assert read.registration_date_display == "05/01/2024"
        assert read.model_dump()["registration_date_display"] == "05/01/2024"


@pytest.mark.unit
class TestListViewState:
    def test_defaults(self) -> None:
        state = ListViewState()
        assert state.search == ""
        assert state.area == "all"
        assert state.status == "all"
        assert state.sort_field is None
        assert state.sort_direction == SortDirection.ASC

    def test_rejects_unknown_area(self) -> None:
        with pytest.raises(ValidationError):
            ListViewState(area="Finanças")
