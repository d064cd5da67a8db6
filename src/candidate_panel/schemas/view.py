from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict

from candidate_panel.schemas.candidate import CandidateArea, CandidateList, CandidateStatus

ALL: Literal["all"] = "all"


class SortField(StrEnum):
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    AREA = "area"
    STATUS = "status"
    REGISTRATION_DATE = "registration_date"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


class ListViewState(BaseModel):
    model_config = ConfigDict(frozen=True)

    search: str = ""
    area: CandidateArea | Literal["all"] = ALL
    status: CandidateStatus | Literal["all"] = ALL
    sort_field: SortField | None = None
    sort_direction: SortDirection = SortDirection.ASC


class FilterUpdate(BaseModel):
    """Partial update of the list filters; omitted fields keep their value."""

    search: str | None = None
    area: CandidateArea | Literal["all"] | None = None
    status: CandidateStatus | Literal["all"] | None = None


class ViewRead(CandidateList):
    state: ListViewState
