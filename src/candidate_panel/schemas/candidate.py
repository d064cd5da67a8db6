import uuid
from datetime import date
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, computed_field

DISPLAY_DATE_FORMAT = "%d/%m/%Y"


class CandidateArea(StrEnum):
    TECHNOLOGY = "Tecnologia"
    MARKETING = "Marketing"
    SALES = "Vendas"
    HUMAN_RESOURCES = "Recursos Humanos"
    DESIGN = "Design"


class CandidateStatus(StrEnum):
    NEW = "Novo"
    IN_REVIEW = "Em Análise"
    INTERVIEW_SCHEDULED = "Entrevista Agendada"
    APPROVED = "Aprovado"
    REJECTED = "Reprovado"


class CandidateForm(BaseModel):
    """A validated candidate submission, ready to be stored."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(..., min_length=3)
    email: EmailStr
    phone: str = Field(..., min_length=10)
    area: CandidateArea
    status: CandidateStatus = CandidateStatus.NEW
    registration_date: date


class CandidateFormValues(BaseModel):
    """Values a client shows in the candidate form; blank fields are allowed."""

    name: str = ""
    email: str = ""
    phone: str = ""
    area: CandidateArea | None = None
    status: CandidateStatus = CandidateStatus.NEW
    registration_date: date | None = None


class CandidateRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    phone: str
    area: CandidateArea
    status: CandidateStatus
    registration_date: date

    @computed_field  # type: ignore[prop-decorator]
    @property
    def registration_date_display(self) -> str:
        return self.registration_date.strftime(DISPLAY_DATE_FORMAT)


class Notification(BaseModel):
    level: Literal["success", "error"] = "success"
    message: str


class CandidateMutation(BaseModel):
    """Result of a create or update: the stored record, a user-facing
    notification, and the values the form should show next."""

    candidate: CandidateRead
    notification: Notification
    form: CandidateFormValues


class CandidateList(BaseModel):
    items: list[CandidateRead]
    total: int
    shown: int
    summary: str
