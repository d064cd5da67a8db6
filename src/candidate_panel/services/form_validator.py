"""Validation of candidate form submissions.

Validation never raises: every field is checked and the outcome is returned
as a :class:`ValidationResult`, either the normalized form or a mapping of
field name to the message shown next to that field.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from pydantic import ValidationError

from candidate_panel.schemas.candidate import CandidateForm, CandidateFormValues

logger = logging.getLogger(__name__)

FIELD_MESSAGES: dict[str, str] = {
    "name": "Nome completo é obrigatório (mín. 3 caracteres)",
    "email": "E-mail inválido",
    "phone": "Telefone inválido",
    "area": "Selecione uma área de interesse",
    "status": "Selecione um status válido",
    "registration_date": "Selecione a data de cadastro",
}
DUPLICATE_EMAIL_MESSAGE = "E-mail já cadastrado"


@dataclass
class ValidationResult:
    form: CandidateForm | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.form is not None and not self.errors


def validate_candidate(
    data: Mapping[str, Any],
    *,
    existing_emails: Iterable[str] = (),
    unique_email: bool = False,
) -> ValidationResult:
    """Validate a candidate field set.

    When ``unique_email`` is set, the validated email is rejected if it is
    in ``existing_emails``, the emails of the other stored records.
    Emails are compared case-insensitively.
    """
    errors: dict[str, str] = {}
    form: CandidateForm | None = None

    try:
        form = CandidateForm.model_validate(dict(data))
    except ValidationError as e:
        for error in e.errors():
            loc = error["loc"][0] if error["loc"] else ""
            name = str(loc)
            # First message per field wins
            errors.setdefault(name, FIELD_MESSAGES.get(name, error["msg"]))

    if unique_email and form is not None:
        taken = {e.casefold() for e in existing_emails}
        if form.email.casefold() in taken:
            errors["email"] = DUPLICATE_EMAIL_MESSAGE

    if errors:
        logger.debug("Candidate form rejected: %s", sorted(errors))
        return ValidationResult(errors=errors)
    return ValidationResult(form=form)


def form_defaults(today: date | None = None) -> CandidateFormValues:
    """Blank form values, with the registration date pre-filled to today."""
    return CandidateFormValues(registration_date=today or date.today())


def form_values(form: CandidateForm) -> CandidateFormValues:
    return CandidateFormValues(**form.model_dump())
