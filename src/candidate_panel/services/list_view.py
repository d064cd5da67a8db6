"""Filtered and sorted projection of the candidate store.

``project`` is a pure function of the records and a :class:`ListViewState`.
:class:`ListView` keeps the current state for one store and recomputes the
projection in full on every call.
"""

import logging
import re
from collections.abc import Callable, Iterable
from typing import Any

from candidate_panel.models.candidate import Candidate
from candidate_panel.schemas.view import ALL, ListViewState, SortDirection, SortField
from candidate_panel.services.candidate_store import CandidateStore

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"\D")
_PHONE_QUERY = re.compile(r"[\d\s()+\-.]+")


def _digits(value: str) -> str:
    return _NON_DIGITS.sub("", value)


def matches_search(candidate: Candidate, search: str) -> bool:
    query = search.strip()
    if not query:
        return True
    folded = query.casefold()
    if folded in candidate.name.casefold() or folded in candidate.email.casefold():
        return True
    if query in candidate.phone:
        return True
    # Digit-only comparison applies to phone-like queries only
    if not _PHONE_QUERY.fullmatch(query):
        return False
    digits = _digits(query)
    return bool(digits) and digits in _digits(candidate.phone)


def _sort_key(field: SortField) -> Callable[[Candidate], Any]:
    def key(candidate: Candidate) -> Any:
        value = getattr(candidate, field.value)
        if isinstance(value, str):
            return value.casefold()
        return value

    return key


def project(records: Iterable[Candidate], state: ListViewState) -> list[Candidate]:
    """Return the records matching ``state``'s filters, ordered by its sort."""
    result = [
        c
        for c in records
        if matches_search(c, state.search)
        and (state.area == ALL or c.area == state.area)
        and (state.status == ALL or c.status == state.status)
    ]
    if state.sort_field is not None:
        result.sort(
            key=_sort_key(state.sort_field),
            reverse=state.sort_direction == SortDirection.DESC,
        )
    return result


def toggle_sort(state: ListViewState, field: SortField) -> ListViewState:
    if state.sort_field == field:
        direction = (
            SortDirection.DESC if state.sort_direction == SortDirection.ASC else SortDirection.ASC
        )
    else:
        direction = SortDirection.ASC
    return state.model_copy(update={"sort_field": field, "sort_direction": direction})


def summary(total: int) -> str:
    if total == 0:
        return "Nenhum candidato cadastrado"
    suffix = "" if total == 1 else "s"
    return f"{total} candidato{suffix} no sistema"


class ListView:
    def __init__(self, store: CandidateStore, state: ListViewState | None = None) -> None:
        self.store = store
        self.state = state or ListViewState()

    def set_search(self, search: str) -> list[Candidate]:
        self.state = self.state.model_copy(update={"search": search})
        return self.projection()

    def set_area(self, area: str) -> list[Candidate]:
        self.state = self.state.model_copy(update={"area": area})
        return self.projection()

    def set_status(self, status: str) -> list[Candidate]:
        self.state = self.state.model_copy(update={"status": status})
        return self.projection()

    def toggle_sort(self, field: SortField) -> list[Candidate]:
        self.state = toggle_sort(self.state, field)
        logger.debug(
            "Sorting by %s %s", self.state.sort_field, self.state.sort_direction
        )
        return self.projection()

    def reset(self) -> list[Candidate]:
        self.state = ListViewState()
        return self.projection()

    def projection(self) -> list[Candidate]:
        return project(self.store.records(), self.state)
