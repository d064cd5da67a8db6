import logging
import uuid

from candidate_panel.models.candidate import Candidate
from candidate_panel.schemas.candidate import CandidateForm

logger = logging.getLogger(__name__)


class CandidateStore:
    """In-memory, insertion-ordered collection of candidate records.

    ``create``, ``update`` and ``delete`` are the only ways to mutate the
    collection. None of them raise for a missing id; ``update`` returns
    ``None`` and ``delete`` returns ``False`` instead.
    """

    def __init__(self) -> None:
        self._records: dict[uuid.UUID, Candidate] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, candidate_id: object) -> bool:
        return candidate_id in self._records

    def create(self, form: CandidateForm) -> Candidate:
        candidate = Candidate(**form.model_dump())
        self._records[candidate.id] = candidate
        logger.info("Candidate %s created", candidate.id)
        return candidate

    def get(self, candidate_id: uuid.UUID) -> Candidate | None:
        return self._records.get(candidate_id)

    def records(self) -> list[Candidate]:
        return list(self._records.values())

    def emails(self, exclude: uuid.UUID | None = None) -> set[str]:
        """Stored emails, leaving out the record with id ``exclude``."""
        return {c.email for c in self._records.values() if c.id != exclude}

    def update(self, candidate_id: uuid.UUID, form: CandidateForm) -> Candidate | None:
        candidate = self._records.get(candidate_id)
        if candidate is None:
            logger.info("Update skipped, candidate %s not found", candidate_id)
            return None
        for field, value in form.model_dump().items():
            setattr(candidate, field, value)
        logger.info("Candidate %s updated", candidate_id)
        return candidate

    def delete(self, candidate_id: uuid.UUID) -> bool:
        if self._records.pop(candidate_id, None) is None:
            logger.info("Delete skipped, candidate %s not found", candidate_id)
            return False
        logger.info("Candidate %s deleted", candidate_id)
        return True

    def clear(self) -> None:
        self._records.clear()
