import uuid
from dataclasses import dataclass, field
from datetime import date


@dataclass(slots=True)
class Candidate:
    """A stored candidate record. ``id`` is assigned once and never changes."""

    name: str
    email: str
    phone: str
    area: str
    status: str
    registration_date: date
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __repr__(self) -> str:
        return f"<Candidate {self.name} ({self.email})>"
