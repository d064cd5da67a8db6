import uuid
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from candidate_panel.main import create_app
from candidate_panel.schemas.candidate import CandidateForm
from candidate_panel.services.candidate_store import CandidateStore


@pytest.fixture
def app() -> FastAPI:
    return create_app()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test", follow_redirects=True
    ) as ac:
        yield ac


@pytest.fixture
def store() -> CandidateStore:
    return CandidateStore()


def make_candidate_payload(**overrides):
    """Helper to create a valid candidate payload with unique email."""
    data = {
        "name": "Ana Silva",
        "email": f"candidate.{uuid.uuid4().hex[:8]}@example.com",
        "phone": "11999998888",
        "area": "Tecnologia",
        "status": "Novo",
        "registration_date": "2024-03-15",
    }
    data.update(overrides)
    return data


def make_candidate_form(**overrides) -> CandidateForm:
    return CandidateForm(**make_candidate_payload(**overrides))
