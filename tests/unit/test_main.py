"""Unit tests for application wiring and logging setup."""

import logging

import pytest

from candidate_panel.core.logging import setup_logging
from candidate_panel.main import create_app, lifespan
from candidate_panel.services.candidate_store import CandidateStore
from candidate_panel.services.list_view import ListView
from tests.conftest import make_candidate_form


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
def test_create_app_scopes_store_to_app() -> None:
    first, second = create_app(), create_app()

    assert isinstance(first.state.candidate_store, CandidateStore)
    assert isinstance(first.state.list_view, ListView)
    assert first.state.list_view.store is first.state.candidate_store
    assert first.state.candidate_store is not second.state.candidate_store


@pytest.mark.unit
async def test_lifespan_discards_records(restore_root_logger) -> None:
    app = create_app()
    store = app.state.candidate_store

    async with lifespan(app):
        store.create(make_candidate_form())
        assert len(store) == 1

    assert len(store) == 0


@pytest.mark.unit
def test_setup_logging_installs_single_handler(restore_root_logger) -> None:
    setup_logging()
    setup_logging()

    root = restore_root_logger
    assert len(root.handlers) == 1
    assert root.level == logging.INFO
