"""
Shared fixtures
===============
Every test gets its own private in-memory database, so state never leaks
between tests.
"""

from typing import Generator

import pytest

from taskhub.config import Settings
from taskhub.db import create_db_engine, init_db, seed_sample_data
from taskhub.mcp.server import TaskHubMCP, build_server
from taskhub.services.store import Store


@pytest.fixture
def store() -> Generator[Store, None, None]:
    """Empty store on a fresh in-memory database."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    store = Store(engine)
    yield store
    store.close()
    engine.dispose()


@pytest.fixture
def seeded_store(store: Store) -> Store:
    """Store loaded with the sample dataset (user-1, user-2, project-1, task-1, task-2, ...)."""
    seed_sample_data(store.session)
    return store


@pytest.fixture
def settings() -> Settings:
    return Settings(elicitation_timeout_seconds=5.0)


@pytest.fixture
def server(seeded_store: Store, settings: Settings) -> TaskHubMCP:
    return build_server(seeded_store, settings)
