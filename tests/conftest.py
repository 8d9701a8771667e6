"""Shared fixtures: in-memory snapshot database and summarizer doubles."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from kinship.core.db import init_db, make_engine
from kinship.main import create_app
from kinship.services.store import ConnectionStore
from kinship.utils.llm_client import SummarizerClient


class RecordingSummarizer(SummarizerClient):
    """Live-mode client whose completion is scripted instead of sent."""

    def __init__(self, reply=lambda prompt: "• generated", fail=False):
        super().__init__(api_key="test-key", model="test-model", offline_delay=0)
        self.reply = reply
        self.fail = fail
        self.prompts = []

    async def complete(self, prompt, temperature=None):
        self.prompts.append(prompt)
        if self.fail:
            raise RuntimeError("quota exceeded")
        return self.reply(prompt)


@pytest.fixture
def session_factory():
    engine = make_engine("sqlite://")
    init_db(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def store(session_factory):
    s = ConnectionStore(session_factory, key="test_connections_v5")
    s.load()
    return s


@pytest.fixture
def offline():
    return SummarizerClient(api_key=None, offline_delay=0)


@pytest.fixture
def recorder():
    return RecordingSummarizer()


@pytest.fixture
def client(store, recorder):
    app = create_app(lifespan=None)
    app.state.store = store
    app.state.summarizer = recorder
    return TestClient(app)
