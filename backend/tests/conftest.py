import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from pantry_chef import main
from pantry_chef.storage import db as db_module
from pantry_chef.storage import models  # noqa: F401 - registers tables on SQLModel.metadata
from pantry_chef.storage.repositories import seed_demo_data
from pantry_chef.storage.seed import INITIAL_PANTRY, INITIAL_RECIPES


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="seeded")
def seeded_fixture(session):
    seed_demo_data(session, INITIAL_PANTRY, INITIAL_RECIPES)
    return session


@pytest.fixture(name="client")
def client_fixture(monkeypatch, engine):
    monkeypatch.setattr(db_module, "engine", engine)
    monkeypatch.setattr(main, "configure_dspy", lambda: None)

    client = TestClient(main.app)
    yield client
    main.app.dependency_overrides.clear()


class StubGenerator:
    """Records prompts and returns a canned response (or raises it if it is an exception)."""

    def __init__(self, response):
        self.response = response
        self.calls = []

    def generate(self, prompt, instruction="", **kwargs):
        self.calls.append({"prompt": prompt, "instruction": instruction, **kwargs})
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture
def stub_generator():
    return StubGenerator
