from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from pantry_chef.config import settings


def _make_engine(url: str):
    if url.startswith("sqlite"):
        # one shared connection so the in-memory database outlives each session
        return create_engine(url, connect_args={"check_same_thread": False}, poolclass=StaticPool)
    return create_engine(url, pool_pre_ping=True)


engine = _make_engine(settings.database_url)


def create_db_and_tables() -> None:
    SQLModel.metadata.create_all(engine)


def get_session() -> Session:
    return Session(engine)
