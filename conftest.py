# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Shared fixtures — every test runs against a fresh in-memory SQLite store."""
import os

# must be set before team_directory is imported; the engine is built at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest

from team_directory.core.database import Base, engine, init_db
from team_directory.repositories.team_member_repository import TeamMemberRepository


@pytest.fixture(autouse=True)
def fresh_schema():
    """Drop and recreate the team_member table around each test."""
    Base.metadata.drop_all(bind=engine)
    init_db(engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def repo():
    return TeamMemberRepository(engine)
