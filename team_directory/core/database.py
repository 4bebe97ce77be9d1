# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""SQLAlchemy engine singleton and declarative base."""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from team_directory.core.config import settings


class Base(DeclarativeBase):
    pass


def make_engine(url: str) -> Engine:
    """Build an engine for *url*; SQLite gets a thread-shareable connection."""
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise every checkout sees an empty db
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_recycle=settings.POOL_RECYCLE,
    )


def init_db(engine: Engine) -> None:
    """Create the team_member table if it does not exist yet."""
    # models must be imported so their tables land on Base.metadata
    from team_directory.models import TeamMember  # noqa: F401

    Base.metadata.create_all(bind=engine)


engine = make_engine(settings.DATABASE_URL)
