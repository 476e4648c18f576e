"""SQLAlchemy models for adtrack database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Engine,
    Column,
    Integer,
    String,
    DateTime,
    Float,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Entry(Base):
    """Daily ad-spend entry model."""

    __tablename__ = "entries"

    # Insertion order; snapshots are always listed by seq
    seq = Column(Integer, primary_key=True, autoincrement=True)
    entry_id = Column(String, unique=True, nullable=False)
    date = Column(String(10), nullable=False, index=True)
    project = Column(String, nullable=False, index=True)
    platform = Column(String, nullable=False)
    spend = Column(Float, nullable=False, default=0.0)
    purchases = Column(Float, nullable=False, default=0.0)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


def create_db_engine(database_url: str) -> Engine:
    """Create a SQLAlchemy engine.

    No connection is opened until the engine is first used.
    """
    return create_engine(database_url, echo=False)


def create_schema(engine: Engine) -> None:
    """Create any missing tables."""
    Base.metadata.create_all(engine)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory bound to an engine."""
    return sessionmaker(bind=engine)
