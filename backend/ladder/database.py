"""
Engine and session wiring for the ladder database.

SQLite is the default store. Generation claims a ladder day with a
conditional UPDATE, so concurrent SQLite writers must queue on the
database lock (busy timeout) instead of failing immediately.
"""

import os
from pathlib import Path
from typing import Generator

from dotenv import load_dotenv
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from ladder.config import SQLITE_BUSY_TIMEOUT

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./ladder.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("true", "1", "yes")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_ladder_engine(url: str, echo: bool = False, **kwargs) -> Engine:
    """
    Build an engine for *url*.

    For SQLite: cross-thread connections (FastAPI threadpool), a busy
    timeout so a second writer waits for the first to commit, and
    foreign key enforcement, which SQLite leaves off by default.
    """
    if not url.startswith("sqlite"):
        return create_engine(url, echo=echo, **kwargs)

    if ":memory:" not in url:
        Path(url.replace("sqlite:///", "", 1)).parent.mkdir(parents=True, exist_ok=True)

    connect_args = {"check_same_thread": False, "timeout": SQLITE_BUSY_TIMEOUT}
    connect_args.update(kwargs.pop("connect_args", {}))
    sqlite_engine = create_engine(url, echo=echo, connect_args=connect_args, **kwargs)
    event.listen(sqlite_engine, "connect", _enable_sqlite_foreign_keys)
    return sqlite_engine


engine: Engine = create_ladder_engine(DATABASE_URL, echo=SQL_ECHO)


def get_session() -> Generator[Session, None, None]:
    """Get database session"""
    with Session(engine) as session:
        yield session


def create_tables(target: Engine) -> None:
    """Create every ladder table on *target*"""
    import ladder.models  # noqa: F401  registers all tables with SQLModel metadata

    SQLModel.metadata.create_all(target)


def init_db() -> None:
    """Initialize the application database"""
    create_tables(engine)
