# app/db.py

import logging

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, create_engine

from app.config import DB_ECHO, DB_SSLMODE

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = DB_ECHO) -> Engine:
    """Create the engine for the given URL with driver-specific connect args."""
    if database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql://", 1)

    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False  # required for SQLite + FastAPI
    elif database_url.startswith("postgresql"):
        connect_args["sslmode"] = DB_SSLMODE

    engine = create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        connect_args=connect_args,
    )

    if engine.dialect.name == "sqlite":
        # SQLite ignores REFERENCES clauses unless asked per connection
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    logger.info(f"Database engine created for dialect {engine.dialect.name}")
    return engine


def init_db(engine: Engine) -> None:
    # Import models here so the tables are registered on the metadata
    from app import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


# Dependency: one session per request, bound to the app's engine
def get_session(request: Request):
    with Session(request.app.state.engine) as session:
        yield session
