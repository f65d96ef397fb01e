from typing import Any
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from collections.abc import Generator
from app.core.config import settings


def _engine_options(database_url: str) -> dict[str, Any]:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {"pool_pre_ping": True}

    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    # An in-memory database lives as long as its connection, share one.
    if url.database in (None, "", ":memory:"):
        options["poolclass"] = StaticPool
    return options


def build_engine(database_url: str) -> Engine:
    eng = create_engine(database_url, future=True, **_engine_options(database_url))

    if eng.dialect.name == "sqlite":
        @event.listens_for(eng, "connect")
        def _enable_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return eng


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)

def get_db() -> Generator[Session, None, None]:
    """
    One session per request, closed once the response is produced.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
