import threading
from contextlib import contextmanager
from typing import Dict, Optional
from uuid import uuid4

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import QueuePool
from .config import settings

# Base class for models
Base = declarative_base()

MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")

# One lock per in-memory database, held by a unit of work from open to close
_unit_of_work_locks: Dict[str, threading.Lock] = {}

def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine.

    An in-memory SQLite URL becomes a named shared-cache database. Each session
    checks out its own connection, and an anchor connection keeps the data
    alive until the engine is disposed.
    """
    kwargs = {"echo": echo}
    in_memory = database_url in MEMORY_URLS
    if database_url.startswith("sqlite"):
        # Foreign keys are declared but not enforced by SQLite (no PRAGMA),
        # so child rows may reference unknown customers. Cascades run in the ORM.
        kwargs["connect_args"] = {"check_same_thread": False}
        if in_memory:
            database_url = f"sqlite:///file:customers-{uuid4().hex}?mode=memory&cache=shared&uri=true"
            # mode=memory would otherwise get one connection per thread
            kwargs["poolclass"] = QueuePool
    else:
        kwargs["pool_pre_ping"] = True

    engine = create_engine(database_url, **kwargs)
    if in_memory:
        _share_memory_database(engine)
    return engine

def _share_memory_database(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def read_uncommitted(dbapi_connection, connection_record):
        # Shared-cache table locks fail instead of waiting; readers skip them
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA read_uncommitted = 1")
        cursor.close()

    anchor = engine.connect()
    key = str(engine.url)
    _unit_of_work_locks[key] = threading.Lock()

    @event.listens_for(engine, "engine_disposed")
    def drop_database(disposed_engine):
        anchor.invalidate()
        anchor.close()
        _unit_of_work_locks.pop(key, None)

def unit_of_work_lock(bind: Optional[Engine]) -> Optional[threading.Lock]:
    if bind is None:
        return None
    return _unit_of_work_locks.get(str(bind.url))

@contextmanager
def session_scope(factory: Optional[sessionmaker] = None):
    """Session for one unit of work, closed (and rolled back if uncommitted) on exit.

    Units of work on an in-memory database run one at a time, so a commit
    never races another session's uncommitted writes.
    """
    factory = factory or SessionLocal
    lock = unit_of_work_lock(factory.kw.get("bind"))
    if lock is not None:
        lock.acquire()
    try:
        db = factory()
        try:
            yield db
        finally:
            db.close()
    finally:
        if lock is not None:
            lock.release()

# Create engine
engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Dependency for FastAPI
def get_db():
    with session_scope() as db:
        yield db
