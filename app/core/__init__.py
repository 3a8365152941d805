from .config import settings
from .database import engine, SessionLocal, get_db, session_scope, Base, build_engine

__all__ = ["settings", "engine", "SessionLocal", "get_db", "session_scope", "Base", "build_engine"]
