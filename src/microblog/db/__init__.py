"""Store access: engine, session factory and the request session dependency."""

from .session import Base, SessionLocal, create_tables, get_db, make_engine

__all__ = ["Base", "SessionLocal", "create_tables", "get_db", "make_engine"]
