"""Database engine and session management."""

from tracker.db.session import Base, SessionLocal, check_db_connection, engine, get_db, init_db

__all__ = ["Base", "SessionLocal", "check_db_connection", "engine", "get_db", "init_db"]
