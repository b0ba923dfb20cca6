"""Database package."""

from app.db.session import Base, SessionLocal, atomic, engine, get_db

__all__ = ["Base", "SessionLocal", "atomic", "engine", "get_db"]
