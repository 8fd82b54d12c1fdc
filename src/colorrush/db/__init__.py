"""Database layer."""

from colorrush.db.models import Base, KeyValueEntry
from colorrush.db.repositories import KeyValueRepository
from colorrush.db.session import async_session_factory, get_engine, get_session, init_models

__all__ = [
    "Base",
    "KeyValueEntry",
    "KeyValueRepository",
    "async_session_factory",
    "get_engine",
    "get_session",
    "init_models",
]
