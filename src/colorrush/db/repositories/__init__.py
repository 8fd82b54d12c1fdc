"""Database repositories."""

from colorrush.db.repositories.key_value import KeyValueRepository

__all__ = [
    "KeyValueRepository",
]
