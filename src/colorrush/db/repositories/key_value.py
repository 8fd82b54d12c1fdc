"""Key-value repository for database operations."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from colorrush.db.models import KeyValueEntry

logger = logging.getLogger(__name__)


class KeyValueRepository:
    """Repository for string values stored under stable keys."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: The database session to use
        """
        self.session = session

    async def get(self, key: str) -> str | None:
        """Get the value stored under a key.

        Args:
            key: The key

        Returns:
            The stored value, or None if not found
        """
        result = await self.session.execute(
            select(KeyValueEntry.value).where(KeyValueEntry.key == key)
        )
        return result.scalar_one_or_none()

    async def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any existing value.

        Args:
            key: The key
            value: The value to store
        """
        result = await self.session.execute(
            select(KeyValueEntry).where(KeyValueEntry.key == key)
        )
        entry = result.scalar_one_or_none()
        if entry is None:
            self.session.add(KeyValueEntry(key=key, value=value))
        else:
            entry.value = value
        await self.session.flush()

        logger.debug(f"Stored value for key {key}")

    async def delete(self, key: str) -> bool:
        """Remove a key. Returns True if it existed."""
        result = await self.session.execute(
            delete(KeyValueEntry).where(KeyValueEntry.key == key)
        )
        removed = result.rowcount > 0
        if removed:
            logger.debug(f"Deleted key {key}")
        return removed
