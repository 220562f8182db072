"""
Source collection listing.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from dbcopy.core.errors import EnumerationError

logger = logging.getLogger(__name__)

# Any collection whose name contains this marker is left out of the copy
SYSTEM_MARKER = "system"


def is_system_collection(name: str) -> bool:
    """True for internal/administrative collections (case-sensitive substring)."""
    return SYSTEM_MARKER in name


async def list_collections(db: AsyncIOMotorDatabase) -> list[str]:
    """
    List the collections to copy from the source database.

    Args:
        db: Source database

    Returns:
        Collection names in driver order, system collections excluded

    Raises:
        EnumerationError: if the server could not list collections
    """
    try:
        names = await db.list_collection_names()
    except PyMongoError as e:
        raise EnumerationError(f"error listing collections in {db.name}: {e}") from e

    collections = []
    for name in names:
        if is_system_collection(name):
            logger.debug(f"Skipping system collection: {name}")
            continue
        if name not in collections:
            collections.append(name)
    return collections
