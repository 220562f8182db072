"""
Whole-database copy, one collection at a time.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from dbcopy.core.errors import CollectionReplicationError, CountError, DatabaseCopyError
from dbcopy.database.catalog import list_collections
from dbcopy.schemas.transfer import TransferResult
from dbcopy.services.replicator import CollectionReplicator

logger = logging.getLogger(__name__)


class DatabaseCopier:
    """Copies every non-system collection from source to destination."""

    def __init__(
        self,
        source: AsyncIOMotorDatabase,
        destination: AsyncIOMotorDatabase,
        continue_on_error: bool = False,
    ):
        """
        Args:
            source: Database to read from
            destination: Database whose matching collections are replaced
            continue_on_error: Keep going after a collection fails and raise
                DatabaseCopyError at the end instead of stopping at the first failure
        """
        self.source = source
        self.destination = destination
        self.continue_on_error = continue_on_error
        self.replicator = CollectionReplicator(source, destination)

    async def copy_database(self) -> list[TransferResult]:
        """
        Copy all collections sequentially in enumeration order.

        Returns:
            One TransferResult per copied collection

        Raises:
            EnumerationError: source collections could not be listed
            CollectionReplicationError: first collection failure (default policy)
            DatabaseCopyError: all collection failures (continue_on_error)
        """
        collections = await list_collections(self.source)
        logger.info(f"Found {len(collections)} collection(s) to copy from {self.source.name}")

        results: list[TransferResult] = []
        failures: list[CollectionReplicationError] = []

        for collection in collections:
            try:
                results.append(await self.copy_collection(collection))
            except CollectionReplicationError as e:
                if not self.continue_on_error:
                    raise
                logger.error(f"Collection {collection} failed after {e.transferred} document(s): {e}")
                failures.append(e)

        if failures:
            raise DatabaseCopyError(failures)
        return results

    async def copy_collection(self, collection: str) -> TransferResult:
        """Replicate one collection and log transferred against the source count."""
        transferred = await self.replicator.replicate(collection)

        try:
            source_count = await self.source[collection].count_documents({})
        except PyMongoError as e:
            raise CountError(collection, e, transferred) from e

        result = TransferResult(
            collection=collection,
            transferred=transferred,
            source_count=source_count,
        )
        logger.info(f"collection {collection} was copied (documents: {transferred}/{source_count})")
        if not result.complete:
            logger.warning(
                f"Source collection {collection} changed during the copy "
                f"({transferred} copied, {source_count} now in source)"
            )
        return result
