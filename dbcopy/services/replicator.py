"""
Collection replication: drop, index, stream.

The three steps run strictly in order for one collection. Every index is
created before the first insert so unique and sparse constraints hold for
the whole load. A failure stops the collection where it is; nothing already
written to the destination is rolled back.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import OperationFailure, PyMongoError

from dbcopy.core.errors import DropError, IndexReplicationError, InsertError, StreamError
from dbcopy.schemas.transfer import ID_INDEX_NAME, IndexSpec

logger = logging.getLogger(__name__)

# Server error code for a missing collection
NAMESPACE_NOT_FOUND = 26
# Older servers only report the condition in the message
NAMESPACE_NOT_FOUND_MESSAGE = "ns not found"


def is_namespace_not_found(error: PyMongoError) -> bool:
    """True when a drop failed only because the collection does not exist."""
    if not isinstance(error, OperationFailure):
        return False
    if error.code == NAMESPACE_NOT_FOUND:
        return True
    return NAMESPACE_NOT_FOUND_MESSAGE in str(error)


class CollectionReplicator:
    """Copies single collections from the source to the destination database."""

    def __init__(self, source: AsyncIOMotorDatabase, destination: AsyncIOMotorDatabase):
        self.source = source
        self.destination = destination

    async def replicate(self, collection: str) -> int:
        """
        Replace the destination collection with a copy of the source one.

        Args:
            collection: Collection name (same on both sides)

        Returns:
            Number of documents inserted

        Raises:
            DropError: destination could not be cleared
            IndexReplicationError: an index could not be read or created
            InsertError: a document insert failed (partial count attached)
            StreamError: the source cursor failed (partial count attached)
        """
        src_col = self.source[collection]
        dst_col = self.destination[collection]

        await self._drop(collection, dst_col)
        await self._replicate_indexes(collection, src_col, dst_col)
        return await self._stream_documents(collection, src_col, dst_col)

    # ==================== Steps ====================

    async def _drop(self, collection: str, dst_col: AsyncIOMotorCollection) -> None:
        logger.info(f"dropping collection: {collection}")
        try:
            await dst_col.drop()
        except PyMongoError as e:
            if not is_namespace_not_found(e):
                raise DropError(collection, e) from e
            logger.debug(f"Collection {collection} not found on destination, nothing to drop")

    async def get_index_specs(self, collection: str, src_col: AsyncIOMotorCollection) -> list[IndexSpec]:
        """Read the source indexes in server order, without the implicit _id index."""
        try:
            info = await src_col.index_information()
        except PyMongoError as e:
            raise IndexReplicationError(collection, e) from e

        return [
            IndexSpec.from_index_information(name, index_info)
            for name, index_info in info.items()
            if name != ID_INDEX_NAME
        ]

    async def _replicate_indexes(
        self,
        collection: str,
        src_col: AsyncIOMotorCollection,
        dst_col: AsyncIOMotorCollection,
    ) -> None:
        logger.info(f"setting indexes for a collection: {collection}")
        for spec in await self.get_index_specs(collection, src_col):
            try:
                await dst_col.create_index(spec.keys, name=spec.name, **spec.options)
            except PyMongoError as e:
                raise IndexReplicationError(collection, e, index_name=spec.name) from e
            logger.debug(f"Index {spec.name} created on {collection}")

    async def _stream_documents(
        self,
        collection: str,
        src_col: AsyncIOMotorCollection,
        dst_col: AsyncIOMotorCollection,
    ) -> int:
        logger.info(f"insert documents into the destination collection: {collection}")
        cursor = src_col.find({})
        transferred = 0

        try:
            async for doc in cursor:
                try:
                    # Documents are opaque, inserted exactly as read
                    await dst_col.insert_one(doc)
                except PyMongoError as e:
                    await cursor.close()
                    raise InsertError(collection, e, transferred) from e
                transferred += 1
        except PyMongoError as e:
            # Source side failed (cursor killed, connection lost)
            await cursor.close()
            raise StreamError(collection, e, transferred) from e

        return transferred
