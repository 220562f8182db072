"""
Database connection management for the source and destination MongoDB.
"""
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from dbcopy.core.errors import DatabaseConnectionError

logger = logging.getLogger(__name__)


@dataclass
class ReplicationContext:
    """Both ends of a copy, open for the lifetime of one run."""
    source_client: AsyncIOMotorClient
    source: AsyncIOMotorDatabase
    destination_client: AsyncIOMotorClient
    destination: AsyncIOMotorDatabase


async def connect(uri: str, role: str, timeout_ms: int = 5000) -> tuple[AsyncIOMotorClient, AsyncIOMotorDatabase]:
    """
    Connect to MongoDB and resolve the database named in the URI.

    Raises:
        DatabaseConnectionError: on an empty or invalid URI, a URI without a
            database name, or an unreachable server
    """
    if not uri:
        raise DatabaseConnectionError(f"{role} database URL string is empty")

    try:
        client = AsyncIOMotorClient(uri, serverSelectionTimeoutMS=timeout_ms)
    except PyMongoError as e:
        raise DatabaseConnectionError(f"invalid {role} database URL: {e}") from e

    try:
        # Test connection
        await client.admin.command("ping")
        db = client.get_default_database()
    except PyMongoError as e:
        client.close()
        raise DatabaseConnectionError(f"failed to connect to the {role} database: {e}") from e

    logger.info(f"Connected to {role} database {db.name}")
    return client, db


@asynccontextmanager
async def open_databases(
    source_uri: str,
    destination_uri: str,
    timeout_ms: int = 5000,
) -> AsyncIterator[ReplicationContext]:
    """
    Open both databases and close both clients on every exit path.

    Usage:
        async with open_databases(src, dst) as ctx:
            await DatabaseCopier(ctx.source, ctx.destination).copy_database()
    """
    # Check both before connecting so a missing destination URI never opens
    # a source client
    if not source_uri:
        raise DatabaseConnectionError("source database URL string is empty")
    if not destination_uri:
        raise DatabaseConnectionError("destination database URL string is empty")

    source_client, source = await connect(source_uri, "source", timeout_ms)
    try:
        destination_client, destination = await connect(destination_uri, "destination", timeout_ms)
        try:
            yield ReplicationContext(
                source_client=source_client,
                source=source,
                destination_client=destination_client,
                destination=destination,
            )
        finally:
            destination_client.close()
    finally:
        source_client.close()
        logger.info("Database connections closed")
