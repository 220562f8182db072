"""
Global test fixtures for dbcopy.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor) source and destination databases
- Sample documents and index definitions
- Fake driver collections and cursors for failure injection
"""

from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def source_db(mock_async_mongo_client):
    """Provide an empty mock source database."""
    yield mock_async_mongo_client["source_db"]


@pytest_asyncio.fixture
async def destination_db(mock_async_mongo_client):
    """Provide an empty mock destination database."""
    yield mock_async_mongo_client["destination_db"]


@pytest.fixture
def product_documents() -> list[dict]:
    """Three documents with heterogeneous shapes."""
    return [
        {"_id": 1, "sku": "A-100", "category": "tools", "price": 12.5},
        {"_id": 2, "sku": "B-200", "category": "garden", "price": 3.0, "tags": ["outdoor"]},
        {"_id": 3, "sku": "C-300", "category": "tools", "dimensions": {"w": 10, "h": 4}},
    ]


@pytest_asyncio.fixture
async def populated_source_db(source_db, product_documents):
    """
    Source database with a `products` collection holding two secondary
    indexes and three documents.
    """
    await source_db.products.create_index("sku", unique=True, name="sku_unique")
    await source_db.products.create_index(
        [("category", 1), ("price", -1)], name="category_price"
    )
    for doc in product_documents:
        await source_db.products.insert_one(dict(doc))
    yield source_db


# =============================================================================
# Fake Driver Objects (failure injection)
# =============================================================================

class FakeCursor:
    """
    Forward-only async cursor over a fixed list of documents.

    With `fail_on` set, the fail_on-th fetch (1-based) raises `error`
    instead of yielding a document.
    """

    def __init__(
        self,
        documents: list[dict],
        fail_on: Optional[int] = None,
        error: Optional[Exception] = None,
    ):
        self._documents = iter(documents)
        self._fetches = 0
        self._fail_on = fail_on
        self._error = error
        self.close = AsyncMock()

    def __aiter__(self):
        return self

    async def __anext__(self):
        self._fetches += 1
        if self._fetches == self._fail_on:
            raise self._error
        try:
            return next(self._documents)
        except StopIteration:
            raise StopAsyncIteration


def make_source_collection(
    documents: list[dict],
    indexes: Optional[dict[str, Any]] = None,
) -> MagicMock:
    """
    Build a fake source collection.

    Args:
        documents: Documents yielded by find({})
        indexes: index_information() result (defaults to just the _id index)
    """
    if indexes is None:
        indexes = {"_id_": {"key": [("_id", 1)], "v": 2}}
    collection = MagicMock()
    collection.index_information = AsyncMock(return_value=indexes)
    collection.find = MagicMock(return_value=FakeCursor(documents))
    collection.count_documents = AsyncMock(return_value=len(documents))
    return collection


def make_destination_collection(calls: Optional[list] = None) -> MagicMock:
    """
    Build a fake destination collection.

    When `calls` is given, every drop / create_index / insert_one is
    appended to it so tests can check ordering.
    """
    log = calls if calls is not None else []
    collection = MagicMock()
    collection.drop = AsyncMock(side_effect=lambda: log.append(("drop",)))
    collection.create_index = AsyncMock(
        side_effect=lambda keys, **kwargs: log.append(("create_index", kwargs["name"]))
    )
    collection.insert_one = AsyncMock(
        side_effect=lambda doc: log.append(("insert_one", doc["_id"]))
    )
    return collection


@pytest.fixture
def make_source():
    """Factory for fake source collections."""
    return make_source_collection


@pytest.fixture
def make_cursor():
    """Factory for fake cursors, optionally failing mid-iteration."""
    return FakeCursor


@pytest.fixture
def make_destination():
    """Factory for fake destination collections."""
    return make_destination_collection


@pytest.fixture
def two_indexes() -> dict[str, Any]:
    """index_information() output with _id plus two secondary indexes."""
    return {
        "_id_": {"key": [("_id", 1)], "v": 2},
        "email_1": {"key": [("email", 1)], "v": 2, "unique": True},
        "created_at_-1": {"key": [("created_at", -1)], "v": 2, "sparse": True},
    }
