"""
Error types raised while copying a database.

Everything derives from DbCopyError so the entry point can report any
failure with a single handler. Per-collection failures carry the collection
name and the number of documents inserted before the failure.
"""
from typing import Optional


class DbCopyError(Exception):
    """Base class for all copy failures."""


class DatabaseConnectionError(DbCopyError):
    """Source or destination database could not be reached."""


class EnumerationError(DbCopyError):
    """Listing the source collections failed."""


class CollectionReplicationError(DbCopyError):
    """A single collection could not be copied."""

    def __init__(self, collection: str, message: str, transferred: int = 0):
        super().__init__(message)
        self.collection = collection
        self.transferred = transferred


class DropError(CollectionReplicationError):
    """Destination collection could not be dropped."""

    def __init__(self, collection: str, cause: Exception):
        super().__init__(
            collection,
            f"collection drop error {collection}: {cause}",
        )


class IndexReplicationError(CollectionReplicationError):
    """An index could not be read from the source or created on the destination."""

    def __init__(self, collection: str, cause: Exception, index_name: Optional[str] = None):
        if index_name is None:
            message = f"error getting index list for collection {collection}: {cause}"
        else:
            message = f"error creating index {index_name} for collection {collection}: {cause}"
        super().__init__(collection, message)
        self.index_name = index_name


class InsertError(CollectionReplicationError):
    """A document insert failed; earlier inserts are kept."""

    def __init__(self, collection: str, cause: Exception, transferred: int):
        super().__init__(
            collection,
            f"error inserting document into collection {collection} "
            f"after {transferred} documents: {cause}",
            transferred=transferred,
        )


class StreamError(CollectionReplicationError):
    """Reading the source cursor failed mid-copy; earlier inserts are kept."""

    def __init__(self, collection: str, cause: Exception, transferred: int):
        super().__init__(
            collection,
            f"error reading documents from collection {collection} "
            f"after {transferred} documents: {cause}",
            transferred=transferred,
        )


class CountError(CollectionReplicationError):
    """Counting the source documents after a copy failed."""

    def __init__(self, collection: str, cause: Exception, transferred: int):
        super().__init__(
            collection,
            f"error counting documents in collection {collection}: {cause}",
            transferred=transferred,
        )


class DatabaseCopyError(DbCopyError):
    """One or more collections failed while copying with continue_on_error."""

    def __init__(self, failures: list[CollectionReplicationError]):
        names = ", ".join(f.collection for f in failures)
        super().__init__(f"{len(failures)} collection(s) failed: {names}")
        self.failures = failures
