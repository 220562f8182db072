"""
Core module - Error types and operator confirmation.
"""
from dbcopy.core.confirmation import confirm_destination_clear
from dbcopy.core.errors import (
    DbCopyError,
    DatabaseConnectionError,
    EnumerationError,
    CollectionReplicationError,
    DropError,
    IndexReplicationError,
    InsertError,
    StreamError,
    CountError,
    DatabaseCopyError,
)

__all__ = [
    "confirm_destination_clear",
    "DbCopyError",
    "DatabaseConnectionError",
    "EnumerationError",
    "CollectionReplicationError",
    "DropError",
    "IndexReplicationError",
    "InsertError",
    "StreamError",
    "CountError",
    "DatabaseCopyError",
]
