"""
Service layer for collection and database copying.
"""
from dbcopy.services.replicator import CollectionReplicator
from dbcopy.services.copier import DatabaseCopier

__all__ = [
    "CollectionReplicator",
    "DatabaseCopier",
]
