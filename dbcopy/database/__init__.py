"""
Database module - MongoDB connections and source catalog.
"""
from dbcopy.database.catalog import list_collections, is_system_collection
from dbcopy.database.connections import ReplicationContext, connect, open_databases

__all__ = [
    "list_collections",
    "is_system_collection",
    "ReplicationContext",
    "connect",
    "open_databases",
]
