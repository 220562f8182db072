"""
Index and transfer result schemas.
"""
from typing import Any

from pydantic import BaseModel, Field

# Not create_index options: key and name are passed explicitly, v and ns are
# set by the server.
SERVER_INDEX_FIELDS = ("key", "name", "v", "ns")

ID_INDEX_NAME = "_id_"


class IndexSpec(BaseModel):
    """Secondary index definition read from a source collection."""
    name: str = Field(..., description="Index name")
    keys: list[tuple[str, Any]] = Field(..., description="Ordered (field, direction) pairs")
    options: dict[str, Any] = Field(default_factory=dict, description="unique, sparse, TTL and other flags")

    @classmethod
    def from_index_information(cls, name: str, info: dict[str, Any]) -> "IndexSpec":
        """Build from one entry of Collection.index_information()."""
        options = {k: v for k, v in info.items() if k not in SERVER_INDEX_FIELDS}
        return cls(name=name, keys=list(info["key"]), options=options)


class TransferResult(BaseModel):
    """Outcome of copying one collection."""
    collection: str = Field(..., description="Collection name")
    transferred: int = Field(..., ge=0, description="Documents inserted into the destination")
    source_count: int = Field(..., ge=0, description="Source document count taken after the copy")

    @property
    def complete(self) -> bool:
        """False when the source changed during the copy."""
        return self.transferred == self.source_count
