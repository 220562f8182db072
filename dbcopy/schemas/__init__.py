"""
Pydantic schemas for index definitions and copy results.
"""
from dbcopy.schemas.transfer import IndexSpec, TransferResult

__all__ = [
    "IndexSpec",
    "TransferResult",
]
