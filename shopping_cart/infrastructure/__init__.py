"""インフラストラクチャ層モジュール."""
from .memory_cart import MemoryCart
from .storage import DynamoDBStorageEngine, MemoryStorageEngine, RecordMapping

__all__ = [
    "DynamoDBStorageEngine",
    "MemoryCart",
    "MemoryStorageEngine",
    "RecordMapping",
]
