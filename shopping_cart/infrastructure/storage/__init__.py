"""ストレージエンジン実装モジュール."""
from .dynamodb_storage_engine import DynamoDBStorageEngine, RecordMapping
from .memory_storage_engine import MemoryStorageEngine

__all__ = [
    "DynamoDBStorageEngine",
    "MemoryStorageEngine",
    "RecordMapping",
]
