"""ポートモジュール."""
from .cart_hooks import CartHooks
from .storage_engine import StorageEngine
from .total_strategy import TotalResult, TotalStrategy

__all__ = [
    "CartHooks",
    "StorageEngine",
    "TotalResult",
    "TotalStrategy",
]
