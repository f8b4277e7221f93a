"""列挙型モジュール."""
from .cart_event import CartEvent
from .cart_state import CartState

__all__ = [
    "CartEvent",
    "CartState",
]
