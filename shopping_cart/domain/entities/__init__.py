"""エンティティモジュール."""
from .cart import ALL, Cart
from .item import Item, MemoryItem
from .order_total import OrderTotal, OrderTotalCollection

__all__ = [
    "ALL",
    "Cart",
    "Item",
    "MemoryItem",
    "OrderTotal",
    "OrderTotalCollection",
]
