"""ドメイン層モジュール."""
from .entities import ALL, Cart, Item, MemoryItem, OrderTotal, OrderTotalCollection
from .enums import CartEvent, CartState
from .exceptions import CartError, PriceConversionError, StorageError
from .identifiers import InvoiceId
from .ports import CartHooks, StorageEngine, TotalStrategy
from .services import (
    CartStateMachine,
    FlatShippingTotal,
    PerItemShippingTotal,
    TaxTotal,
)
from .value_objects import CartConfig, Money, Transition

__all__ = [
    # Identifiers
    "InvoiceId",
    # Enums
    "CartEvent",
    "CartState",
    # Value Objects
    "CartConfig",
    "Money",
    "Transition",
    # Entities
    "ALL",
    "Cart",
    "Item",
    "MemoryItem",
    "OrderTotal",
    "OrderTotalCollection",
    # Ports
    "CartHooks",
    "StorageEngine",
    "TotalStrategy",
    # Services
    "CartStateMachine",
    "FlatShippingTotal",
    "PerItemShippingTotal",
    "TaxTotal",
    # Exceptions
    "CartError",
    "PriceConversionError",
    "StorageError",
]
