"""ドメインサービスモジュール."""
from .cart_state_machine import CartStateMachine
from .order_total_strategies import FlatShippingTotal, PerItemShippingTotal, TaxTotal

__all__ = [
    "CartStateMachine",
    "FlatShippingTotal",
    "PerItemShippingTotal",
    "TaxTotal",
]
