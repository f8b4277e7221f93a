"""値オブジェクトモジュール."""
from .cart_config import CartConfig
from .money import Money
from .transition import DEFAULT_TRANSITIONS, Transition

__all__ = [
    "CartConfig",
    "DEFAULT_TRANSITIONS",
    "Money",
    "Transition",
]
