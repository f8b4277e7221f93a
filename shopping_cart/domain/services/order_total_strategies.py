"""標準の注文合計戦略."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Any

from ..value_objects import Money
from ..value_objects.money import CENT

if TYPE_CHECKING:
    from ..entities import Cart


def _to_decimal(value: Any) -> Decimal:
    return Money.of(value).value


@dataclass(frozen=True)
class TaxTotal:
    """小計に税率を掛けた税額."""

    rate: Decimal
    name: str = "Tax"

    def __post_init__(self) -> None:
        """バリデーション."""
        object.__setattr__(self, "rate", _to_decimal(self.rate))

    def __call__(self, cart: Cart) -> tuple[str, Decimal]:
        """税額を計算する."""
        tax = cart.sub_total.value * self.rate
        return self.name, tax.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class FlatShippingTotal:
    """定額送料。free_over 以上の小計、または空カートでは0."""

    amount: Decimal
    name: str = "Shipping"
    free_over: Decimal | None = None

    def __post_init__(self) -> None:
        """バリデーション."""
        object.__setattr__(self, "amount", _to_decimal(self.amount))
        if self.free_over is not None:
            object.__setattr__(self, "free_over", _to_decimal(self.free_over))

    def __call__(self, cart: Cart) -> tuple[str, Decimal]:
        """送料を計算する."""
        if cart.is_empty():
            return self.name, Decimal("0.00")
        if self.free_over is not None and cart.sub_total.value >= self.free_over:
            return self.name, Decimal("0.00")
        return self.name, self.amount


@dataclass(frozen=True)
class PerItemShippingTotal:
    """数量1点あたりの送料."""

    amount_per_item: Decimal
    name: str = "Shipping"

    def __post_init__(self) -> None:
        """バリデーション."""
        object.__setattr__(self, "amount_per_item", _to_decimal(self.amount_per_item))

    def __call__(self, cart: Cart) -> tuple[str, Decimal]:
        """送料を計算する."""
        return self.name, self.amount_per_item * cart.quantity
