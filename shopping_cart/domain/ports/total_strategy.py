"""注文合計戦略のインターフェース."""
from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Protocol, Union

if TYPE_CHECKING:
    from ..entities import Cart, OrderTotal

TotalResult = Union[tuple[str, Decimal], "OrderTotal"]


class TotalStrategy(Protocol):
    """カートから名前付きの金額行を1件計算する戦略.

    sub_total, quantity, 明細を読み取ってよいが、カートを変更してはならない。
    """

    def __call__(self, cart: Cart) -> TotalResult:
        """(名前, 金額) の組または OrderTotal を返す."""
        ...
