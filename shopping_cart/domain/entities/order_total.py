"""注文合計エンティティ."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Iterable, Iterator

if TYPE_CHECKING:
    from ..ports import TotalStrategy
    from .cart import Cart


@dataclass(frozen=True)
class OrderTotal:
    """合計戦略が計算した名前付きの金額行（税・送料・割引など）."""

    name: str
    value: Decimal

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.name:
            raise ValueError("OrderTotal name cannot be empty")
        value = self.value
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            raise TypeError(f"OrderTotal value must be numeric: {value!r}")
        if isinstance(value, float):
            value = repr(value)
        object.__setattr__(self, "value", Decimal(value))

    @classmethod
    def from_result(cls, result: Any) -> OrderTotal:
        """戦略の戻り値（OrderTotal または 2要素の (名前, 金額)）から生成する."""
        if isinstance(result, OrderTotal):
            return result
        if (
            isinstance(result, Sequence)
            and not isinstance(result, (str, bytes))
            and len(result) == 2
        ):
            name, value = result
            return cls(name=name, value=value)
        raise TypeError(f"Total strategy returned unsupported value: {result!r}")


@dataclass(frozen=True)
class OrderTotalCollection:
    """設定された戦略順に並んだ OrderTotal の列.

    アクセスのたびに再計算し、永続化しない。
    """

    totals: tuple[OrderTotal, ...] = ()

    @classmethod
    def compute(
        cls, cart: Cart, strategies: Iterable[TotalStrategy]
    ) -> OrderTotalCollection:
        """各戦略をカートに適用して合計行を集める.

        どれか1つの戦略が失敗した場合、その例外をそのまま送出する。
        """
        return cls(tuple(OrderTotal.from_result(strategy(cart)) for strategy in strategies))

    def total(self) -> Decimal:
        """全合計行の和."""
        return sum((t.value for t in self.totals), Decimal("0"))

    def names(self) -> list[str]:
        """合計行の名前一覧."""
        return [t.name for t in self.totals]

    def get(self, name: str) -> OrderTotal | None:
        """名前で合計行を取得する."""
        for t in self.totals:
            if t.name == name:
                return t
        return None

    def __iter__(self) -> Iterator[OrderTotal]:
        return iter(self.totals)

    def __len__(self) -> int:
        return len(self.totals)

    def __getitem__(self, index: int) -> OrderTotal:
        return self.totals[index]
