"""カート明細エンティティ."""
from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, ClassVar, Hashable, Iterator

from ..value_objects import Money


@dataclass(eq=False)
class Item:
    """カートの1明細.

    同じ明細かどうかは identity のみで判定する（名前・価格は含めない）。
    """

    identity: Hashable
    name: str
    unit_price: Money
    quantity: int = 0

    def __post_init__(self) -> None:
        """価格を数値に正規化し、数量を検証する."""
        self.unit_price = Money.of(self.unit_price)
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"Quantity must be an integer: {self.quantity!r}")
        if self.quantity < 0:
            raise ValueError("Quantity cannot be negative")

    def same_line(self, other: Any) -> bool:
        """同一の明細か判定する."""
        return isinstance(other, Item) and self.identity == other.identity

    def line_total(self) -> Money:
        """単価 × 数量."""
        return Money.of(self.unit_price).multiply(self.quantity)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.same_line(other)

    def __hash__(self) -> int:
        return hash(self.identity)


@dataclass(eq=False)
class MemoryItem(Item):
    """連番の identity を持つインメモリ用の明細."""

    _sequence: ClassVar[Iterator[int]] = itertools.count(1)

    identity: Hashable = field(default_factory=lambda: next(MemoryItem._sequence))
    name: str = ""
    unit_price: Money = field(default_factory=Money.zero)

    @classmethod
    def create(cls, name: str, unit_price: Any, quantity: int = 0) -> MemoryItem:
        """新しい連番で明細を作成する."""
        return cls(
            identity=next(cls._sequence),
            name=name,
            unit_price=unit_price,
            quantity=quantity,
        )
