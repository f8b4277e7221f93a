"""金額を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from ..exceptions import PriceConversionError

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """金額を表現する値オブジェクト（非負のDecimal）."""

    value: Decimal

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.value, Decimal):
            raise PriceConversionError(f"Money value must be Decimal: {self.value!r}")
        if not self.value.is_finite():
            raise PriceConversionError(f"Money value must be finite: {self.value!r}")
        if self.value < 0:
            raise ValueError("Money value cannot be negative")

    @classmethod
    def of(cls, value: Any) -> Money:
        """数値表現からMoneyを生成する.

        int / str / float / Decimal / Money を受け付ける。
        None や数値でない文字列は PriceConversionError。
        """
        if isinstance(value, Money):
            return value
        # bool は int のサブクラスだが価格としては不正
        if value is None or isinstance(value, bool):
            raise PriceConversionError(f"Cannot convert price: {value!r}")
        if isinstance(value, float):
            value = repr(value)
        if not isinstance(value, (int, str, Decimal)):
            raise PriceConversionError(f"Cannot convert price: {value!r}")
        try:
            amount = Decimal(value.strip() if isinstance(value, str) else value)
        except InvalidOperation as e:
            raise PriceConversionError(f"Cannot convert price: {value!r}") from e
        return cls(amount)

    @classmethod
    def zero(cls) -> Money:
        """ゼロ円を生成する."""
        return cls(Decimal("0"))

    def add(self, other: Money) -> Money:
        """金額を加算して新しいMoneyを返す."""
        return Money(self.value + other.value)

    def multiply(self, factor: int) -> Money:
        """金額を乗算して新しいMoneyを返す."""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(self.value * factor)

    def rounded(self) -> Money:
        """セント単位に四捨五入したMoneyを返す."""
        return Money(self.value.quantize(CENT, rounding=ROUND_HALF_UP))

    def is_zero(self) -> bool:
        """ゼロか判定."""
        return self.value == 0

    def format(self) -> str:
        """表示用フォーマット（例: "1,000.00"）."""
        return f"{self.rounded().value:,.2f}"

    def __str__(self) -> str:
        """文字列表現."""
        return self.format()
