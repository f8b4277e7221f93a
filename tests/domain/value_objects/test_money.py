"""Moneyのテスト."""
from decimal import Decimal

import pytest

from shopping_cart.domain.exceptions import PriceConversionError
from shopping_cart.domain.value_objects import Money


class TestMoney:
    """Moneyの単体テスト."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (10, Decimal("10")),
            ("10.50", Decimal("10.50")),
            (Decimal("3.25"), Decimal("3.25")),
            (0.1, Decimal("0.1")),
        ],
    )
    def test_ofで数値表現から生成(self, raw, expected) -> None:
        assert Money.of(raw).value == expected

    def test_ofにMoneyを渡すとそのまま返す(self) -> None:
        money = Money.of(5)
        assert Money.of(money) is money

    @pytest.mark.parametrize("raw", [None, "abc", "", True, object(), "NaN", "Infinity"])
    def test_数値に変換できない価格はPriceConversionError(self, raw) -> None:
        with pytest.raises(PriceConversionError):
            Money.of(raw)

    def test_PriceConversionErrorはValueErrorでもある(self) -> None:
        with pytest.raises(ValueError):
            Money.of("not a price")

    def test_負の金額はエラー(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            Money.of(-1)

    def test_addとmultiply(self) -> None:
        assert Money.of("1.25").add(Money.of("2.50")) == Money.of("3.75")
        assert Money.of("10.00").multiply(5) == Money.of("50.00")

    def test_負の係数での乗算はエラー(self) -> None:
        with pytest.raises(ValueError):
            Money.of(1).multiply(-1)

    def test_zero(self) -> None:
        assert Money.zero().is_zero() is True
        assert Money.zero().value == 0

    def test_formatは小数2桁で桁区切り(self) -> None:
        assert Money.of("1234.5").format() == "1,234.50"
        assert str(Money.of("0.005")) == "0.01"
