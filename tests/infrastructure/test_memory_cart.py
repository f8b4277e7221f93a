"""MemoryCart のテスト."""
from shopping_cart.domain.entities import Cart, Item
from shopping_cart.domain.identifiers import InvoiceId
from shopping_cart.infrastructure import MemoryCart, MemoryStorageEngine


class TestMemoryCart:
    """MemoryCartの単体テスト."""

    def test_文字列の請求書IDを受け付ける(self) -> None:
        cart = MemoryCart("inv-001")
        assert cart.invoice_id == InvoiceId("inv-001")
        assert isinstance(cart, Cart)

    def test_既定ではMemoryStorageEngineを使う(self) -> None:
        assert isinstance(MemoryCart("inv-001").storage, MemoryStorageEngine)

    def test_ストレージを共有すると同じ明細が見える(self) -> None:
        storage = MemoryStorageEngine()
        first = MemoryCart("inv-001", storage=storage)
        first.add_to_cart(Item(identity=1, name="Widget", unit_price=10), 2)
        second = MemoryCart("inv-001", storage=storage)
        assert second.quantity == 2
