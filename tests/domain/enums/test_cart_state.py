"""CartState・CartEventのテスト."""
from shopping_cart.domain.enums import CartEvent, CartState


class TestCartState:
    """CartStateの単体テスト."""

    def test_5つの状態を持つ(self) -> None:
        assert {s.value for s in CartState} == {
            "shopping",
            "checkout",
            "verifying_payment",
            "completed",
            "failed",
        }

    def test_completedのみ終端状態(self) -> None:
        assert [s for s in CartState if s.is_terminal()] == [CartState.COMPLETED]


class TestCartEvent:
    """CartEventの単体テスト."""

    def test_5つのイベントを持つ(self) -> None:
        assert {e.value for e in CartEvent} == {
            "continue_shopping",
            "checkout",
            "check_payment",
            "payment_successful",
            "payment_failed",
        }
