"""カート状態の列挙型."""
from enum import Enum


class CartState(Enum):
    """チェックアウトのライフサイクル状態."""

    SHOPPING = "shopping"
    CHECKOUT = "checkout"
    VERIFYING_PAYMENT = "verifying_payment"
    COMPLETED = "completed"
    FAILED = "failed"

    def is_terminal(self) -> bool:
        """終端状態か判定する."""
        return self == CartState.COMPLETED
