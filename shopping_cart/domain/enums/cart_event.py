"""カート状態遷移イベントの列挙型."""
from enum import Enum


class CartEvent(Enum):
    """状態遷移を起こすイベント."""

    CONTINUE_SHOPPING = "continue_shopping"
    CHECKOUT = "checkout"
    CHECK_PAYMENT = "check_payment"
    PAYMENT_SUCCESSFUL = "payment_successful"
    PAYMENT_FAILED = "payment_failed"
