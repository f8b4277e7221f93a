"""状態遷移フックのインターフェース."""
from __future__ import annotations

from ..enums import CartEvent, CartState


class CartHooks:
    """状態機械が呼び出すガード・入退場フック.

    既定実装はすべての遷移を許可し、何もしない。
    """

    def guard(self, event: CartEvent) -> bool:
        """Falseを返すと遷移を止める."""
        return True

    def on_enter(self, state: CartState) -> None:
        """状態に入ったときに呼ばれる."""
        pass

    def on_exit(self, state: CartState) -> None:
        """状態を出るときに呼ばれる."""
        pass
