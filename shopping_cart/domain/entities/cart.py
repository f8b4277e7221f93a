"""カート集約ルート."""
from __future__ import annotations

from decimal import Decimal
from typing import Callable, Final, Iterator, Literal, Union

from ..enums import CartEvent, CartState
from ..identifiers import InvoiceId
from ..ports import CartHooks, StorageEngine
from ..services import CartStateMachine
from ..value_objects import CartConfig, Money
from .item import Item
from .order_total import OrderTotalCollection

ALL: Final = "all"

RemoveQuantity = Union[int, Literal["all"]]


class Cart(CartHooks):
    """明細コレクションとチェックアウト状態機械を持つカート.

    明細の保存は束縛されたストレージエンジンに委譲する。
    invoice_id は具象クラスで必ずオーバーライドすること。

        cart.add_to_cart(item, 5)
        cart.quantity  # => 5
        cart.checkout()  # => True
        cart.state  # => CartState.CHECKOUT

    guard_<イベント名> が False を返すと遷移は止まり、状態は変わらない。
    enter_<状態名> / exit_<状態名> は遷移のたびに呼ばれる。
    """

    def __init__(
        self,
        storage: StorageEngine | None = None,
        config: CartConfig | None = None,
        hooks: CartHooks | None = None,
        state: CartState | None = None,
    ) -> None:
        """初期化.

        storage を省略すると新しい MemoryStorageEngine を使う。
        state を渡すと永続化済みの状態から復元する。
        hooks を省略するとカート自身のガード・フックを使う。
        """
        if storage is None:
            from shopping_cart.infrastructure.storage.memory_storage_engine import (
                MemoryStorageEngine,
            )

            storage = MemoryStorageEngine()
        self._storage = storage
        self._config = config or CartConfig.default()
        self._state_machine = CartStateMachine(
            hooks=hooks if hooks is not None else self,
            transitions=self._config.transitions,
            initial_state=state if state is not None else self._config.initial_state,
        )

    @property
    def invoice_id(self) -> InvoiceId:
        """このカート固有の請求書ID."""
        raise NotImplementedError(
            f"{type(self).__name__} must override invoice_id"
        )

    @property
    def config(self) -> CartConfig:
        """カート設定."""
        return self._config

    @property
    def storage(self) -> StorageEngine:
        """束縛されたストレージエンジン."""
        return self._storage

    # --- 明細操作 ---

    def add_to_cart(self, item: Item, quantity: int = 1) -> Item:
        """明細を追加する.

        同じ identity の明細が既にあれば、その数量を加算する（渡された item は保存しない）。
        なければ item の数量を quantity で上書きして末尾に追加する。
        """
        self._validate_quantity(quantity)
        index = self._storage.find_index(item)
        if index is not None:
            stored = self._storage.at(index)
            self._storage.set_quantity(index, stored.quantity + quantity)
            return self._storage.at(index)

        item.quantity = quantity
        self._storage.append(item)
        return item

    def remove_from_cart(self, item: Item, quantity: RemoveQuantity = 1) -> bool:
        """明細の数量を減らす.

        数量が0以下になる場合は明細ごと削除する。quantity に ALL を渡すと全数削除。
        カートにない明細は何もせずFalseを返す。
        """
        if quantity != ALL:
            self._validate_quantity(quantity)

        index = self._storage.find_index(item)
        if index is None:
            return False

        existing = self._storage.at(index)
        amount = existing.quantity if quantity == ALL else quantity
        remaining = existing.quantity - amount
        if remaining > 0:
            self._storage.set_quantity(index, remaining)
        else:
            self._storage.remove_at(index)
        return True

    def clear(self) -> None:
        """全明細を削除する."""
        for index in reversed(range(self._storage.size())):
            self._storage.remove_at(index)

    @staticmethod
    def _validate_quantity(quantity: object) -> None:
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValueError(f"Quantity must be an integer: {quantity!r}")
        if quantity < 1:
            raise ValueError(f"Quantity must be positive: {quantity}")

    # --- 集計 ---

    @property
    def sub_total(self) -> Money:
        """全明細の 数量 × 単価 の合計.

        数値に変換できない価格があれば PriceConversionError。
        """
        total = Money.zero()
        for item in self._storage:
            total = total.add(Money.of(item.unit_price).multiply(item.quantity))
        return total

    @property
    def quantity(self) -> int:
        """全明細の数量の合計."""
        return sum(item.quantity for item in self._storage)

    @property
    def order_totals(self) -> OrderTotalCollection:
        """設定された戦略で計算した注文合計行（毎回再計算）."""
        return OrderTotalCollection.compute(self, self._config.total_strategies)

    @property
    def total(self) -> Decimal:
        """小計と注文合計行の総和."""
        return self.sub_total.value + self.order_totals.total()

    def __iter__(self) -> Iterator[Item]:
        return iter(self._storage)

    def get_items(self) -> list[Item]:
        """明細のリストを取得（防御的コピー）."""
        return list(self._storage)

    def get_item(self, item: Item) -> Item | None:
        """同じ identity の保存済み明細を取得する."""
        index = self._storage.find_index(item)
        if index is None:
            return None
        return self._storage.at(index)

    def get_item_count(self) -> int:
        """明細（行）数を取得する."""
        return self._storage.size()

    def is_empty(self) -> bool:
        """カートが空か判定する."""
        return self._storage.is_empty()

    # --- 状態機械 ---

    @property
    def state(self) -> CartState:
        """現在の状態."""
        return self._state_machine.state

    def fire(self, event: CartEvent) -> bool:
        """イベントを発火する。遷移した場合のみTrue."""
        return self._state_machine.fire(event)

    def can_fire(self, event: CartEvent) -> bool:
        """イベントが現在発火可能か判定する."""
        return self._state_machine.can_fire(event)

    def available_events(self) -> list[CartEvent]:
        """現在の状態から遷移表上可能なイベント."""
        return self._state_machine.available_events()

    def continue_shopping(self) -> bool:
        """checkout / verifying_payment / failed から shopping へ."""
        return self.fire(CartEvent.CONTINUE_SHOPPING)

    def checkout(self) -> bool:
        """shopping / verifying_payment / failed から checkout へ."""
        return self.fire(CartEvent.CHECKOUT)

    def check_payment(self) -> bool:
        """checkout から verifying_payment へ."""
        return self.fire(CartEvent.CHECK_PAYMENT)

    def payment_successful(self) -> bool:
        """verifying_payment から completed へ."""
        return self.fire(CartEvent.PAYMENT_SUCCESSFUL)

    def payment_failed(self) -> bool:
        """verifying_payment から failed へ."""
        return self.fire(CartEvent.PAYMENT_FAILED)

    # --- ガード・フック ---

    def guard(self, event: CartEvent) -> bool:
        guards: dict[CartEvent, Callable[[], bool]] = {
            CartEvent.CONTINUE_SHOPPING: self.guard_continue_shopping,
            CartEvent.CHECKOUT: self.guard_checkout,
            CartEvent.CHECK_PAYMENT: self.guard_check_payment,
            CartEvent.PAYMENT_SUCCESSFUL: self.guard_payment_successful,
            CartEvent.PAYMENT_FAILED: self.guard_payment_failed,
        }
        return guards[event]() if event in guards else True

    def on_enter(self, state: CartState) -> None:
        {
            CartState.SHOPPING: self.enter_shopping,
            CartState.CHECKOUT: self.enter_checkout,
            CartState.VERIFYING_PAYMENT: self.enter_verifying_payment,
            CartState.COMPLETED: self.enter_completed,
            CartState.FAILED: self.enter_failed,
        }[state]()

    def on_exit(self, state: CartState) -> None:
        {
            CartState.SHOPPING: self.exit_shopping,
            CartState.CHECKOUT: self.exit_checkout,
            CartState.VERIFYING_PAYMENT: self.exit_verifying_payment,
            CartState.COMPLETED: self.exit_completed,
            CartState.FAILED: self.exit_failed,
        }[state]()

    def guard_continue_shopping(self) -> bool:
        """continue_shopping のガード。Falseで遷移を止める."""
        return True

    def guard_checkout(self) -> bool:
        """checkout のガード。Falseで遷移を止める."""
        return True

    def guard_check_payment(self) -> bool:
        """check_payment のガード。Falseで遷移を止める."""
        return True

    def guard_payment_successful(self) -> bool:
        """payment_successful のガード。Falseで遷移を止める."""
        return True

    def guard_payment_failed(self) -> bool:
        """payment_failed のガード。Falseで遷移を止める."""
        return True

    def enter_shopping(self) -> None:
        """shopping に入ったとき."""
        pass

    def exit_shopping(self) -> None:
        """shopping を出るとき."""
        pass

    def enter_checkout(self) -> None:
        """checkout に入ったとき."""
        pass

    def exit_checkout(self) -> None:
        """checkout を出るとき."""
        pass

    def enter_verifying_payment(self) -> None:
        """verifying_payment に入ったとき."""
        pass

    def exit_verifying_payment(self) -> None:
        """verifying_payment を出るとき."""
        pass

    def enter_completed(self) -> None:
        """completed に入ったとき."""
        pass

    def exit_completed(self) -> None:
        """completed を出るとき."""
        pass

    def enter_failed(self) -> None:
        """failed に入ったとき."""
        pass

    def exit_failed(self) -> None:
        """failed を出るとき."""
        pass
