"""カート設定の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Mapping

from ..enums import CartEvent, CartState
from .transition import DEFAULT_TRANSITIONS, Transition

if TYPE_CHECKING:
    from ..ports import TotalStrategy


@dataclass(frozen=True)
class CartConfig:
    """カートごとに渡す不変の設定.

    total_strategies: 注文合計を計算する戦略（この順で実行される）
    transitions: イベントごとの遷移規則
    initial_state: 新規カートの初期状態
    """

    total_strategies: tuple[TotalStrategy, ...] = ()
    transitions: Mapping[CartEvent, Transition] = field(
        default_factory=lambda: DEFAULT_TRANSITIONS
    )
    initial_state: CartState = CartState.SHOPPING

    def __post_init__(self) -> None:
        """コレクションを読み取り専用に正規化する."""
        object.__setattr__(self, "total_strategies", tuple(self.total_strategies))
        if not isinstance(self.transitions, MappingProxyType):
            object.__setattr__(
                self, "transitions", MappingProxyType(dict(self.transitions))
            )
        if not isinstance(self.initial_state, CartState):
            raise ValueError(f"Invalid initial state: {self.initial_state!r}")

    @classmethod
    def default(cls) -> CartConfig:
        """標準の5イベント遷移表を持つ設定を返す."""
        return cls()

    def with_strategies(self, strategies: Iterable[TotalStrategy]) -> CartConfig:
        """合計戦略を差し替えた設定を返す."""
        return replace(self, total_strategies=tuple(strategies))

    def with_transition(self, event: CartEvent, transition: Transition) -> CartConfig:
        """遷移規則を追加・上書きした設定を返す."""
        transitions = dict(self.transitions)
        transitions[event] = transition
        return replace(self, transitions=MappingProxyType(transitions))
