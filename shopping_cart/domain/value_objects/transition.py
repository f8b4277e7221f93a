"""状態遷移の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from ..enums import CartEvent, CartState


@dataclass(frozen=True)
class Transition:
    """イベント1件分の遷移規則（遷移元の集合と遷移先）."""

    sources: frozenset[CartState]
    target: CartState

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.sources:
            raise ValueError("Transition must have at least one source state")

    @classmethod
    def of(cls, sources: Iterable[CartState], target: CartState) -> Transition:
        """遷移元のイテラブルから生成する."""
        return cls(sources=frozenset(sources), target=target)

    def allows(self, state: CartState) -> bool:
        """指定状態からこの遷移が可能か判定する."""
        return state in self.sources


DEFAULT_TRANSITIONS: Mapping[CartEvent, Transition] = MappingProxyType(
    {
        CartEvent.CONTINUE_SHOPPING: Transition.of(
            [CartState.CHECKOUT, CartState.VERIFYING_PAYMENT, CartState.FAILED],
            CartState.SHOPPING,
        ),
        CartEvent.CHECKOUT: Transition.of(
            [CartState.SHOPPING, CartState.VERIFYING_PAYMENT, CartState.FAILED],
            CartState.CHECKOUT,
        ),
        CartEvent.CHECK_PAYMENT: Transition.of(
            [CartState.CHECKOUT], CartState.VERIFYING_PAYMENT
        ),
        CartEvent.PAYMENT_SUCCESSFUL: Transition.of(
            [CartState.VERIFYING_PAYMENT], CartState.COMPLETED
        ),
        CartEvent.PAYMENT_FAILED: Transition.of(
            [CartState.VERIFYING_PAYMENT], CartState.FAILED
        ),
    }
)
