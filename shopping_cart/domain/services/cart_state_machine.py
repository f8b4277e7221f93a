"""カートのチェックアウト状態機械."""
from __future__ import annotations

import logging
from typing import Mapping

from ..enums import CartEvent, CartState
from ..ports import CartHooks
from ..value_objects import DEFAULT_TRANSITIONS, Transition

logger = logging.getLogger(__name__)


class CartStateMachine:
    """ガード付きの有限状態機械.

    遷移表にない (状態, イベント) の組は例外を出さずに無視する。
    遷移時のフック呼び出し順: ガード → 遷移元の exit → 遷移先の enter。
    """

    def __init__(
        self,
        hooks: CartHooks,
        transitions: Mapping[CartEvent, Transition] = DEFAULT_TRANSITIONS,
        initial_state: CartState = CartState.SHOPPING,
    ) -> None:
        """初期化."""
        if not isinstance(initial_state, CartState):
            raise ValueError(f"Invalid state: {initial_state!r}")
        self._hooks = hooks
        self._transitions = transitions
        self._state = initial_state

    @property
    def state(self) -> CartState:
        """現在の状態."""
        return self._state

    def _allowed(self, event: CartEvent) -> Transition | None:
        transition = self._transitions.get(event)
        if transition is None or not transition.allows(self._state):
            return None
        return transition

    def can_fire(self, event: CartEvent) -> bool:
        """イベントが遷移表とガードの両方を満たすか判定する（フックは呼ばない）."""
        if self._allowed(event) is None:
            return False
        return bool(self._hooks.guard(event))

    def available_events(self) -> list[CartEvent]:
        """現在の状態から遷移表上発火できるイベントを返す."""
        return [event for event in self._transitions if self._allowed(event) is not None]

    def fire(self, event: CartEvent) -> bool:
        """イベントを発火する。遷移した場合のみTrueを返す."""
        transition = self._allowed(event)
        if transition is None:
            logger.debug(f"Event {event.value} not allowed from {self._state.value}")
            return False

        if not self._hooks.guard(event):
            logger.debug(f"Event {event.value} blocked by guard in {self._state.value}")
            return False

        source = self._state
        self._hooks.on_exit(source)
        self._state = transition.target
        self._hooks.on_enter(transition.target)
        logger.debug(
            f"Transitioned {source.value} -> {transition.target.value} on {event.value}"
        )
        return True
