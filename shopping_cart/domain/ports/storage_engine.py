"""ストレージエンジンインターフェース."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from ..entities import Item


class StorageEngine(ABC):
    """カートの明細を保持する順序付きコレクションのインターフェース.

    明細の同一性はオブジェクト参照ではなく Item.identity で判定する。
    永続化を伴う実装は、各操作を同期的に外部ストアへ反映すること。
    """

    @abstractmethod
    def find_index(self, item: Item) -> int | None:
        """同一性が一致する明細の位置を返す。見つからなければNone."""
        pass

    @abstractmethod
    def append(self, item: Item) -> None:
        """末尾に明細を追加する（同一性の重複チェックはしない）."""
        pass

    @abstractmethod
    def at(self, index: int) -> Item:
        """指定位置の明細を返す。範囲外はIndexError."""
        pass

    @abstractmethod
    def remove_at(self, index: int) -> Item:
        """指定位置の明細を削除して返す。範囲外はIndexError."""
        pass

    @abstractmethod
    def set_quantity(self, index: int, quantity: int) -> None:
        """指定位置の明細の数量を書き換える。範囲外はIndexError."""
        pass

    @abstractmethod
    def size(self) -> int:
        """明細数を返す."""
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Item]:
        """挿入順に明細を返すイテレータ."""
        pass

    def __len__(self) -> int:
        """明細数."""
        return self.size()

    def is_empty(self) -> bool:
        """空か判定する."""
        return self.size() == 0

    def _check_index(self, index: int) -> None:
        """範囲外の位置ならIndexErrorを送出する."""
        size = self.size()
        if not 0 <= index < size:
            raise IndexError(f"Index {index} out of range for storage of size {size}")
