"""ストレージエンジンのインメモリ実装."""
from typing import Iterator

from shopping_cart.domain.entities import Item
from shopping_cart.domain.ports import StorageEngine


class MemoryStorageEngine(StorageEngine):
    """明細をプロセス内のリストに保持するストレージエンジン."""

    def __init__(self) -> None:
        """初期化."""
        self._items: list[Item] = []

    def find_index(self, item: Item) -> int | None:
        """同一性が一致する明細の位置を返す."""
        for i, stored in enumerate(self._items):
            if stored.identity == item.identity:
                return i
        return None

    def append(self, item: Item) -> None:
        """末尾に明細を追加する."""
        self._items.append(item)

    def at(self, index: int) -> Item:
        """指定位置の明細を返す."""
        self._check_index(index)
        return self._items[index]

    def remove_at(self, index: int) -> Item:
        """指定位置の明細を削除する."""
        self._check_index(index)
        return self._items.pop(index)

    def set_quantity(self, index: int, quantity: int) -> None:
        """保存済み明細の数量をその場で書き換える."""
        self._check_index(index)
        self._items[index].quantity = quantity

    def size(self) -> int:
        """明細数を返す."""
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        """挿入順に明細を返す."""
        for item in list(self._items):
            yield item
