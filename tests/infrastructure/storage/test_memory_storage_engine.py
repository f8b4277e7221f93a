"""MemoryStorageEngine のテスト."""
import unittest

from shopping_cart.domain.entities import Item
from shopping_cart.infrastructure.storage import MemoryStorageEngine


class TestMemoryStorageEngine(unittest.TestCase):
    """MemoryStorageEngine のテスト."""

    def setUp(self) -> None:
        self.engine = MemoryStorageEngine()
        self.first = Item(identity=1, name="Widget", unit_price=10, quantity=1)
        self.second = Item(identity=2, name="Gadget", unit_price=20, quantity=2)

    def test_空の状態(self) -> None:
        self.assertTrue(self.engine.is_empty())
        self.assertEqual(self.engine.size(), 0)
        self.assertEqual(len(self.engine), 0)
        self.assertEqual(list(self.engine), [])

    def test_追加と取得(self) -> None:
        self.engine.append(self.first)
        self.engine.append(self.second)
        self.assertEqual(self.engine.size(), 2)
        self.assertIs(self.engine.at(1), self.second)

    def test_find_indexは参照ではなくidentityで比較する(self) -> None:
        self.engine.append(self.first)
        lookalike = Item(identity=1, name="Other", unit_price=99)
        self.assertEqual(self.engine.find_index(lookalike), 0)
        self.assertIsNone(self.engine.find_index(self.second))

    def test_appendは重複チェックしない(self) -> None:
        self.engine.append(self.first)
        self.engine.append(Item(identity=1, name="Widget", unit_price=10))
        self.assertEqual(self.engine.size(), 2)

    def test_remove_at(self) -> None:
        self.engine.append(self.first)
        self.engine.append(self.second)
        removed = self.engine.remove_at(0)
        self.assertIs(removed, self.first)
        self.assertEqual(list(self.engine), [self.second])

    def test_set_quantityは保存済み明細を直接更新する(self) -> None:
        self.engine.append(self.first)
        self.engine.set_quantity(0, 8)
        self.assertEqual(self.first.quantity, 8)

    def test_範囲外の位置はIndexError(self) -> None:
        self.engine.append(self.first)
        for index in (1, -1, 5):
            with self.assertRaises(IndexError):
                self.engine.at(index)
            with self.assertRaises(IndexError):
                self.engine.remove_at(index)
            with self.assertRaises(IndexError):
                self.engine.set_quantity(index, 1)
        self.assertEqual(self.engine.size(), 1)

    def test_イテレーションは挿入順で何度でもやり直せる(self) -> None:
        self.engine.append(self.second)
        self.engine.append(self.first)
        self.assertEqual([i.identity for i in self.engine], [2, 1])
        self.assertEqual([i.identity for i in self.engine], [2, 1])
