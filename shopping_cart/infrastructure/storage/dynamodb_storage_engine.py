"""ストレージエンジンのDynamoDB実装."""
import logging
import os
from dataclasses import dataclass
from typing import Any, Iterator

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from shopping_cart.domain.entities import Item
from shopping_cart.domain.exceptions import StorageError
from shopping_cart.domain.identifiers import InvoiceId
from shopping_cart.domain.ports import StorageEngine

logger = logging.getLogger(__name__)

DEFAULT_TABLE_NAME = "shopping-cart-items"


@dataclass(frozen=True)
class RecordMapping:
    """明細行の属性名の対応表.

    invoice_id: パーティションキー
    item_id: ソートキー（明細の identity を "型:値" の文字列で保存）
    """

    invoice_id: str = "invoice_id"
    item_id: str = "item_id"
    name: str = "name"
    price: str = "price"
    quantity: str = "quantity"
    position: str = "position"


class DynamoDBStorageEngine(StorageEngine):
    """1つの請求書に属する明細行をDynamoDBのテーブルに保持するストレージエンジン.

    構築時に既存の行を読み込み、以降の追加・削除・数量変更は同期的に書き込む。
    """

    def __init__(
        self,
        invoice_id: InvoiceId | str,
        table_name: str | None = None,
        mapping: RecordMapping | None = None,
    ) -> None:
        """初期化."""
        self._invoice_id = InvoiceId.of(invoice_id)
        self._mapping = mapping or RecordMapping()
        self._table_name = table_name or os.environ.get(
            "CART_ITEMS_TABLE_NAME", DEFAULT_TABLE_NAME
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)
        self._items: list[Item] = []
        self._next_position = 0
        self._load()

    @property
    def invoice_id(self) -> InvoiceId:
        """束縛された請求書ID."""
        return self._invoice_id

    def _load(self) -> None:
        """既存の明細行を読み込む（ページネーション対応）."""
        rows: list[dict[str, Any]] = []
        kwargs: dict[str, Any] = {
            "KeyConditionExpression": Key(self._mapping.invoice_id).eq(
                self._invoice_id.value
            ),
        }
        try:
            while True:
                response = self._table.query(**kwargs)
                rows.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                kwargs["ExclusiveStartKey"] = last_key
        except ClientError as e:
            logger.error(f"Failed to load cart items for {self._invoice_id}: {e}")
            raise StorageError(f"Failed to load cart items for {self._invoice_id}") from e

        rows.sort(key=lambda row: self._to_int(row.get(self._mapping.position, 0)))
        self._items = [self._from_dynamodb_item(row) for row in rows]
        if rows:
            self._next_position = (
                max(self._to_int(row.get(self._mapping.position, 0)) for row in rows) + 1
            )
        logger.debug(f"Loaded {len(self._items)} cart items for {self._invoice_id}")

    def find_index(self, item: Item) -> int | None:
        """同一性が一致する明細の位置を返す."""
        for i, stored in enumerate(self._items):
            if stored.identity == item.identity:
                return i
        return None

    def append(self, item: Item) -> None:
        """明細行を書き込んでから末尾に追加する."""
        row = self._to_dynamodb_item(item, self._next_position)
        try:
            self._table.put_item(Item=row)
        except ClientError as e:
            logger.error(f"Failed to put cart item {item.identity} for {self._invoice_id}: {e}")
            raise StorageError(f"Failed to put cart item {item.identity}") from e
        self._items.append(item)
        self._next_position += 1

    def at(self, index: int) -> Item:
        """指定位置の明細を返す."""
        self._check_index(index)
        return self._items[index]

    def remove_at(self, index: int) -> Item:
        """明細行を削除する."""
        self._check_index(index)
        item = self._items[index]
        try:
            self._table.delete_item(Key=self._key(item))
        except ClientError as e:
            logger.error(
                f"Failed to delete cart item {item.identity} for {self._invoice_id}: {e}"
            )
            raise StorageError(f"Failed to delete cart item {item.identity}") from e
        return self._items.pop(index)

    def set_quantity(self, index: int, quantity: int) -> None:
        """明細行の数量を更新する."""
        self._check_index(index)
        item = self._items[index]
        try:
            self._table.update_item(
                Key=self._key(item),
                UpdateExpression="SET #quantity = :quantity",
                ExpressionAttributeNames={"#quantity": self._mapping.quantity},
                ExpressionAttributeValues={":quantity": quantity},
            )
        except ClientError as e:
            logger.error(
                f"Failed to update cart item {item.identity} for {self._invoice_id}: {e}"
            )
            raise StorageError(f"Failed to update cart item {item.identity}") from e
        item.quantity = quantity

    def size(self) -> int:
        """明細数を返す."""
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        """挿入順に明細を返す."""
        for item in list(self._items):
            yield item

    def _key(self, item: Item) -> dict[str, str]:
        return {
            self._mapping.invoice_id: self._invoice_id.value,
            self._mapping.item_id: self._encode_identity(item.identity),
        }

    @staticmethod
    def _encode_identity(identity: Any) -> str:
        """identity を型付きのソートキーに変換する（1 と "1" は別の行）."""
        if isinstance(identity, bool) or not isinstance(identity, (int, str)):
            raise ValueError(f"Item identity must be int or str: {identity!r}")
        if isinstance(identity, int):
            return f"int:{identity}"
        return f"str:{identity}"

    @staticmethod
    def _decode_identity(raw: str) -> int | str:
        """ソートキーから identity を復元する."""
        kind, _, value = raw.partition(":")
        if kind == "int":
            return int(value)
        if kind == "str":
            return value
        raise ValueError(f"Malformed item key: {raw!r}")

    def _to_dynamodb_item(self, item: Item, position: int) -> dict[str, Any]:
        """ItemをDynamoDBアイテムに変換."""
        return {
            **self._key(item),
            self._mapping.name: item.name,
            self._mapping.price: item.unit_price.value,
            self._mapping.quantity: item.quantity,
            self._mapping.position: position,
        }

    def _from_dynamodb_item(self, row: dict[str, Any]) -> Item:
        """DynamoDBアイテムをItemに変換."""
        return Item(
            identity=self._decode_identity(row[self._mapping.item_id]),
            name=row.get(self._mapping.name, ""),
            unit_price=row.get(self._mapping.price),
            quantity=self._to_int(row.get(self._mapping.quantity, 0)),
        )

    @staticmethod
    def _to_int(value: Any) -> int:
        """Decimalなどの数値をintに変換."""
        return int(value)
