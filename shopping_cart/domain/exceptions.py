"""カートドメインの例外."""


class CartError(Exception):
    """カート関連エラーの基底クラス."""

    pass


class PriceConversionError(CartError, ValueError):
    """価格を数値に変換できないエラー."""

    pass


class StorageError(CartError):
    """ストレージエンジンの永続化エラー."""

    pass
