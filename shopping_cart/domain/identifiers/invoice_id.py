"""請求書識別子の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InvoiceId:
    """カート（注文）の一意識別子.

    ホストアプリケーションが採番する。コアでは生成しない。
    """

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise ValueError("InvoiceId cannot be empty")

    @classmethod
    def of(cls, value: InvoiceId | str) -> InvoiceId:
        """文字列または既存のInvoiceIdから生成する."""
        if isinstance(value, InvoiceId):
            return value
        return cls(value)

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
