"""インメモリのリファレンスカート."""
from shopping_cart.domain.entities import Cart
from shopping_cart.domain.enums import CartState
from shopping_cart.domain.identifiers import InvoiceId
from shopping_cart.domain.ports import CartHooks, StorageEngine
from shopping_cart.domain.value_objects import CartConfig

from .storage import MemoryStorageEngine


class MemoryCart(Cart):
    """請求書IDを明示的に受け取るカート.

    storage を省略すると MemoryStorageEngine を使う。
    """

    def __init__(
        self,
        invoice_id: InvoiceId | str,
        storage: StorageEngine | None = None,
        config: CartConfig | None = None,
        hooks: CartHooks | None = None,
        state: CartState | None = None,
    ) -> None:
        """初期化."""
        self._invoice_id = InvoiceId.of(invoice_id)
        super().__init__(
            storage=storage if storage is not None else MemoryStorageEngine(),
            config=config,
            hooks=hooks,
            state=state,
        )

    @property
    def invoice_id(self) -> InvoiceId:
        """請求書ID."""
        return self._invoice_id
