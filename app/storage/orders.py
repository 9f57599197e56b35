from app.core.exceptions import NotFoundError, OrderNotFoundError, ValidationError
from app.core.keys import positional_key
from app.models.order import Order
from app.storage.base import RecordStore


class OrderStore(RecordStore[Order]):
    """Orders keyed by insertion position ("1", "2", ...), not by `Order.id`.

    A positional key already taken by a seeded entry is overwritten.
    """

    model = Order

    def key_for(self, record: Order) -> str:
        return positional_key(len(self._records))

    def validate(self, record: Order) -> None:
        if record.payment_method is None:
            raise ValidationError("payment way is missing", details={"order_id": record.id})
        if record.shipping_zone is None:
            raise ValidationError("zone is missing", details={"order_id": record.id})

    def not_found(self, key: str) -> NotFoundError:
        return OrderNotFoundError(key)

    def mark_refunded(self, key: str) -> bool:
        """Flag the order as refunded. The flag is never cleared."""
        order = self.get(key)
        if order is None:
            return False
        order.refunded = True
        return True
