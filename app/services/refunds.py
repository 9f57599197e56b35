"""Refund workflow: resolve user and order, settle the order, credit cash or voucher."""

import threading
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from app.core.exceptions import AlreadyRefundedError, AppError
from app.core.keys import voucher_key
from app.core.logging import get_logger
from app.db.init import Stores
from app.models.voucher import new_voucher

log = get_logger(__name__)


class RefundChannel(str, Enum):
    CASH = "cash"
    VOUCHER = "voucher"


@dataclass
class RefundOutcome:
    user_key: str
    order_key: str
    channel: RefundChannel
    amount: Decimal
    balance: Decimal  # balance of the credited account after the refund


def refund_order(stores: Stores, user_key: str, order_key: str) -> RefundOutcome:
    """
    Refund order `order_key` (positional store key) to user `user_key`.

    The order is marked refunded before any credit is applied and is not
    unmarked if crediting fails. Raises UserNotFoundError, OrderNotFoundError,
    AlreadyRefundedError, VoucherConstructionError or a voucher insert error.
    """
    stores.users.find(user_key)
    order = stores.orders.find(order_key)
    if order.refunded:
        raise AlreadyRefundedError(order_key)

    stores.orders.mark_refunded(order_key)
    amount = order.total

    if not order.refunds_to_voucher:
        balance = stores.users.update_balance(user_key, amount)
        return RefundOutcome(user_key, order_key, RefundChannel.CASH, amount, balance)

    key = voucher_key(user_key)
    if key in stores.vouchers:
        balance = stores.vouchers.update_balance(key, amount)
    else:
        voucher = new_voucher(amount, user_key)
        stores.vouchers.insert(voucher)
        balance = voucher.balance
    return RefundOutcome(user_key, order_key, RefundChannel.VOUCHER, amount, balance)


class RefundService:
    """Runs refunds one at a time against a single set of stores."""

    def __init__(self, stores: Stores) -> None:
        self.stores = stores
        self._lock = threading.Lock()

    def refund(self, user_key: str, order_key: str) -> RefundOutcome:
        with self._lock:
            try:
                outcome = refund_order(self.stores, user_key, order_key)
            except AppError as exc:
                log.info("refund_rejected", user_key=user_key, order_key=order_key, code=exc.code)
                raise
        log.info(
            "refund_applied",
            user_key=user_key,
            order_key=order_key,
            channel=outcome.channel.value,
            amount=str(outcome.amount),
            balance=str(outcome.balance),
        )
        return outcome
