from decimal import Decimal

from pydantic import BaseModel, PrivateAttr

from app.core.exceptions import VoucherConstructionError
from app.core.keys import DEFAULT_CURRENCY


class Voucher(BaseModel):
    """Store-credit account of a single user."""
    balance: Decimal = Decimal("0")
    currency: str = DEFAULT_CURRENCY
    _owner_key: str = PrivateAttr(default="")

    @property
    def owner_key(self) -> str:
        return self._owner_key


def new_voucher(balance: Decimal, owner_key: str) -> Voucher:
    """Voucher in the default currency for `owner_key`. Blank owner keys are rejected."""
    if not owner_key.strip():
        raise VoucherConstructionError()
    voucher = Voucher(balance=balance, currency=DEFAULT_CURRENCY)
    voucher._owner_key = owner_key
    return voucher
