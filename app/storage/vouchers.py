from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from app.core.exceptions import CurrencyMismatchError, NotFoundError, VoucherNotFoundError
from app.core.keys import DEFAULT_CURRENCY, voucher_key
from app.models.voucher import Voucher
from app.storage.base import RecordStore

_KEY_SUFFIX = f"-{DEFAULT_CURRENCY.lower()}"


class VoucherStore(RecordStore[Voucher]):
    model = Voucher

    def key_for(self, record: Voucher) -> str:
        return voucher_key(record.owner_key)

    def validate(self, record: Voucher) -> None:
        if record.currency != DEFAULT_CURRENCY:
            raise CurrencyMismatchError(record.currency, DEFAULT_CURRENCY)

    def not_found(self, key: str) -> NotFoundError:
        return VoucherNotFoundError(key)

    def find(self, key: str) -> Voucher:
        if not key.strip():
            raise self.not_found(key)
        return super().find(key)

    def bulk_insert(self, records: Mapping[str, Voucher | dict[str, Any]]) -> None:
        super().bulk_insert(records)
        # Owner keys are private; recover them from the storage key.
        for key in records:
            voucher = self._records[key]
            if not voucher.owner_key and key.endswith(_KEY_SUFFIX):
                voucher._owner_key = key[: -len(_KEY_SUFFIX)]

    def update_balance(self, key: str, amount: Decimal) -> Decimal:
        """Add `amount` to the account's balance; return the new balance."""
        voucher = self.find(key)
        voucher.balance += amount
        return voucher.balance
