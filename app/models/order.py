from decimal import Decimal
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PaymentMethod(IntEnum):
    CREDIT_CARD = 1
    CASH_ON_DELIVERY = 2
    PAYPAL = 3


class ShippingZone(IntEnum):
    EUROPE = 1
    MENA = 2
    AMERICA = 3


class Order(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(default=0, alias="ID")
    total: Decimal = Field(default=Decimal("0"), ge=0, alias="Total")
    payment_method: PaymentMethod | None = Field(default=None, alias="PaymentWay")
    shipping_zone: ShippingZone | None = Field(default=None, alias="ShippingCountryZone")
    refunded: bool = Field(default=False, alias="IsDeleted")

    @field_validator("payment_method", "shipping_zone", mode="before")
    @classmethod
    def _zero_is_unset(cls, v):
        # Seed files use 0 for "not set"
        if v == 0:
            return None
        return v

    @property
    def refunds_to_voucher(self) -> bool:
        """Cash-on-delivery orders shipped to MENA are refunded as store credit."""
        return (
            self.shipping_zone == ShippingZone.MENA
            and self.payment_method == PaymentMethod.CASH_ON_DELIVERY
        )
