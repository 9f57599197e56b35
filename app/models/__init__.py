from app.models.user import User
from app.models.order import Order, PaymentMethod, ShippingZone
from app.models.voucher import Voucher

__all__ = [
    "User",
    "Order",
    "PaymentMethod",
    "ShippingZone",
    "Voucher",
]
