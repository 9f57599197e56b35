import json
import os
from decimal import Decimal
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.db.init import Stores
from app.models.order import Order, PaymentMethod, ShippingZone
from app.models.user import User

os.environ.setdefault("ENV", "test")

USERS = {
    "john-doe": {"Name": "John", "LastName": "Doe", "Balance": 100},
    "jane-doe": {"Name": "Jane", "LastName": "Doe", "Balance": 100, "Orders": [1, 2, 3]},
}

ORDERS = {
    "1": {"ID": 1, "Total": 100, "PaymentWay": 1, "ShippingCountryZone": 1, "IsDeleted": False},
    "2": {"ID": 2, "Total": 200, "PaymentWay": 2, "ShippingCountryZone": 3, "IsDeleted": True},
    "3": {"ID": 3, "Total": 300, "PaymentWay": 3, "ShippingCountryZone": 2, "IsDeleted": False},
    "4": {"ID": 4, "Total": 400, "PaymentWay": 2, "ShippingCountryZone": 2, "IsDeleted": False},
}


@pytest.fixture
def make_order():
    def _make(
        total: int | str,
        payment: PaymentMethod | None = PaymentMethod.CREDIT_CARD,
        zone: ShippingZone | None = ShippingZone.EUROPE,
        order_id: int = 5,
    ) -> Order:
        return Order(id=order_id, total=Decimal(str(total)), payment_method=payment, shipping_zone=zone)

    return _make


@pytest.fixture
def stores() -> Stores:
    """Fresh stores seeded with two users and four orders."""
    s = Stores()
    s.users.bulk_insert(USERS)
    s.orders.bulk_insert(ORDERS)
    return s


@pytest.fixture
def john(stores: Stores) -> User:
    return stores.users.find("john-doe")


@pytest.fixture
def seed_dir(tmp_path: Path) -> Path:
    (tmp_path / "users.json").write_text(json.dumps(USERS))
    (tmp_path / "orders.json").write_text(json.dumps(ORDERS))
    return tmp_path


@pytest_asyncio.fixture
async def client(stores: Stores) -> AsyncGenerator[AsyncClient, None]:
    from app.deps import get_refund_service
    from app.main import app
    from app.services.refunds import RefundService

    service = RefundService(stores)
    app.dependency_overrides[get_refund_service] = lambda: service
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
