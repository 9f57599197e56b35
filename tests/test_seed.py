"""Bootstrap: seed files populate the stores, bad files abort startup."""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, get_settings
from app.core.exceptions import SeedDataError
from app.db.init import init_stores, load_seed_file


def test_init_stores_loads_seed(seed_dir):
    stores = init_stores(Settings(SEED_DATA_DIR=str(seed_dir)))
    assert sorted(stores.users.keys()) == ["jane-doe", "john-doe"]
    assert stores.users.find("jane-doe").orders == [1, 2, 3]
    assert stores.orders.keys() == ["1", "2", "3", "4"]
    assert len(stores.vouchers) == 0


def test_missing_file_raises(seed_dir):
    (seed_dir / "orders.json").unlink()
    with pytest.raises(SeedDataError, match="cannot open orders.json"):
        init_stores(Settings(SEED_DATA_DIR=str(seed_dir)))


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "users.json"
    path.write_text("{oops")
    with pytest.raises(SeedDataError, match="failed to parse"):
        load_seed_file(path)


def test_non_object_raises(tmp_path):
    path = tmp_path / "users.json"
    path.write_text("[1, 2]")
    with pytest.raises(SeedDataError):
        load_seed_file(path)


def test_invalid_record_raises(seed_dir):
    (seed_dir / "orders.json").write_text('{"1": {"ID": 1, "Total": -5, "PaymentWay": 1, "ShippingCountryZone": 1}}')
    with pytest.raises(SeedDataError, match="invalid record in orders.json"):
        init_stores(Settings(SEED_DATA_DIR=str(seed_dir)))


def test_startup_serves_seeded_refunds(seed_dir, monkeypatch):
    from app.main import app

    monkeypatch.setenv("SEED_DATA_DIR", str(seed_dir))
    get_settings.cache_clear()
    with TestClient(app) as c:
        r = c.post("/order/4/refund/", json={"user_key": "john-doe"})
        assert r.status_code == 200
        assert app.state.stores.vouchers.find("john-doe-usd").balance == 400
    get_settings.cache_clear()


def test_unknown_enum_value_aborts_load(seed_dir):
    (seed_dir / "orders.json").write_text('{"1": {"ID": 1, "Total": 10, "PaymentWay": 7, "ShippingCountryZone": 1}}')
    with pytest.raises(SeedDataError, match="invalid record in orders.json"):
        init_stores(Settings(SEED_DATA_DIR=str(seed_dir)))
