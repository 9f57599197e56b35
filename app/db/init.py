from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import orjson
import pydantic

from app.core.config import Settings, get_settings
from app.core.exceptions import SeedDataError
from app.core.logging import get_logger
from app.storage.base import RecordStore
from app.storage.orders import OrderStore
from app.storage.users import UserStore
from app.storage.vouchers import VoucherStore

log = get_logger(__name__)

SEED_FILES = ("users", "orders")


@dataclass
class Stores:
    users: UserStore = field(default_factory=UserStore)
    orders: OrderStore = field(default_factory=OrderStore)
    vouchers: VoucherStore = field(default_factory=VoucherStore)


def load_seed_file(path: Path) -> dict[str, Any]:
    """Read a JSON object mapping store keys to record fields."""
    try:
        data = orjson.loads(path.read_bytes())
    except OSError as exc:
        raise SeedDataError(f"cannot open {path.name}", details={"path": str(path)}) from exc
    except orjson.JSONDecodeError as exc:
        raise SeedDataError(f"failed to parse {path.name}", details={"path": str(path)}) from exc
    if not isinstance(data, dict):
        raise SeedDataError(f"{path.name} must hold a JSON object", details={"path": str(path)})
    return data


def _bulk_load(store: RecordStore, path: Path) -> None:
    try:
        store.bulk_insert(load_seed_file(path))
    except pydantic.ValidationError as exc:
        raise SeedDataError(
            f"invalid record in {path.name}",
            details={"path": str(path), "errors": exc.error_count()},
        ) from exc


def init_stores(settings: Settings | None = None) -> Stores:
    """Fresh stores populated from users.json and orders.json. Raises SeedDataError."""
    settings = settings or get_settings()
    root = Path(settings.seed_data_dir)
    stores = Stores()
    _bulk_load(stores.users, root / "users.json")
    _bulk_load(stores.orders, root / "orders.json")
    log.info("seed_loaded", users=len(stores.users), orders=len(stores.orders), path=str(root))
    return stores
