from decimal import Decimal

from app.core.exceptions import DuplicateError, NotFoundError, UserNotFoundError
from app.core.keys import user_key
from app.models.user import User, check_name
from app.storage.base import RecordStore


class UserStore(RecordStore[User]):
    model = User

    def key_for(self, record: User) -> str:
        return user_key(record.name, record.last_name)

    def validate(self, record: User) -> None:
        check_name(record.name, record.last_name)

    def not_found(self, key: str) -> NotFoundError:
        return UserNotFoundError(key)

    def insert(self, record: User) -> str:
        """Store a new user; two users with the same name pair cannot coexist."""
        self.validate(record)
        key = self.key_for(record)
        if key in self._records:
            raise DuplicateError("user already exists", details={"key": key})
        self._records[key] = record
        return key

    def update_balance(self, key: str, amount: Decimal) -> Decimal:
        """Add `amount` to the user's cash balance; return the new balance."""
        user = self.find(key)
        user.balance += amount
        return user.balance
