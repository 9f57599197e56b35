from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from app.core.exceptions import NotFoundError

T = TypeVar("T", bound=BaseModel)


class RecordStore(ABC, Generic[T]):
    """In-memory keyed repository owning one backing dict.

    `find` hands back the stored record itself, so changes made through it
    are visible to every later lookup.
    """

    model: type[T]

    def __init__(self) -> None:
        self._records: dict[str, T] = {}

    @abstractmethod
    def key_for(self, record: T) -> str:
        """Storage key for a record about to be inserted."""
        ...

    @abstractmethod
    def validate(self, record: T) -> None:
        """Raise if the record cannot be stored."""
        ...

    def not_found(self, key: str) -> NotFoundError:
        return NotFoundError(details={"key": key})

    def insert(self, record: T) -> str:
        """Validate and store `record`; return its key."""
        self.validate(record)
        key = self.key_for(record)
        self._records[key] = record
        return key

    def find(self, key: str) -> T:
        record = self._records.get(key)
        if record is None:
            raise self.not_found(key)
        return record

    def get(self, key: str) -> T | None:
        return self._records.get(key)

    def delete(self, key: str) -> bool:
        """Remove `key`; True if it existed."""
        return self._records.pop(key, None) is not None

    def bulk_insert(self, records: Mapping[str, T | dict[str, Any]]) -> None:
        """Load pre-keyed records as-is (bootstrap only)."""
        for key, raw in records.items():
            self._records[key] = raw if isinstance(raw, self.model) else self.model.model_validate(raw)

    def keys(self) -> list[str]:
        return list(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)
