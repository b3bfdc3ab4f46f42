"""In-memory price store.

Holds the ordered collection of PriceItem records for the lifetime of the
server process. Names act as keys but uniqueness is not enforced: every
name-based operation affects only the first match.

A single lock serializes all operations, so concurrent requests cannot
interleave a lookup with another request's mutation.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

import structlog

from budgetapi.exceptions import ItemNotFoundError
from budgetapi.models import PriceItem, round_price

logger = structlog.get_logger(__name__)


def default_items() -> list[PriceItem]:
    """Seed records present when the server starts."""
    return [
        PriceItem(name="apple", price=50),
        PriceItem(name="orange", price=90),
        PriceItem(name="banana", price=25),
    ]


class PriceStore:
    """Ordered, lock-guarded collection of PriceItem records.

    Items handed in are copied on write and items handed out are copies,
    so callers never share state with the store.
    """

    def __init__(self, items: Iterable[PriceItem] | None = None):
        self._items: list[PriceItem] = [item.model_copy(deep=True) for item in items or ()]
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls) -> PriceStore:
        return cls(default_items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def list(self) -> list[PriceItem]:
        """Return every item in insertion order."""
        with self._lock:
            return [item.model_copy(deep=True) for item in self._items]

    def append(self, item: PriceItem) -> PriceItem:
        """Store ``item`` at the end with its price rounded to 2 decimals."""
        stored = _with_rounded_price(item)
        with self._lock:
            self._items.append(stored)
        logger.info("price_created", name=stored.name, price=stored.price)
        return stored.model_copy(deep=True)

    def find_index(self, name: str) -> int | None:
        """Index of the first item named exactly ``name``, or None."""
        with self._lock:
            return self._find_index(name)

    def find_by_name(self, name: str) -> PriceItem | None:
        with self._lock:
            index = self._find_index(name)
            if index is None:
                return None
            return self._items[index].model_copy(deep=True)

    def update_price(self, name: str, price: int | float) -> PriceItem:
        """Set the price of the first item named ``name``; other fields are untouched.

        Raises:
            ItemNotFoundError: If no item has that name
        """
        with self._lock:
            index = self._require_index(name)
            item = self._items[index]
            item.price = round_price(price)
            updated = item.model_copy(deep=True)
        logger.info("price_updated", name=name, price=updated.price)
        return updated

    def replace(self, name: str, item: PriceItem) -> PriceItem:
        """Overwrite the whole record of the first item named ``name``.

        The new record may carry a different name; nothing from the old
        record is kept.

        Raises:
            ItemNotFoundError: If no item has that name
        """
        stored = _with_rounded_price(item)
        with self._lock:
            index = self._require_index(name)
            self._items[index] = stored
        logger.info("price_replaced", name=name, new_name=stored.name, price=stored.price)
        return stored.model_copy(deep=True)

    def remove(self, name: str) -> None:
        """Remove the first item named ``name``.

        Raises:
            ItemNotFoundError: If no item has that name
        """
        with self._lock:
            index = self._require_index(name)
            del self._items[index]
        logger.info("price_deleted", name=name)

    def _find_index(self, name: str) -> int | None:
        for index, item in enumerate(self._items):
            if item.name == name:
                return index
        return None

    def _require_index(self, name: str) -> int:
        index = self._find_index(name)
        if index is None:
            logger.info("price_not_found", name=name)
            raise ItemNotFoundError()
        return index


def _with_rounded_price(item: PriceItem) -> PriceItem:
    return item.model_copy(update={"price": round_price(item.price)}, deep=True)
