"""
Item Service — In-Memory Item Store
=====================================

What:  Exclusive owner of all Item records; atomic create/read/update/delete.
How:   An insertion-ordered dict keyed by id plus a monotonic id counter,
       both guarded by a single threading.Lock.
Who:   One instance per application (app.state.store), reached by the route
       handlers through the get_store dependency.

Ordering & Identity:
    - Ids come from itertools.count(1); they never repeat, even after delete
      and even when two creates land in the same clock tick.
    - dict preserves insertion order, so listing returns creation order.
      Replacing a value keeps its position; popping a key leaves the others
      where they were.

Concurrency:
    Every operation, reads included, runs under the lock. Nothing inside the
    lock awaits or does I/O, so holding it is safe from both the event loop
    and worker threads. Records are frozen and replaced wholesale, so a
    reader can never see a half-applied update.
"""

import itertools
import logging
import threading
from dataclasses import replace
from typing import Any, Dict, List

from itemservice.exceptions import InternalError, InvalidInputError, NotFoundError
from itemservice.models.item import MAX_ITEM_ID, Item

logger = logging.getLogger(__name__)


class ItemStore:
    """
    In-memory, concurrency-safe collection of items.

    Error Handling Strategy:
        Expected failures raise InvalidInputError or NotFoundError; an
        exhausted id space raises InternalError. Nothing is caught here;
        the application's exception handlers turn these into responses.
    """

    def __init__(self) -> None:
        self._items: Dict[int, Item] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    @staticmethod
    def _validate_name(name: Any) -> str:
        if not isinstance(name, str) or not name:
            raise InvalidInputError(
                message="name is required and must be a non-empty string",
                field="name",
            )
        return name

    def _require(self, item_id: int) -> Item:
        # Caller holds the lock
        item = self._items.get(item_id)
        if item is None:
            raise NotFoundError(resource="item", resource_id=item_id)
        return item

    def create(self, name: str) -> Item:
        """
        Create a new item with a fresh id and append it to the collection.

        Raises:
            InvalidInputError: name missing, empty or not a string
            InternalError: the 64-bit id space is exhausted
        """
        name = self._validate_name(name)
        with self._lock:
            item_id = next(self._ids)
            if item_id > MAX_ITEM_ID:
                raise InternalError(context={"reason": "item id space exhausted"})
            item = Item(id=item_id, name=name)
            self._items[item_id] = item
        logger.info("Item created: %d", item.id)
        return item

    def list(self) -> List[Item]:
        """Return all items in creation order. An empty store yields []."""
        with self._lock:
            return list(self._items.values())

    def get(self, item_id: int) -> Item:
        """Return the item with `item_id` or raise NotFoundError."""
        with self._lock:
            return self._require(item_id)

    def update(self, item_id: int, name: str) -> Item:
        """
        Replace the name of an existing item. The id and list position stay.

        A missing item is reported before a bad name, so an unknown id is
        always NotFoundError.
        """
        with self._lock:
            current = self._require(item_id)
            updated = replace(current, name=self._validate_name(name))
            self._items[item_id] = updated
        logger.info("Item updated: %d", item_id)
        return updated

    def delete(self, item_id: int) -> Item:
        """Remove the item and return it. Its id is never reused."""
        with self._lock:
            self._require(item_id)
            removed = self._items.pop(item_id)
        logger.info("Item deleted: %d", item_id)
        return removed

    def count(self) -> int:
        with self._lock:
            return len(self._items)
