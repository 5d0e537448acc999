"""
Item Service — Item Record
============================

What:  The stored representation of an item: an id/name pair.
How:   A frozen dataclass. The store replaces records instead of mutating
       them, so any Item handed out by the store is a stable snapshot.
Who:   Created and replaced only by ItemStore; read by route handlers.

Lifecycle:
    1. Created by ItemStore.create() with a fresh id
    2. Replaced (same id, new name) by ItemStore.update()
    3. Removed by ItemStore.delete(); its id is never handed out again
"""

from dataclasses import dataclass

# Ids are signed 64-bit integers
MAX_ITEM_ID = 2**63 - 1


@dataclass(frozen=True)
class Item:
    """An item held by the store."""

    id: int
    name: str
