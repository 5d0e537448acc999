"""
Item Service — Services Layer
===============================

What:  State and business rules, kept separate from HTTP concerns.

Service Inventory:
    - ItemStore: In-memory owner of all items (identity, ordering, locking)
"""
