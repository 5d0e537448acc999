"""
Item Service — Application Package Initializer
===============================================

What: Marks the `itemservice` directory as a Python package.
Who:  Used by uvicorn (`itemservice.main:app`), pytest, and `python -m itemservice`.

Architecture Note:
    The service is split into two layers around a single shared resource:

    ┌─────────────────────────────────────┐
    │      Routes (Request Handlers)      │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (ItemStore)           │  ← Ordering, identity, locking
    ├─────────────────────────────────────┤
    │   Models & Schemas (Item / API)     │  ← Immutable records + Pydantic
    └─────────────────────────────────────┘

    Routes never touch the collection directly; every read and write goes
    through one ItemStore owned by the application instance.
"""

__version__ = "1.0.0"
