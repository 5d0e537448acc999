"""
Item Service — Item Route Handlers
====================================

What:  The five CRUD endpoints under /items.
How:   Parse the path id and body, call exactly one ItemStore operation,
       return the result as JSON with the success status.
Who:   Called by API clients; calls the ItemStore owned by the application.

Handlers hold no state and contain no try/except. InvalidInputError and
NotFoundError raised here or by the store are mapped to 400/404 by the
exception handlers registered in main.py; anything else becomes a generic 500.
"""

import logging
import re

from fastapi import APIRouter, Depends, Request

from itemservice.exceptions import InvalidInputError
from itemservice.models.item import MAX_ITEM_ID
from itemservice.schemas.item import (
    ErrorResponse,
    ItemCreate,
    ItemListResponse,
    ItemResponse,
    ItemUpdate,
)
from itemservice.services.item_store import ItemStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/items", tags=["Items"])

_INTEGER_RE = re.compile(r"-?[0-9]+")


def get_store(request: Request) -> ItemStore:
    """Dependency: the ItemStore owned by the running application."""
    return request.app.state.store


def parse_item_id(raw: str) -> int:
    """
    Parse a path segment as a signed 64-bit integer id.

    Raises:
        InvalidInputError: not a plain base-10 integer, or outside int64 range
    """
    if not _INTEGER_RE.fullmatch(raw):
        raise InvalidInputError(
            message=f"Item id must be an integer, got '{raw}'",
            field="id",
        )
    item_id = int(raw)
    if not -MAX_ITEM_ID - 1 <= item_id <= MAX_ITEM_ID:
        raise InvalidInputError(
            message="Item id is outside the 64-bit integer range",
            field="id",
        )
    return item_id


@router.post(
    "",
    status_code=201,
    response_model=ItemResponse,
    responses={400: {"description": "Missing or empty name", "model": ErrorResponse}},
    summary="Create an item",
)
async def create_item(
    payload: ItemCreate,
    store: ItemStore = Depends(get_store),
) -> ItemResponse:
    """Create an item. Not idempotent: each call produces a new id."""
    item = store.create(payload.name)
    return ItemResponse.model_validate(item)


@router.get(
    "",
    response_model=ItemListResponse,
    summary="List all items in creation order",
)
async def list_items(store: ItemStore = Depends(get_store)) -> ItemListResponse:
    return [ItemResponse.model_validate(item) for item in store.list()]


@router.get(
    "/{item_id}",
    response_model=ItemResponse,
    responses={
        400: {"description": "Malformed id", "model": ErrorResponse},
        404: {"description": "Item not found", "model": ErrorResponse},
    },
    summary="Get a single item by ID",
)
async def get_item(
    item_id: str,
    store: ItemStore = Depends(get_store),
) -> ItemResponse:
    item = store.get(parse_item_id(item_id))
    return ItemResponse.model_validate(item)


@router.put(
    "/{item_id}",
    response_model=ItemResponse,
    responses={
        400: {"description": "Malformed id or empty name", "model": ErrorResponse},
        404: {"description": "Item not found", "model": ErrorResponse},
    },
    summary="Rename an item",
)
async def update_item(
    item_id: str,
    payload: ItemUpdate,
    store: ItemStore = Depends(get_store),
) -> ItemResponse:
    """Replace the item's name. The id never changes."""
    item = store.update(parse_item_id(item_id), payload.name)
    return ItemResponse.model_validate(item)


@router.delete(
    "/{item_id}",
    response_model=ItemResponse,
    responses={
        400: {"description": "Malformed id", "model": ErrorResponse},
        404: {"description": "Item not found", "model": ErrorResponse},
    },
    summary="Delete an item",
)
async def delete_item(
    item_id: str,
    store: ItemStore = Depends(get_store),
) -> ItemResponse:
    """Remove the item and return it as it was at deletion time."""
    item = store.delete(parse_item_id(item_id))
    return ItemResponse.model_validate(item)
