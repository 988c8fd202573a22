"""
FastAPI routes for key access.
"""
import logging
from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool
from starlette.requests import ClientDisconnect
from kvhttpd.api.key.service import (
    parse_pairs,
    get_value,
    set_pairs,
    delete_key,
)
from kvhttpd.store.base import BaseStore

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> BaseStore:
    """Store capability bound to the application."""
    return request.app.state.store


@router.get("/{key}")
def get_key_endpoint(key: str, store: BaseStore = Depends(get_store)):
    """Get a key; an absent key is returned with an empty value."""
    return {key: get_value(store, key)}


@router.post("")
async def set_keys_endpoint(request: Request, store: BaseStore = Depends(get_store)):
    """Set every key in the JSON object body."""
    try:
        body = await request.body()
    except ClientDisconnect:
        # Nothing to answer; the store is left untouched.
        logger.debug(f"Client disconnected while sending body to {request.url.path}")
        return Response(status_code=400)
    pairs = parse_pairs(body)
    await run_in_threadpool(set_pairs, store, pairs)
    return Response(status_code=200)


@router.delete("/{key}")
def delete_key_endpoint(key: str, store: BaseStore = Depends(get_store)):
    """Delete a key."""
    delete_key(store, key)
    return Response(status_code=200)
