"""
FastAPI application exposing a key-value store over HTTP.
"""
from fastapi import FastAPI
from kvhttpd.api.key.routes import router as key_router
from kvhttpd.core.exception_handlers import register_exception_handlers
from kvhttpd.store.base import BaseStore


def create_app(store: BaseStore) -> FastAPI:
    """Build an application bound to the given store.

    Each call returns an independent app with its own routing table; the
    store is the only shared state and is reached through app.state.
    """
    app = FastAPI(
        title="kvhttpd",
        redirect_slashes=False,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.store = store

    register_exception_handlers(app)
    app.include_router(key_router, prefix="/key", tags=["key"])
    return app
