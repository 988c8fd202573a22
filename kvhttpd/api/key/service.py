"""
Translation between decoded requests and store calls.
"""
import logging
from typing import Dict
from pydantic import ValidationError as PydanticValidationError
from kvhttpd.api.key.models import KeyValuePairSet
from kvhttpd.core.exceptions import StoreOperationError, ValidationError
from kvhttpd.store.base import BaseStore

logger = logging.getLogger(__name__)


def parse_pairs(body: bytes) -> Dict[str, str]:
    """Decode a raw request body into key/value pairs, in arrival order.

    The Content-Type header is not consulted; any body that is a JSON object
    of string values is accepted.
    """
    try:
        return KeyValuePairSet.model_validate_json(body).root
    except PydanticValidationError as e:
        raise ValidationError(
            "Request body must be a JSON object of string values",
            detail=str(e),
        ) from e


def get_value(store: BaseStore, key: str) -> str:
    """Get a value from the store; absent keys read as ""."""
    try:
        value = store.get(key)
    except Exception as e:
        raise StoreOperationError("get", key) from e
    logger.debug(f"get {key!r}")
    return value or ""


def set_pairs(store: BaseStore, pairs: Dict[str, str]) -> None:
    """Set each pair independently.

    A failure stops the batch; pairs already written stay written.
    """
    for key, value in pairs.items():
        try:
            store.set(key, value)
        except Exception as e:
            raise StoreOperationError("set", key) from e
        logger.debug(f"set {key!r}")


def delete_key(store: BaseStore, key: str) -> None:
    """Delete a key from the store."""
    try:
        store.delete(key)
    except Exception as e:
        raise StoreOperationError("delete", key) from e
    logger.debug(f"delete {key!r}")
