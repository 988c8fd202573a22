"""
Request/Response models for key API.
"""
from typing import Dict
from pydantic import RootModel


class KeyValuePairSet(RootModel[Dict[str, str]]):
    """Request body for assigning one or more keys: {"k1": "v1", ...}."""
    root: Dict[str, str]
