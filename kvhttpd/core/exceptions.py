"""
Custom exceptions for the application.
"""
from typing import Optional


class AppException(Exception):
    """Base exception for application errors."""
    def __init__(self, message: str, status_code: int = 500, detail: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.detail = detail or message
        super().__init__(self.message)


class ValidationError(AppException):
    """Malformed request; raised before the store is touched."""
    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message, status_code=400, detail=detail)


class StoreOperationError(AppException):
    """The store capability failed a get, set or delete."""
    def __init__(self, operation: str, key: str):
        self.operation = operation
        self.key = key
        super().__init__(f"store {operation} failed for key {key!r}", status_code=500)
