"""
HTTP/JSON access layer for a key-value store.
"""
__version__ = "0.1.0"
