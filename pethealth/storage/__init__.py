"""
Local persistence: key-value backends and the auth token store.
"""

from pethealth.storage.key_value import JSONFileStorage, KeyValueStorage, MemoryStorage, StorageError
from pethealth.storage.token_store import TokenStore

__all__ = [
    "JSONFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "StorageError",
    "TokenStore",
]
