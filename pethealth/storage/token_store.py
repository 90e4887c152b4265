import logging

from pethealth.storage.key_value import KeyValueStorage, StorageError

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_KEY = "auth_token"


class TokenStore:
    """Persists the bearer token under its own key, apart from the session blob."""

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_TOKEN_KEY):
        self._storage = storage
        self._key = key

    def load(self) -> str | None:
        """Return the saved token, or None when absent or unreadable."""
        try:
            token = self._storage.get(self._key)
        except StorageError as e:
            logger.warning(f"Auth token unreadable, starting signed out: {e}")
            return None
        return token or None

    def save(self, token: str) -> None:
        self._storage.set(self._key, token)
        logger.debug("Auth token saved")

    def clear(self) -> None:
        self._storage.remove(self._key)
        logger.debug("Auth token cleared")
