"""
Dependency Injection Container

Builds the storage, session store, token store and API client once per
process and hands the same instances to every consumer.
"""

import logging

import httpx

from pethealth.clients import PetHealthAPIClient
from pethealth.config.settings import Settings, get_settings
from pethealth.services import LoadResult, SessionStore
from pethealth.storage import JSONFileStorage, KeyValueStorage, TokenStore

logger = logging.getLogger(__name__)


class AppContainer:
    """
    Owns the long-lived objects of one client process.

    Created at start-up, torn down with ``aclose()`` at exit.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        storage: KeyValueStorage | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            settings: Configuration (defaults to the cached settings)
            storage: Key-value backend (defaults to a JSON file at STORAGE_PATH)
            transport: Optional httpx transport for the API client
        """
        self.settings = settings or get_settings()
        self.storage: KeyValueStorage = storage or JSONFileStorage(self.settings.STORAGE_PATH)
        self._transport = transport

        self._session_store: SessionStore | None = None
        self._token_store: TokenStore | None = None
        self._api_client: PetHealthAPIClient | None = None

        logger.info("AppContainer initialized")

    def get_token_store(self) -> TokenStore:
        if self._token_store is None:
            self._token_store = TokenStore(self.storage, self.settings.AUTH_TOKEN_STORAGE_KEY)
        return self._token_store

    def get_session_store(self) -> SessionStore:
        if self._session_store is None:
            self._session_store = SessionStore(self.storage, self.settings.SESSION_STORAGE_KEY)
        return self._session_store

    def get_api_client(self) -> PetHealthAPIClient:
        if self._api_client is None:
            self._api_client = PetHealthAPIClient(
                base_url=self.settings.API_BASE_URL,
                token_store=self.get_token_store(),
                timeout_seconds=self.settings.API_TIMEOUT,
                user_agent=self.settings.API_USER_AGENT,
                transport=self._transport,
            )
        return self._api_client

    def start(self) -> LoadResult:
        """Restore the saved session and auth token."""
        result = self.get_session_store().load()
        self.get_api_client().load_auth_token()
        logger.info(f"Session restored: {result.status.value}")
        return result

    async def aclose(self) -> None:
        if self._api_client is not None:
            await self._api_client.close()
