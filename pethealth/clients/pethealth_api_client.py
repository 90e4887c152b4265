"""
PetHealth API HTTP Client

Async client for the PetHealth REST API.
Uses httpx for async HTTP with bearer token authentication.

One attempt per call: no retries, no backoff. Failures surface as
``APIError`` subclasses (see ``pethealth.clients.exceptions``).
"""

from __future__ import annotations

import logging
from datetime import date
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from pethealth.clients.exceptions import (
    DecodingError,
    InvalidURLError,
    NoResponseBodyError,
    ServerError,
    TransportError,
    UnauthorizedError,
)
from pethealth.config.settings import get_settings
from pethealth.schemas import (
    APIErrorResponse,
    AppointmentResponse,
    AuthResponse,
    ClinicResponse,
    CreateAppointmentRequest,
    CreatePetRequest,
    CreateVaccinationRequest,
    DashboardResponse,
    EmergencyInfoResponse,
    EmptyResponse,
    LoginRequest,
    MedicationResponse,
    PetResponse,
    RegisterRequest,
    StartSymptomSessionRequest,
    SymptomCategoryResponse,
    SymptomMessageRequest,
    SymptomMessageResponse,
    SymptomSessionResponse,
    TimeSlotResponse,
    UpdatePetRequest,
    UpdateProfileRequest,
    UserResponse,
    VaccinationResponse,
)
from pethealth.storage import StorageError, TokenStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


class PetHealthAPIClient:
    """
    Async HTTP client for the PetHealth API.

    Holds an optional bearer token. When present it is sent as
    ``Authorization: Bearer <token>`` on every request; when absent requests
    are still issued and the server is expected to answer 401.

    Example:
        async with PetHealthAPIClient() as client:
            auth = await client.login("owner@example.com", "secret")
            pets = await client.get_pets()
    """

    def __init__(
        self,
        base_url: str | None = None,
        auth_token: str | None = None,
        token_store: TokenStore | None = None,
        timeout_seconds: float | None = None,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root including the ``/api`` prefix (defaults to API_BASE_URL)
            auth_token: Initial bearer token, not persisted
            token_store: Where login/register/logout persist the token
            timeout_seconds: Transport timeout (defaults to API_TIMEOUT)
            user_agent: User-Agent header (defaults to API_USER_AGENT)
            transport: Custom httpx transport, e.g. ``httpx.MockTransport`` in tests
        """
        settings = get_settings()
        self.base_url = (base_url if base_url is not None else settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout_seconds or settings.API_TIMEOUT
        self.user_agent = user_agent or settings.API_USER_AGENT
        self._token_store = token_store
        self._auth_token = auth_token
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "PetHealthAPIClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def initialize(self) -> httpx.AsyncClient:
        """Create the underlying connection pool if needed and return it."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _ensure_client(self) -> httpx.AsyncClient:
        return await self.initialize()

    # ------------------------------------------------------------------
    # Token management
    # ------------------------------------------------------------------

    @property
    def auth_token(self) -> str | None:
        return self._auth_token

    @property
    def is_authenticated(self) -> bool:
        return self._auth_token is not None

    def set_auth_token(self, token: str | None) -> None:
        """Set or clear the bearer token, mirroring it into the token store."""
        self._auth_token = token or None
        if self._token_store is None:
            return
        try:
            if self._auth_token:
                self._token_store.save(self._auth_token)
            else:
                self._token_store.clear()
        except StorageError:
            # In-memory token stays authoritative for this process
            logger.exception("Failed to persist auth token")

    def load_auth_token(self) -> str | None:
        """Restore the token persisted by a previous session."""
        if self._token_store is not None:
            self._auth_token = self._token_store.load()
        return self._auth_token

    # ------------------------------------------------------------------
    # Request building
    # ------------------------------------------------------------------

    def _build_url(self, endpoint: str) -> httpx.URL:
        raw = f"{self.base_url}{endpoint}"
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as e:
            raise InvalidURLError(raw) from e
        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidURLError(raw)
        return url

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        if self._auth_token:
            headers["Authorization"] = f"Bearer {self._auth_token}"
        return headers

    async def _request(
        self,
        method: str,
        endpoint: str,
        response_type: type[T] | Any,
        body: BaseModel | None = None,
        params: dict[str, str] | None = None,
    ) -> T:
        """Issue one request and decode the response into ``response_type``."""
        url = self._build_url(endpoint)
        client = await self._ensure_client()
        payload = body.to_payload() if body is not None else None

        logger.debug(f"{method} {endpoint}")
        try:
            response = await client.request(
                method,
                url,
                headers=self._build_headers(),
                json=payload,
                params=params,
            )
        except httpx.UnsupportedProtocol as e:
            raise InvalidURLError(str(url)) from e
        except httpx.RequestError as e:
            logger.warning(f"{method} {endpoint} failed: {type(e).__name__}: {e}")
            raise TransportError(e) from e

        return self._decode_response(method, endpoint, response, response_type)

    def _decode_response(self, method: str, endpoint: str, response: httpx.Response, response_type: Any) -> Any:
        status = response.status_code

        if 200 <= status < 300:
            if not response.content.strip():
                if response_type is EmptyResponse:
                    return EmptyResponse()
                raise NoResponseBodyError(status)
            try:
                return _adapter(response_type).validate_json(response.content)
            except ValidationError as e:
                logger.warning(f"{method} {endpoint}: response does not match {response_type!r}")
                raise DecodingError(str(e)) from e

        if status == 401:
            logger.info(f"{method} {endpoint}: unauthorized")
            raise UnauthorizedError()

        try:
            message = APIErrorResponse.model_validate_json(response.content).message
        except ValidationError:
            message = f"Server error: {status}"
        logger.warning(f"{method} {endpoint} returned {status}: {message}")
        raise ServerError(message, status)

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    async def login(self, email: str, password: str) -> AuthResponse:
        body = LoginRequest(email=email, password=password)
        response = await self._request("POST", "/auth/login", AuthResponse, body)
        self.set_auth_token(response.token)
        return response

    async def register(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        postcode: str,
        phone_number: str | None = None,
    ) -> AuthResponse:
        body = RegisterRequest(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password=password,
            phone_number=phone_number,
            postcode=postcode,
        )
        response = await self._request("POST", "/auth/register", AuthResponse, body)
        self.set_auth_token(response.token)
        return response

    async def logout(self) -> None:
        """Tell the server, then drop the token even if the server call failed."""
        try:
            await self._request("POST", "/auth/logout", EmptyResponse)
        finally:
            self.set_auth_token(None)

    # ------------------------------------------------------------------
    # User
    # ------------------------------------------------------------------

    async def get_profile(self) -> UserResponse:
        return await self._request("GET", "/user/profile", UserResponse)

    async def update_profile(self, profile: UpdateProfileRequest) -> UserResponse:
        return await self._request("PUT", "/user/profile", UserResponse, profile)

    async def get_dashboard(self) -> DashboardResponse:
        return await self._request("GET", "/user/dashboard", DashboardResponse)

    # ------------------------------------------------------------------
    # Pets
    # ------------------------------------------------------------------

    async def get_pets(self) -> list[PetResponse]:
        return await self._request("GET", "/user/pets", list[PetResponse])

    async def create_pet(self, pet: CreatePetRequest) -> PetResponse:
        return await self._request("POST", "/pets", PetResponse, pet)

    async def update_pet(self, pet_id: int, pet: UpdatePetRequest) -> PetResponse:
        return await self._request("PUT", f"/pets/{pet_id}", PetResponse, pet)

    async def delete_pet(self, pet_id: int) -> None:
        await self._request("DELETE", f"/pets/{pet_id}", EmptyResponse)

    # ------------------------------------------------------------------
    # Clinics
    # ------------------------------------------------------------------

    async def get_clinics(self) -> list[ClinicResponse]:
        return await self._request("GET", "/clinics", list[ClinicResponse])

    async def search_clinics(self, postcode: str) -> list[ClinicResponse]:
        return await self._request("GET", "/clinics/search", list[ClinicResponse], params={"postcode": postcode})

    async def get_available_slots(self, clinic_id: int, day: date | str) -> list[TimeSlotResponse]:
        day_param = day.isoformat() if isinstance(day, date) else day
        return await self._request(
            "GET",
            f"/clinics/{clinic_id}/available-slots",
            list[TimeSlotResponse],
            params={"date": day_param},
        )

    # ------------------------------------------------------------------
    # Appointments
    # ------------------------------------------------------------------

    async def get_appointments(self) -> list[AppointmentResponse]:
        return await self._request("GET", "/user/appointments", list[AppointmentResponse])

    async def create_appointment(self, appointment: CreateAppointmentRequest) -> AppointmentResponse:
        return await self._request("POST", "/appointments/request", AppointmentResponse, appointment)

    async def cancel_appointment(self, appointment_id: int) -> None:
        await self._request("DELETE", f"/appointments/{appointment_id}", EmptyResponse)

    # ------------------------------------------------------------------
    # Symptom checker
    # ------------------------------------------------------------------

    async def get_symptom_categories(self) -> list[SymptomCategoryResponse]:
        return await self._request("GET", "/symptoms/categories", list[SymptomCategoryResponse])

    async def start_symptom_session(self, pet_id: int, symptoms: list[str]) -> SymptomSessionResponse:
        body = StartSymptomSessionRequest(pet_id=pet_id, symptoms=symptoms)
        return await self._request("POST", "/symptoms/start", SymptomSessionResponse, body)

    async def send_symptom_message(self, session_id: str, message: str) -> SymptomMessageResponse:
        body = SymptomMessageRequest(session_id=session_id, message=message)
        return await self._request("POST", "/symptoms/message", SymptomMessageResponse, body)

    async def get_emergency_info(self) -> EmergencyInfoResponse:
        return await self._request("GET", "/symptoms/emergency", EmergencyInfoResponse)

    # ------------------------------------------------------------------
    # Vaccinations / medications
    # ------------------------------------------------------------------

    async def get_vaccinations(self, pet_id: int) -> list[VaccinationResponse]:
        return await self._request("GET", f"/pets/{pet_id}/vaccinations", list[VaccinationResponse])

    async def create_vaccination(self, pet_id: int, vaccination: CreateVaccinationRequest) -> VaccinationResponse:
        return await self._request("POST", f"/pets/{pet_id}/vaccinations", VaccinationResponse, vaccination)

    async def get_medications(self, pet_id: int) -> list[MedicationResponse]:
        return await self._request("GET", f"/pets/{pet_id}/medications", list[MedicationResponse])

    async def get_active_medications(self, pet_id: int) -> list[MedicationResponse]:
        return await self._request("GET", f"/pets/{pet_id}/medications/active", list[MedicationResponse])
