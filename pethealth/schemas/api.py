"""
Wire schemas for the PetHealth REST API.

Field names are snake_case both on the wire and in Python. Request models
are serialized without unset optional fields; response models ignore
unknown fields so server additions do not break decoding.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class ApiSchema(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    def to_payload(self) -> dict[str, Any]:
        """JSON body for a request, omitting optional fields left as None."""
        return self.model_dump(mode="json", exclude_none=True)


# ============================================================================
# Auth / user
# ============================================================================


class LoginRequest(ApiSchema):
    email: str
    password: str


class RegisterRequest(ApiSchema):
    first_name: str
    last_name: str
    email: str
    password: str
    phone_number: str | None = None
    postcode: str


class UserResponse(ApiSchema):
    id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str | None = None
    postcode: str | None = None
    member_since: str | None = None
    subscription_active: bool | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class AuthResponse(ApiSchema):
    token: str
    user: UserResponse


class UpdateProfileRequest(ApiSchema):
    first_name: str
    last_name: str
    phone_number: str | None = None
    postcode: str | None = None


class NotificationResponse(ApiSchema):
    id: int
    title: str
    message: str
    type: str
    read: bool
    created_at: str


# ============================================================================
# Pets
# ============================================================================


class PetResponse(ApiSchema):
    id: int
    name: str
    species: str
    breed: str
    date_of_birth: str | None = None
    weight: float | None = None
    microchip_number: str | None = None


class CreatePetRequest(ApiSchema):
    name: str
    species: str
    breed: str
    date_of_birth: str | None = None
    weight: float | None = None
    microchip_number: str | None = None


class UpdatePetRequest(CreatePetRequest):
    pass


class VaccinationResponse(ApiSchema):
    id: int
    pet_id: int
    name: str
    date_given: str
    next_due_date: str | None = None
    veterinarian: str | None = None
    notes: str | None = None


class CreateVaccinationRequest(ApiSchema):
    name: str
    date_given: str
    next_due_date: str | None = None
    veterinarian: str | None = None
    notes: str | None = None


class MedicationResponse(ApiSchema):
    id: int
    pet_id: int
    name: str
    dosage: str
    frequency: str
    start_date: str
    end_date: str | None = None
    status: str
    notes: str | None = None


# ============================================================================
# Clinics / appointments
# ============================================================================


class ClinicResponse(ApiSchema):
    id: int
    name: str
    address: str
    postcode: str
    phone_number: str
    email: str | None = None
    latitude: float
    longitude: float
    is_emergency: bool
    is_24_hours: bool
    services: list[str] | None = None
    distance: float | None = None


class TimeSlotResponse(ApiSchema):
    time: str
    available: bool


class AppointmentResponse(ApiSchema):
    id: int
    pet_id: int
    pet_name: str
    clinic_id: int
    clinic_name: str
    type: str
    date_time: str
    duration: int
    status: str
    notes: str | None = None
    veterinarian: str | None = None


class CreateAppointmentRequest(ApiSchema):
    pet_id: int
    clinic_id: int
    type: str
    date_time: str
    notes: str | None = None


class DashboardResponse(ApiSchema):
    upcoming_appointments: list[AppointmentResponse]
    pets: list[PetResponse]
    notifications: list[NotificationResponse] | None = None


# ============================================================================
# Symptom checker
# ============================================================================


class SymptomResponse(ApiSchema):
    id: int
    name: str
    description: str
    severity: str


class SymptomCategoryResponse(ApiSchema):
    id: int
    name: str
    icon: str
    symptoms: list[SymptomResponse]


class StartSymptomSessionRequest(ApiSchema):
    pet_id: int
    symptoms: list[str]


class SymptomSessionResponse(ApiSchema):
    session_id: str
    message: str
    recommendations: list[str] | None = None


class SymptomMessageRequest(ApiSchema):
    session_id: str
    message: str


class SymptomMessageResponse(ApiSchema):
    message: str
    severity: str | None = None
    recommendations: list[str] | None = None
    seek_vet_immediately: bool | None = None


class EmergencyInfoResponse(ApiSchema):
    emergency_number: str
    emergency_clinics: list[ClinicResponse]
    first_aid_tips: list[str]


# ============================================================================
# Generic
# ============================================================================


class APIErrorResponse(ApiSchema):
    message: str = Field(..., min_length=1)


class EmptyResponse(ApiSchema):
    """Body of endpoints that answer with ``{}`` (or nothing)."""
