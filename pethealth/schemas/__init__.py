"""
Request/response schemas for the PetHealth REST API.
"""

from pethealth.schemas.api import (
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
    NotificationResponse,
    PetResponse,
    RegisterRequest,
    StartSymptomSessionRequest,
    SymptomCategoryResponse,
    SymptomMessageRequest,
    SymptomMessageResponse,
    SymptomResponse,
    SymptomSessionResponse,
    TimeSlotResponse,
    UpdatePetRequest,
    UpdateProfileRequest,
    UserResponse,
    VaccinationResponse,
)

__all__ = [
    "APIErrorResponse",
    "AppointmentResponse",
    "AuthResponse",
    "ClinicResponse",
    "CreateAppointmentRequest",
    "CreatePetRequest",
    "CreateVaccinationRequest",
    "DashboardResponse",
    "EmergencyInfoResponse",
    "EmptyResponse",
    "LoginRequest",
    "MedicationResponse",
    "NotificationResponse",
    "PetResponse",
    "RegisterRequest",
    "StartSymptomSessionRequest",
    "SymptomCategoryResponse",
    "SymptomMessageRequest",
    "SymptomMessageResponse",
    "SymptomResponse",
    "SymptomSessionResponse",
    "TimeSlotResponse",
    "UpdatePetRequest",
    "UpdateProfileRequest",
    "UserResponse",
    "VaccinationResponse",
]
