from datetime import UTC, datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import Field, field_validator

from pethealth.models.base import DomainModel


class AppointmentType(str, Enum):
    CONSULTATION = "Consultation"
    VACCINATION = "Vaccination"
    HEALTH_CHECK = "Health Check"
    SURGERY = "Surgery"
    FOLLOW_UP = "Follow-up"
    EMERGENCY = "Emergency"


class AppointmentStatus(str, Enum):
    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    NO_SHOW = "No Show"

    @property
    def is_terminal(self) -> bool:
        return self is not AppointmentStatus.SCHEDULED

    def can_transition_to(self, target: "AppointmentStatus") -> bool:
        """Only a scheduled appointment may move, and only to a terminal state."""
        return self is AppointmentStatus.SCHEDULED and target.is_terminal


class Appointment(DomainModel):
    """
    A booked visit.

    ``pet_name`` and ``clinic_name`` are snapshots taken at booking time and
    are not refreshed when the pet or clinic is renamed.
    """

    id: UUID = Field(default_factory=uuid4)
    pet_id: UUID
    pet_name: str
    clinic_id: UUID
    clinic_name: str
    type: AppointmentType
    date_time: datetime
    duration: int = 30  # minutes
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    notes: str | None = None
    veterinarian: str | None = None

    @field_validator("date_time", mode="after")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    def is_upcoming(self, now: datetime) -> bool:
        return self.status is AppointmentStatus.SCHEDULED and self.date_time > now

    def is_past(self, now: datetime) -> bool:
        # Status is ignored: a scheduled visit whose time has passed counts as past
        return self.date_time < now
