from pydantic import Field

from pethealth.models.appointment import Appointment
from pethealth.models.base import DomainModel
from pethealth.models.pet import Pet
from pethealth.models.user import User


class AppData(DomainModel):
    """The whole local aggregate, persisted as a single blob."""

    is_logged_in: bool = False
    has_completed_onboarding: bool = False
    current_user: User | None = None
    pets: list[Pet] = Field(default_factory=list)
    appointments: list[Appointment] = Field(default_factory=list)
