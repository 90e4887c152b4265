from uuid import UUID, uuid4

from pydantic import Field

from pethealth.models.base import DomainModel


class Clinic(DomainModel):
    """Veterinary clinic reference record. Never mutated locally."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    address: str
    postcode: str
    phone_number: str
    email: str | None = None
    latitude: float
    longitude: float
    is_emergency: bool = False
    is_24_hours: bool = Field(False, alias="is24Hours")
    services: list[str] = Field(default_factory=list)
    opening_hours: dict[str, str] | None = None
    distance: float | None = None  # miles, filled in by the caller

    @property
    def coordinate(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)
