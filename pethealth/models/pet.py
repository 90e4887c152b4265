from datetime import date
from enum import Enum
from uuid import UUID, uuid4

from pydantic import Field

from pethealth.models.base import DomainModel


class PetSpecies(str, Enum):
    DOG = "Dog"
    CAT = "Cat"
    RABBIT = "Rabbit"
    GUINEA_PIG = "Guinea Pig"
    HAMSTER = "Hamster"
    BIRD = "Bird"
    REPTILE = "Reptile"
    OTHER = "Other"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


class Pet(DomainModel):
    """A pet profile owned by the current user."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    species: PetSpecies
    breed: str = ""
    date_of_birth: date
    weight: float | None = None  # kg
    microchip_number: str | None = None
    image_data: bytes | None = None
    notes: str | None = None

    def age_description(self, today: date | None = None) -> str:
        """
        Human readable age, e.g. "3 years", "1 month" or "< 1 month".

        Counts whole calendar months between the birth date and ``today``.
        """
        today = today or date.today()
        months = (today.year - self.date_of_birth.year) * 12 + (today.month - self.date_of_birth.month)
        if today.day < self.date_of_birth.day:
            months -= 1

        years = months // 12
        if years > 0:
            return _plural(years, "year")
        if months > 0:
            return _plural(months, "month")
        return "< 1 month"


class VaccinationRecord(DomainModel):
    id: UUID = Field(default_factory=uuid4)
    pet_id: UUID
    name: str
    date_given: date
    next_due_date: date | None = None
    veterinarian: str | None = None
    notes: str | None = None

    def is_due(self, today: date | None = None) -> bool:
        """True when a next due date is set and has been reached."""
        if self.next_due_date is None:
            return False
        return self.next_due_date <= (today or date.today())
