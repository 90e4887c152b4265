from datetime import UTC, datetime
from uuid import UUID, uuid4

from pydantic import Field

from pethealth.models.base import DomainModel


class User(DomainModel):
    """The signed-in pet owner."""

    id: UUID = Field(default_factory=uuid4)
    first_name: str
    last_name: str
    email: str
    phone_number: str = ""
    postcode: str = ""
    member_since: datetime = Field(default_factory=lambda: datetime.now(UTC))
    subscription_active: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
