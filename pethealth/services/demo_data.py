"""Sample account used for demos and first-run previews."""

from datetime import date, datetime, timedelta
from uuid import uuid4

from pethealth.models import (
    AppData,
    Appointment,
    AppointmentStatus,
    AppointmentType,
    Pet,
    PetSpecies,
    User,
)


def _years_ago(today: date, years: int) -> date:
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        # 29 February
        return today.replace(year=today.year - years, day=28)


def build_demo_data(now: datetime) -> AppData:
    """A logged-in, onboarded user with two pets and two upcoming visits."""
    user = User(
        first_name="John",
        last_name="Smith",
        email="john.smith@email.com",
        phone_number="07700 900123",
        postcode="SW1A 1AA",
        member_since=now,
        subscription_active=True,
    )

    today = now.date()
    max_the_dog = Pet(
        name="Max",
        species=PetSpecies.DOG,
        breed="Golden Retriever",
        date_of_birth=_years_ago(today, 3),
        weight=32.5,
        microchip_number="123456789012345",
    )
    luna = Pet(
        name="Luna",
        species=PetSpecies.CAT,
        breed="British Shorthair",
        date_of_birth=_years_ago(today, 2),
        weight=4.2,
        microchip_number="987654321098765",
    )

    appointments = [
        Appointment(
            pet_id=max_the_dog.id,
            pet_name=max_the_dog.name,
            clinic_id=uuid4(),
            clinic_name="Pet_NHS Central Clinic",
            type=AppointmentType.VACCINATION,
            date_time=now + timedelta(days=3),
            duration=30,
            status=AppointmentStatus.SCHEDULED,
            veterinarian="Dr. Sarah Wilson",
        ),
        Appointment(
            pet_id=luna.id,
            pet_name=luna.name,
            clinic_id=uuid4(),
            clinic_name="Pet_NHS North Clinic",
            type=AppointmentType.HEALTH_CHECK,
            date_time=now + timedelta(days=7),
            duration=45,
            status=AppointmentStatus.SCHEDULED,
            veterinarian="Dr. James Brown",
        ),
    ]

    return AppData(
        is_logged_in=True,
        has_completed_onboarding=True,
        current_user=user,
        pets=[max_the_dog, luna],
        appointments=appointments,
    )
