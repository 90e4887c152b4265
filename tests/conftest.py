"""
Shared pytest fixtures for all tests.

Provides in-memory storage, a frozen clock and factories for domain
records so individual test modules stay short.
"""

from datetime import UTC, date, datetime, timedelta
from uuid import uuid4

import pytest

from pethealth.models import Appointment, AppointmentStatus, AppointmentType, Pet, PetSpecies, User
from pethealth.services import SessionStore
from pethealth.storage import MemoryStorage

FIXED_NOW = datetime(2026, 3, 10, 12, 0, tzinfo=UTC)


# ============================================================================
# CLOCK / STORAGE
# ============================================================================


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def session_store(memory_storage: MemoryStorage) -> SessionStore:
    """Session store over empty in-memory storage with a frozen clock."""
    return SessionStore(memory_storage, "pethealth_data", clock=lambda: FIXED_NOW)


# ============================================================================
# DOMAIN FACTORIES
# ============================================================================


@pytest.fixture
def sample_user() -> User:
    return User(
        first_name="John",
        last_name="Smith",
        email="john.smith@email.com",
        phone_number="07700 900123",
        postcode="SW1A 1AA",
        member_since=FIXED_NOW,
        subscription_active=True,
    )


@pytest.fixture
def make_pet():
    def _make(**overrides) -> Pet:
        fields = {
            "name": "Max",
            "species": PetSpecies.DOG,
            "breed": "Golden Retriever",
            "date_of_birth": date(2023, 1, 5),
        }
        fields.update(overrides)
        return Pet(**fields)

    return _make


@pytest.fixture
def make_appointment():
    def _make(days_from_now: float = 3, **overrides) -> Appointment:
        fields = {
            "pet_id": uuid4(),
            "pet_name": "Max",
            "clinic_id": uuid4(),
            "clinic_name": "Pet_NHS Central Clinic",
            "type": AppointmentType.VACCINATION,
            "date_time": FIXED_NOW + timedelta(days=days_from_now),
            "duration": 30,
            "status": AppointmentStatus.SCHEDULED,
        }
        fields.update(overrides)
        return Appointment(**fields)

    return _make
