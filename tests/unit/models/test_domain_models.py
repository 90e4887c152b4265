# ============================================================================
# Tests for local domain models
# ============================================================================
"""Unit tests for the session aggregate models.

Covers appointment status rules, upcoming/past partitioning, pet age
rendering and the persisted JSON layout of the aggregate.
"""

import json
from datetime import UTC, date, datetime, timedelta

import pytest

from pethealth.models import (
    AppData,
    Appointment,
    AppointmentStatus,
    Clinic,
    Pet,
    PetSpecies,
    Symptom,
    SymptomCategory,
    SymptomSeverity,
    User,
    VaccinationRecord,
)


class TestAppointmentStatus:
    """Tests for the appointment status state machine."""

    @pytest.mark.parametrize(
        "target",
        [AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED, AppointmentStatus.NO_SHOW],
    )
    def test_scheduled_can_reach_every_terminal_state(self, target: AppointmentStatus) -> None:
        assert AppointmentStatus.SCHEDULED.can_transition_to(target) is True

    def test_scheduled_cannot_transition_to_itself(self) -> None:
        assert AppointmentStatus.SCHEDULED.can_transition_to(AppointmentStatus.SCHEDULED) is False

    @pytest.mark.parametrize(
        "source",
        [AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED, AppointmentStatus.NO_SHOW],
    )
    def test_terminal_states_are_final(self, source: AppointmentStatus) -> None:
        for target in AppointmentStatus:
            assert source.can_transition_to(target) is False

    def test_raw_values_match_display_names(self) -> None:
        assert AppointmentStatus.NO_SHOW.value == "No Show"
        assert AppointmentStatus("Scheduled") is AppointmentStatus.SCHEDULED


class TestAppointmentTiming:
    """Tests for is_upcoming / is_past."""

    def test_future_scheduled_is_upcoming(self, make_appointment, now) -> None:
        appointment = make_appointment(days_from_now=1)
        assert appointment.is_upcoming(now) is True
        assert appointment.is_past(now) is False

    def test_cancelled_future_is_not_upcoming(self, make_appointment, now) -> None:
        appointment = make_appointment(days_from_now=1, status=AppointmentStatus.CANCELLED)
        assert appointment.is_upcoming(now) is False

    def test_scheduled_in_the_past_counts_as_past(self, make_appointment, now) -> None:
        appointment = make_appointment(days_from_now=-1)
        assert appointment.is_upcoming(now) is False
        assert appointment.is_past(now) is True

    def test_exactly_now_is_neither(self, make_appointment, now) -> None:
        appointment = make_appointment(days_from_now=0)
        assert appointment.is_upcoming(now) is False
        assert appointment.is_past(now) is False

    def test_naive_datetime_is_read_as_utc(self, make_appointment) -> None:
        appointment = make_appointment(date_time=datetime(2026, 5, 1, 9, 30))
        assert appointment.date_time.tzinfo is UTC


class TestPetAge:
    """Tests for Pet.age_description."""

    @pytest.mark.parametrize(
        ("born", "today", "expected"),
        [
            (date(2023, 3, 10), date(2026, 3, 10), "3 years"),
            (date(2025, 3, 10), date(2026, 3, 10), "1 year"),
            (date(2025, 3, 11), date(2026, 3, 10), "11 months"),
            (date(2026, 2, 10), date(2026, 3, 10), "1 month"),
            (date(2026, 2, 20), date(2026, 3, 10), "< 1 month"),
            (date(2026, 3, 10), date(2026, 3, 10), "< 1 month"),
        ],
    )
    def test_age_description(self, make_pet, born: date, today: date, expected: str) -> None:
        pet = make_pet(date_of_birth=born)
        assert pet.age_description(today) == expected


class TestVaccinationRecord:
    def test_is_due(self, make_pet) -> None:
        pet = make_pet()
        record = VaccinationRecord(
            pet_id=pet.id,
            name="Rabies",
            date_given=date(2025, 3, 1),
            next_due_date=date(2026, 3, 1),
        )
        assert record.is_due(date(2026, 3, 1)) is True
        assert record.is_due(date(2026, 2, 28)) is False

    def test_without_next_due_date_is_never_due(self, make_pet) -> None:
        record = VaccinationRecord(pet_id=make_pet().id, name="Leptospirosis", date_given=date(2025, 1, 1))
        assert record.is_due(date(2030, 1, 1)) is False


class TestUser:
    def test_full_name(self, sample_user: User) -> None:
        assert sample_user.full_name == "John Smith"

    def test_ids_are_unique(self) -> None:
        first = User(first_name="A", last_name="B", email="a@b.c")
        second = User(first_name="A", last_name="B", email="a@b.c")
        assert first.id != second.id


class TestReferenceModels:
    def test_clinic_uses_is24hours_key(self) -> None:
        clinic = Clinic(
            name="Pet_NHS Central Clinic",
            address="123 High Street",
            postcode="SW1A 1AA",
            phone_number="020 1234 5678",
            latitude=51.5074,
            longitude=-0.1278,
            is_24_hours=True,
        )
        payload = json.loads(clinic.to_json())
        assert payload["is24Hours"] is True
        assert payload["phoneNumber"] == "020 1234 5678"
        assert clinic.coordinate == (51.5074, -0.1278)

    def test_symptom_filters_by_species(self) -> None:
        coughing = Symptom(
            name="Coughing",
            description="Repeated coughing or hacking sounds",
            severity=SymptomSeverity.MODERATE,
            applicable_species=(PetSpecies.DOG, PetSpecies.CAT),
        )
        lethargy = Symptom(name="Lethargy", description="Unusual tiredness", severity=SymptomSeverity.MODERATE)
        category = SymptomCategory(name="Respiratory", symptoms=(coughing, lethargy))

        assert category.symptoms_for(PetSpecies.RABBIT) == [lethargy]
        assert category.symptoms_for(PetSpecies.DOG) == [coughing, lethargy]

    def test_symptom_is_immutable(self) -> None:
        symptom = Symptom(name="Limping", description="Favouring one leg", severity=SymptomSeverity.MODERATE)
        with pytest.raises(Exception):
            symptom.name = "Other"


class TestAppDataSerialization:
    """Tests for the persisted aggregate layout."""

    def test_empty_aggregate_layout(self) -> None:
        payload = json.loads(AppData().to_json())
        assert payload == {
            "isLoggedIn": False,
            "hasCompletedOnboarding": False,
            "currentUser": None,
            "pets": [],
            "appointments": [],
        }

    def test_round_trip_with_every_optional_field_set(self, sample_user, make_pet, make_appointment) -> None:
        pet = make_pet(weight=32.5, microchip_number="123456789012345", image_data=b"\x89PNG\x00\xff", notes="Shy")
        appointment = make_appointment(pet_id=pet.id, notes="Bring records", veterinarian="Dr. Sarah Wilson")
        data = AppData(
            is_logged_in=True,
            has_completed_onboarding=True,
            current_user=sample_user,
            pets=[pet],
            appointments=[appointment],
        )

        assert AppData.from_json(data.to_json()) == data

    def test_round_trip_with_optional_fields_absent(self, make_pet, make_appointment) -> None:
        data = AppData(pets=[make_pet()], appointments=[make_appointment()])

        restored = AppData.from_json(data.to_json())

        assert restored == data
        assert restored.current_user is None
        assert restored.pets[0].weight is None
        assert restored.pets[0].image_data is None
        assert restored.appointments[0].notes is None

    def test_accepts_camel_case_input(self) -> None:
        raw = json.dumps(
            {
                "isLoggedIn": True,
                "hasCompletedOnboarding": False,
                "currentUser": None,
                "pets": [
                    {
                        "id": "7f8e2f7e-4a57-4df2-9e6c-1f9a3bd0a1b2",
                        "name": "Luna",
                        "species": "Cat",
                        "breed": "British Shorthair",
                        "dateOfBirth": "2024-02-01",
                    }
                ],
                "appointments": [],
            }
        )
        data = AppData.from_json(raw)
        assert data.is_logged_in is True
        assert data.pets[0].species is PetSpecies.CAT
        assert data.pets[0].date_of_birth == date(2024, 2, 1)

    def test_image_bytes_are_base64_encoded(self, make_pet) -> None:
        pet = make_pet(image_data=b"\x00\x01\x02")
        payload = json.loads(pet.to_json())
        assert payload["imageData"] == "AAEC"

    def test_appointment_date_time_survives_timezone(self, make_appointment, now) -> None:
        appointment = make_appointment(date_time=now + timedelta(hours=5))
        restored = Appointment.from_json(appointment.to_json())
        assert restored.date_time == now + timedelta(hours=5)

    def test_pet_round_trip(self, make_pet) -> None:
        pet = make_pet()
        assert Pet.from_json(pet.to_json()) == pet
