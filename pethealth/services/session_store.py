# ============================================================================
# SCOPE: LOCAL
# Description: Local session state (user, pets, appointments).
#              Persisted as a single JSON blob under a fixed key.
# ============================================================================
"""
Session Store.

Single source of truth for "am I logged in" and for the locally cached
user, pets and appointments. Every mutation rewrites the whole aggregate.

Not thread-safe: all calls are expected from a single owning thread (or a
single asyncio loop). Callers sharing a store across threads must
synchronize externally.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from uuid import UUID

from pydantic import ValidationError

from pethealth.core.logger import get_store_logger
from pethealth.models import AppData, Appointment, AppointmentStatus, Pet, User
from pethealth.services.demo_data import build_demo_data
from pethealth.storage import KeyValueStorage, StorageError

logger = get_store_logger("session")

DEFAULT_SESSION_KEY = "pethealth_data"


class LoadStatus(str, Enum):
    EMPTY = "empty"  # nothing saved yet
    LOADED = "loaded"
    CORRUPT = "corrupt"  # saved data present but unreadable


@dataclass(frozen=True)
class LoadResult:
    status: LoadStatus
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is not LoadStatus.CORRUPT


def _utc_now() -> datetime:
    return datetime.now(UTC)


class SessionStore:
    """
    In-memory session backed by a key-value store.

    Update/delete/transition operations return False when the target id is
    not present (or the transition is not allowed) and leave the state
    untouched; they never raise. Records are copied on the way in and on
    the way out so that only store operations change persisted state.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        storage_key: str = DEFAULT_SESSION_KEY,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._storage = storage
        self._storage_key = storage_key
        self._clock = clock
        self._data = AppData()
        self.last_load_result: LoadResult | None = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def is_logged_in(self) -> bool:
        return self._data.is_logged_in

    @property
    def has_completed_onboarding(self) -> bool:
        return self._data.has_completed_onboarding

    @property
    def current_user(self) -> User | None:
        user = self._data.current_user
        return user.model_copy(deep=True) if user else None

    @property
    def pets(self) -> list[Pet]:
        return [pet.model_copy(deep=True) for pet in self._data.pets]

    @property
    def appointments(self) -> list[Appointment]:
        return [appt.model_copy(deep=True) for appt in self._data.appointments]

    def snapshot(self) -> AppData:
        """Deep copy of the whole aggregate."""
        return self._data.model_copy(deep=True)

    # ------------------------------------------------------------------
    # User
    # ------------------------------------------------------------------

    def login(self, user: User) -> None:
        """Mark ``user`` as signed in. Credentials are not checked here."""
        self._data.current_user = user.model_copy(deep=True)
        self._data.is_logged_in = True
        logger.info("Session started", user_id=str(user.id))
        self.save()

    def logout(self) -> None:
        """Full wipe: user, pets, appointments and the onboarding flag."""
        self._data = AppData()
        logger.info("Session cleared")
        self.save()

    def complete_onboarding(self) -> None:
        self._data.has_completed_onboarding = True
        self.save()

    # ------------------------------------------------------------------
    # Pets
    # ------------------------------------------------------------------

    def _pet_index(self, pet_id: UUID) -> int | None:
        for index, pet in enumerate(self._data.pets):
            if pet.id == pet_id:
                return index
        return None

    def get_pet(self, pet_id: UUID) -> Pet | None:
        index = self._pet_index(pet_id)
        return self._data.pets[index].model_copy(deep=True) if index is not None else None

    def add_pet(self, pet: Pet) -> bool:
        if self._pet_index(pet.id) is not None:
            logger.warning(f"Pet {pet.id} already exists, not added")
            return False
        self._data.pets.append(pet.model_copy(deep=True))
        self.save()
        return True

    def update_pet(self, pet: Pet) -> bool:
        """Replace the stored pet with the same id. No partial merge."""
        index = self._pet_index(pet.id)
        if index is None:
            logger.debug(f"update_pet: pet {pet.id} not found")
            return False
        self._data.pets[index] = pet.model_copy(deep=True)
        self.save()
        return True

    def delete_pet(self, pet_id: UUID) -> bool:
        """
        Hard delete. Appointments referencing the pet are kept as they are.
        """
        index = self._pet_index(pet_id)
        if index is None:
            logger.debug(f"delete_pet: pet {pet_id} not found")
            return False
        del self._data.pets[index]
        self.save()
        return True

    # ------------------------------------------------------------------
    # Appointments
    # ------------------------------------------------------------------

    def _appointment_index(self, appointment_id: UUID) -> int | None:
        for index, appointment in enumerate(self._data.appointments):
            if appointment.id == appointment_id:
                return index
        return None

    def get_appointment(self, appointment_id: UUID) -> Appointment | None:
        index = self._appointment_index(appointment_id)
        if index is None:
            return None
        return self._data.appointments[index].model_copy(deep=True)

    def appointments_for_pet(self, pet_id: UUID) -> list[Appointment]:
        return [appt.model_copy(deep=True) for appt in self._data.appointments if appt.pet_id == pet_id]

    def add_appointment(self, appointment: Appointment) -> bool:
        if self._appointment_index(appointment.id) is not None:
            logger.warning(f"Appointment {appointment.id} already exists, not added")
            return False
        self._data.appointments.append(appointment.model_copy(deep=True))
        self.save()
        return True

    def update_appointment(self, appointment: Appointment) -> bool:
        """
        Replace the stored appointment with the same id.

        Rejected when it would change the status along a disallowed
        transition, e.g. reopening a cancelled appointment.
        """
        index = self._appointment_index(appointment.id)
        if index is None:
            logger.debug(f"update_appointment: appointment {appointment.id} not found")
            return False

        current = self._data.appointments[index].status
        if appointment.status != current and not current.can_transition_to(appointment.status):
            logger.warning(
                f"Appointment {appointment.id}: transition {current.value} -> {appointment.status.value} rejected"
            )
            return False

        self._data.appointments[index] = appointment.model_copy(deep=True)
        self.save()
        return True

    def _transition(self, appointment_id: UUID, target: AppointmentStatus) -> bool:
        index = self._appointment_index(appointment_id)
        if index is None:
            logger.debug(f"Appointment {appointment_id} not found")
            return False

        appointment = self._data.appointments[index]
        if not appointment.status.can_transition_to(target):
            logger.warning(
                f"Appointment {appointment_id}: transition {appointment.status.value} -> {target.value} rejected"
            )
            return False

        appointment.status = target
        self.save()
        return True

    def cancel_appointment(self, appointment_id: UUID) -> bool:
        """Soft cancel: the record stays, flagged as cancelled."""
        return self._transition(appointment_id, AppointmentStatus.CANCELLED)

    def complete_appointment(self, appointment_id: UUID) -> bool:
        return self._transition(appointment_id, AppointmentStatus.COMPLETED)

    def mark_no_show(self, appointment_id: UUID) -> bool:
        return self._transition(appointment_id, AppointmentStatus.NO_SHOW)

    @property
    def upcoming_appointments(self) -> list[Appointment]:
        """Scheduled and strictly in the future, soonest first."""
        now = self._clock()
        upcoming = [appt for appt in self._data.appointments if appt.is_upcoming(now)]
        return [appt.model_copy(deep=True) for appt in sorted(upcoming, key=lambda appt: appt.date_time)]

    @property
    def past_appointments(self) -> list[Appointment]:
        """Strictly in the past regardless of status, most recent first."""
        now = self._clock()
        past = [appt for appt in self._data.appointments if appt.is_past(now)]
        return [appt.model_copy(deep=True) for appt in sorted(past, key=lambda appt: appt.date_time, reverse=True)]

    # ------------------------------------------------------------------
    # Demo
    # ------------------------------------------------------------------

    def load_demo_data(self) -> None:
        self._data = build_demo_data(self._clock())
        self.save()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self) -> bool:
        """
        Write the aggregate. Failures are logged and reported as False;
        the in-memory state is kept either way.
        """
        try:
            self._storage.set(self._storage_key, self._data.to_json())
        except StorageError:
            logger.exception("Failed to persist session", storage_key=self._storage_key)
            return False
        return True

    def load(self) -> LoadResult:
        """
        Restore the aggregate saved under the storage key.

        On CORRUPT the in-memory state is reset to defaults and the saved
        blob is left in place for the caller to inspect or discard.
        """
        try:
            raw = self._storage.get(self._storage_key)
        except StorageError as e:
            logger.warning(f"Session storage unreadable: {e}")
            self._data = AppData()
            result = LoadResult(LoadStatus.CORRUPT, str(e))
        else:
            if raw is None:
                self._data = AppData()
                result = LoadResult(LoadStatus.EMPTY)
            else:
                try:
                    self._data = AppData.from_json(raw)
                    result = LoadResult(LoadStatus.LOADED)
                except ValidationError as e:
                    logger.warning(f"Saved session under '{self._storage_key}' is corrupt: {e.error_count()} errors")
                    self._data = AppData()
                    result = LoadResult(LoadStatus.CORRUPT, str(e))

        self.last_load_result = result
        return result

    def discard_saved_data(self) -> None:
        """Drop the persisted blob, e.g. after a CORRUPT load."""
        try:
            self._storage.remove(self._storage_key)
        except StorageError:
            logger.exception(f"Failed to remove session under '{self._storage_key}'")
