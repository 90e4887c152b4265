"""
Domain models for the local session aggregate.
"""

from pethealth.models.app_data import AppData
from pethealth.models.appointment import Appointment, AppointmentStatus, AppointmentType
from pethealth.models.clinic import Clinic
from pethealth.models.pet import Pet, PetSpecies, VaccinationRecord
from pethealth.models.symptom import Symptom, SymptomCategory, SymptomSeverity
from pethealth.models.user import User

__all__ = [
    "AppData",
    "Appointment",
    "AppointmentStatus",
    "AppointmentType",
    "Clinic",
    "Pet",
    "PetSpecies",
    "Symptom",
    "SymptomCategory",
    "SymptomSeverity",
    "User",
    "VaccinationRecord",
]
