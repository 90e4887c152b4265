from enum import Enum
from uuid import UUID, uuid4

from pydantic import ConfigDict, Field

from pethealth.models.base import DomainModel
from pethealth.models.pet import PetSpecies


class SymptomSeverity(str, Enum):
    MILD = "Mild"
    MODERATE = "Moderate"
    SEVERE = "Severe"
    EMERGENCY = "Emergency"


class Symptom(DomainModel):
    """Static symptom-checker entry."""

    model_config = ConfigDict(frozen=True, validate_assignment=False)

    id: UUID = Field(default_factory=uuid4)
    name: str
    description: str
    possible_causes: tuple[str, ...] = ()
    home_advice: str = ""
    severity: SymptomSeverity
    seek_vet_if: tuple[str, ...] = ()
    applicable_species: tuple[PetSpecies, ...] = tuple(PetSpecies)

    def applies_to(self, species: PetSpecies) -> bool:
        return species in self.applicable_species


class SymptomCategory(DomainModel):
    model_config = ConfigDict(frozen=True, validate_assignment=False)

    id: UUID = Field(default_factory=uuid4)
    name: str
    icon: str = ""
    symptoms: tuple[Symptom, ...] = ()

    def symptoms_for(self, species: PetSpecies) -> list[Symptom]:
        return [symptom for symptom in self.symptoms if symptom.applies_to(species)]
