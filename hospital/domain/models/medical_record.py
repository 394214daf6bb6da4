"""
Medical Record
==============

Clinical history owned by a patient. The record has no identity of its
own; it lives and dies with the Patient aggregate.
"""
import logging
from dataclasses import dataclass, field
from typing import List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Allergy:
    type: str


@dataclass(frozen=True)
class Diagnosis:
    description: str


@dataclass(frozen=True)
class Treatment:
    description: str


@dataclass(frozen=True)
class Medication:
    name: str
    dosage: str = ""


@dataclass
class MedicalRecord:
    """Diagnoses, treatments and medications in the order they were recorded."""
    diagnoses: List[Diagnosis] = field(default_factory=list)
    treatments: List[Treatment] = field(default_factory=list)
    medications: List[Medication] = field(default_factory=list)
    
    def add_diagnosis(self, diagnosis: Diagnosis) -> None:
        self.diagnoses.append(diagnosis)
        logger.info("Diagnosis '%s' added to medical record", diagnosis.description)
    
    def add_treatment(self, treatment: Treatment) -> None:
        self.treatments.append(treatment)
        logger.info("Treatment '%s' added to medical record", treatment.description)
    
    def add_medication(self, medication: Medication) -> None:
        self.medications.append(medication)
        logger.info("Medication '%s' added to medical record", medication.name)
