"""
In-Memory Patient Repository
============================

Concrete implementation of PatientRepository.
"""
from typing import List

from hospital.domain.models.patient import Patient
from hospital.domain.repositories.patient_repository import PatientRepository
from hospital.infrastructure.db.in_memory_repository import InMemoryRepository


class InMemoryPatientRepository(InMemoryRepository[Patient], PatientRepository):
    """Patient store with linear-scan filters."""
    
    ENTITY_NAME = "Patient"
    
    def find_by_name(self, name: str) -> List[Patient]:
        return self._filter(lambda patient: patient.name == name)
    
    def find_by_blood_type(self, blood_type: str) -> List[Patient]:
        return self._filter(lambda patient: patient.blood_type == blood_type)
