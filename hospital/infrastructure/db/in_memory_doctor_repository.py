"""
In-Memory Doctor Repository
===========================

Concrete implementation of DoctorRepository.
"""
from typing import List

from hospital.domain.models.doctor import Doctor
from hospital.domain.repositories.doctor_repository import DoctorRepository
from hospital.infrastructure.db.in_memory_repository import InMemoryRepository


class InMemoryDoctorRepository(InMemoryRepository[Doctor], DoctorRepository):
    """Doctor store with linear-scan filters."""
    
    ENTITY_NAME = "Doctor"
    
    def find_by_name(self, name: str) -> List[Doctor]:
        return self._filter(lambda doctor: doctor.name == name)
    
    def find_by_specialization(self, specialty: str) -> List[Doctor]:
        return self._filter(lambda doctor: doctor.has_specialty(specialty))
