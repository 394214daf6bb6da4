"""
In-Memory Examination Repository
================================

Concrete implementation of ExaminationRepository.
"""
from datetime import date
from typing import List

from hospital.core.datetime_utils import to_clinic_time
from hospital.domain.models.examination import Examination
from hospital.domain.repositories.examination_repository import ExaminationRepository
from hospital.infrastructure.db.in_memory_repository import InMemoryRepository


class InMemoryExaminationRepository(InMemoryRepository[Examination], ExaminationRepository):
    """Examination store with linear-scan filters."""
    
    ENTITY_NAME = "Examination"
    
    def find_by_patient_id(self, patient_id: str) -> List[Examination]:
        return self._filter(lambda exam: exam.patient_id == patient_id)
    
    def find_by_type(self, exam_type: str) -> List[Examination]:
        return self._filter(lambda exam: exam.type == exam_type)
    
    def find_by_date(self, exam_date: date) -> List[Examination]:
        # Calendar date in clinic time
        return self._filter(lambda exam: to_clinic_time(exam.date).date() == exam_date)
