"""
Examination Repository Interface
================================

Abstract interface for examination data access.
"""
from abc import abstractmethod
from datetime import date
from typing import List

from hospital.domain.models.examination import Examination
from hospital.domain.repositories.repository import Repository


class ExaminationRepository(Repository[Examination]):
    """Abstract repository for examination persistence operations."""
    
    @abstractmethod
    def find_by_patient_id(self, patient_id: str) -> List[Examination]:
        pass
    
    @abstractmethod
    def find_by_type(self, exam_type: str) -> List[Examination]:
        pass
    
    @abstractmethod
    def find_by_date(self, exam_date: date) -> List[Examination]:
        """Find examinations taking place on the given calendar date."""
        pass
