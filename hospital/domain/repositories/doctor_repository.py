"""
Doctor Repository Interface
===========================

Abstract interface for doctor data access.
"""
from abc import abstractmethod
from typing import List

from hospital.domain.models.doctor import Doctor
from hospital.domain.repositories.repository import Repository


class DoctorRepository(Repository[Doctor]):
    """Abstract repository for doctor persistence operations."""
    
    @abstractmethod
    def find_by_name(self, name: str) -> List[Doctor]:
        """Find doctors whose name matches exactly."""
        pass
    
    @abstractmethod
    def find_by_specialization(self, specialty: str) -> List[Doctor]:
        """Find doctors listing the given specialty."""
        pass
