"""
Patient Repository Interface
============================

Abstract interface for patient data access.
"""
from abc import abstractmethod
from typing import List

from hospital.domain.models.patient import Patient
from hospital.domain.repositories.repository import Repository


class PatientRepository(Repository[Patient]):
    """Abstract repository for patient persistence operations."""
    
    @abstractmethod
    def find_by_name(self, name: str) -> List[Patient]:
        """Find patients whose name matches exactly."""
        pass
    
    @abstractmethod
    def find_by_blood_type(self, blood_type: str) -> List[Patient]:
        """Find patients with the given blood type."""
        pass
