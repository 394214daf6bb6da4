"""
Appointment Repository Interface
================================

Abstract interface for appointment data access.
"""
from abc import abstractmethod
from typing import List

from hospital.domain.models.appointment import Appointment
from hospital.domain.repositories.repository import Repository


class AppointmentRepository(Repository[Appointment]):
    """Abstract repository for appointment persistence operations."""
    
    @abstractmethod
    def find_by_doctor_id(self, doctor_id: str) -> List[Appointment]:
        pass
    
    @abstractmethod
    def find_by_patient_id(self, patient_id: str) -> List[Appointment]:
        pass
    
    @abstractmethod
    def find_by_status(self, status: str) -> List[Appointment]:
        pass
