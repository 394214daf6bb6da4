"""
Doctor Service
==============

Application service that coordinates doctor-related operations.
"""
from typing import Any, Dict, List, Optional

from hospital.core.exceptions import InvalidInputError, NotFoundError
from hospital.domain.constants.doctor_fields import DoctorFields
from hospital.domain.models.doctor import Doctor
from hospital.domain.repositories.doctor_repository import DoctorRepository


class DoctorService:
    """
    Application service for doctor operations.
    
    Registration, lookup, search, update and removal of doctors. Working
    hours and specialties have their own domain services.
    """
    
    def __init__(self, doctor_repository: DoctorRepository):
        """
        Initialize service with repository.
        
        Args:
            doctor_repository: Repository for doctor persistence
        """
        self._repository = doctor_repository
    
    def add_doctor(
        self,
        id: str,
        name: str,
        rcm: str = "",
        specialties: Optional[List[str]] = None,
        phone_number: str = "",
    ) -> Doctor:
        """
        Register a new doctor with no working hours.
        
        Raises:
            InvalidInputError: If id or name is blank
            ConflictError: If the id is already registered
        """
        if not id or not id.strip():
            raise InvalidInputError("Doctor ID is required")
        if not name or not name.strip():
            raise InvalidInputError("Doctor name is required")
        
        doctor = Doctor(
            id=id.strip(),
            name=name.strip(),
            rcm=rcm,
            specialties=list(specialties or []),
            phone_number=phone_number,
        )
        return self._repository.add(doctor.id, doctor)
    
    def find_doctor_by_id(self, doctor_id: str) -> Optional[Doctor]:
        """Get a doctor by ID, or None."""
        return self._repository.find_by_id(doctor_id)
    
    def get_doctor(self, doctor_id: str) -> Doctor:
        """Get a doctor by ID, raising NotFoundError when absent."""
        doctor = self._repository.find_by_id(doctor_id)
        if not doctor:
            raise NotFoundError("Doctor not found")
        return doctor
    
    def list_doctors(self) -> List[Doctor]:
        return self._repository.find_all()
    
    def find_doctors_by_name(self, name: str) -> List[Doctor]:
        return self._repository.find_by_name(name)
    
    def find_doctors_by_specialization(self, specialty: str) -> List[Doctor]:
        return self._repository.find_by_specialization(specialty)
    
    def update_doctor(self, doctor_id: str, changes: Dict[str, Any]) -> Doctor:
        """
        Apply ``changes`` to a doctor. Unknown keys are ignored; the id never changes.
        """
        doctor = self.get_doctor(doctor_id)
        accepted = {}
        for name, value in changes.items():
            if name not in DoctorFields.UPDATABLE:
                continue
            if name == DoctorFields.NAME and (not value or not value.strip()):
                raise InvalidInputError("Doctor name cannot be empty")
            if name == DoctorFields.SPECIALTIES:
                value = list(value or [])
            elif value is None:
                value = ""
            accepted[name] = value
        
        # Nothing is written until every field has been checked
        for name, value in accepted.items():
            setattr(doctor, name, value)
        return self._repository.update(doctor.id, doctor)
    
    def delete_doctor(self, doctor_id: str) -> Doctor:
        doctor = self.get_doctor(doctor_id)
        self._repository.delete(doctor.id)
        return doctor
