"""
Doctor Specialty Service
========================

Adds, removes and lists the specialties a doctor practices.
"""
from typing import List

from hospital.core.exceptions import ConflictError, InvalidInputError, NotFoundError
from hospital.domain.models.doctor import Doctor
from hospital.domain.repositories.doctor_repository import DoctorRepository


class DoctorSpecialtyService:
    """Specialty operations on the Doctor aggregate."""
    
    def __init__(self, doctor_repository: DoctorRepository):
        self._repository = doctor_repository
    
    def _get_doctor(self, doctor_id: str) -> Doctor:
        doctor = self._repository.find_by_id(doctor_id)
        if not doctor:
            raise NotFoundError("Doctor not found")
        return doctor
    
    def add_specialty(self, doctor_id: str, specialty: str) -> Doctor:
        doctor = self._get_doctor(doctor_id)
        if not specialty or not specialty.strip():
            raise InvalidInputError("Specialty is required")
        specialty = specialty.strip()
        
        if doctor.has_specialty(specialty):
            raise ConflictError("Specialty already exists")
        
        doctor.add_specialty(specialty)
        return self._repository.update(doctor.id, doctor)
    
    def remove_specialty(self, doctor_id: str, specialty: str) -> Doctor:
        doctor = self._get_doctor(doctor_id)
        doctor.remove_specialty(specialty)
        return self._repository.update(doctor.id, doctor)
    
    def list_specialties(self, doctor_id: str) -> List[str]:
        return list(self._get_doctor(doctor_id).specialties)
