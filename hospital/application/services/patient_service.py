"""
Patient Service
===============

Application service that coordinates patient-related operations,
including allergies and the medical record.
"""
from typing import Any, Dict, List, Optional

from hospital.core.exceptions import InvalidInputError, NotFoundError
from hospital.domain.constants.patient_fields import PatientFields
from hospital.domain.models.contact import Address, EmergencyContact
from hospital.domain.models.medical_record import (
    Allergy,
    Diagnosis,
    MedicalRecord,
    Medication,
    Treatment,
)
from hospital.domain.models.patient import Patient
from hospital.domain.repositories.patient_repository import PatientRepository


class PatientService:
    """Application service for patient operations."""
    
    def __init__(self, patient_repository: PatientRepository):
        """
        Initialize service with repository.
        
        Args:
            patient_repository: Repository for patient persistence
        """
        self._repository = patient_repository
    
    def add_patient(
        self,
        id: str,
        name: str,
        identification_document: str = "",
        date_of_birth: Optional[str] = None,
        gender: Optional[str] = None,
        blood_type: Optional[str] = None,
        address: Optional[Address] = None,
        phone_number: Optional[str] = None,
        email: Optional[str] = None,
        emergency_contact: Optional[EmergencyContact] = None,
    ) -> Patient:
        """
        Register a new patient with an empty medical record.
        
        Raises:
            InvalidInputError: If id or name is blank
            ConflictError: If the id is already registered
        """
        if not id or not id.strip():
            raise InvalidInputError("Patient ID is required")
        if not name or not name.strip():
            raise InvalidInputError("Patient name is required")
        
        patient = Patient(
            id=id.strip(),
            name=name.strip(),
            identification_document=identification_document,
            date_of_birth=date_of_birth,
            gender=gender,
            blood_type=blood_type,
            address=address,
            phone_number=phone_number,
            email=email,
            emergency_contact=emergency_contact,
        )
        return self._repository.add(patient.id, patient)
    
    def find_patient_by_id(self, patient_id: str) -> Optional[Patient]:
        """Get a patient by ID, or None."""
        return self._repository.find_by_id(patient_id)
    
    def get_patient(self, patient_id: str) -> Patient:
        """Get a patient by ID, raising NotFoundError when absent."""
        patient = self._repository.find_by_id(patient_id)
        if not patient:
            raise NotFoundError("Patient not found")
        return patient
    
    def list_patients(self) -> List[Patient]:
        return self._repository.find_all()
    
    def find_patients_by_name(self, name: str) -> List[Patient]:
        return self._repository.find_by_name(name)
    
    def find_patients_by_blood_type(self, blood_type: str) -> List[Patient]:
        return self._repository.find_by_blood_type(blood_type)
    
    def update_patient(self, patient_id: str, changes: Dict[str, Any]) -> Patient:
        """Apply ``changes`` to a patient. Unknown keys are ignored; the id never changes."""
        patient = self.get_patient(patient_id)
        accepted = {}
        for name, value in changes.items():
            if name not in PatientFields.UPDATABLE:
                continue
            if name == PatientFields.NAME and (not value or not value.strip()):
                raise InvalidInputError("Patient name cannot be empty")
            if name == PatientFields.IDENTIFICATION_DOCUMENT and value is None:
                value = ""
            accepted[name] = value
        
        # Nothing is written until every field has been checked
        for name, value in accepted.items():
            setattr(patient, name, value)
        return self._repository.update(patient.id, patient)
    
    def delete_patient(self, patient_id: str) -> Patient:
        patient = self.get_patient(patient_id)
        self._repository.delete(patient.id)
        return patient
    
    def add_allergy(self, patient_id: str, allergy: Allergy) -> Patient:
        """Record an allergy; an allergy already on file is left as is."""
        patient = self.get_patient(patient_id)
        patient.add_allergy(allergy)
        return self._repository.update(patient.id, patient)
    
    def add_diagnosis(self, patient_id: str, diagnosis: Diagnosis) -> Patient:
        patient = self.get_patient(patient_id)
        patient.medical_record.add_diagnosis(diagnosis)
        return self._repository.update(patient.id, patient)
    
    def add_treatment(self, patient_id: str, treatment: Treatment) -> Patient:
        patient = self.get_patient(patient_id)
        patient.medical_record.add_treatment(treatment)
        return self._repository.update(patient.id, patient)
    
    def add_medication(self, patient_id: str, medication: Medication) -> Patient:
        patient = self.get_patient(patient_id)
        patient.medical_record.add_medication(medication)
        return self._repository.update(patient.id, patient)
    
    def get_medical_record(self, patient_id: str) -> MedicalRecord:
        return self.get_patient(patient_id).medical_record
