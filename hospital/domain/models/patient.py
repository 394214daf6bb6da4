"""
Patient Model
=============

Aggregate root for a patient, its allergies and its medical record.
Appointments and examinations are referenced by id only.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from hospital.domain.models.contact import Address, EmergencyContact
from hospital.domain.models.medical_record import Allergy, MedicalRecord

logger = logging.getLogger(__name__)


@dataclass
class Patient:
    """
    Patient domain model.
    
    Identity is ``id``. ``identification_document`` is informational and is
    not checked for uniqueness.
    """
    id: str
    name: str
    identification_document: str = ""
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    blood_type: Optional[str] = None
    address: Optional[Address] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    emergency_contact: Optional[EmergencyContact] = None
    allergies: List[Allergy] = field(default_factory=list)
    appointment_ids: List[str] = field(default_factory=list)
    examination_ids: List[str] = field(default_factory=list)
    medical_record: MedicalRecord = field(default_factory=MedicalRecord)
    
    def add_allergy(self, allergy: Allergy) -> bool:
        """
        Record an allergy.
        
        Returns:
            False when an equal allergy is already recorded (nothing changes)
        """
        if allergy in self.allergies:
            logger.info("Allergy '%s' already exists for patient %s", allergy.type, self.id)
            return False
        self.allergies.append(allergy)
        logger.info("Allergy '%s' added to patient %s", allergy.type, self.id)
        return True
    
    def add_appointment(self, appointment_id: str) -> None:
        self.appointment_ids.append(appointment_id)
    
    def add_examination(self, examination_id: str) -> None:
        self.examination_ids.append(examination_id)
