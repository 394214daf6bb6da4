"""
Examination Service
===================

Application service that coordinates examination-related operations.
"""
import logging
import uuid
from typing import Any, Dict, List, Optional

from hospital.core.datetime_utils import parse_date, parse_datetime
from hospital.core.exceptions import InvalidInputError, NotFoundError
from hospital.domain.constants.examination_fields import ExaminationFields
from hospital.domain.models.examination import Examination
from hospital.domain.repositories.doctor_repository import DoctorRepository
from hospital.domain.repositories.examination_repository import ExaminationRepository
from hospital.domain.repositories.patient_repository import PatientRepository

logger = logging.getLogger(__name__)


class ExaminationService:
    """
    Application service for examination operations.
    
    Scheduling checks that the patient and the responsible doctor exist and
    links the examination to the patient.
    """
    
    def __init__(
        self,
        examination_repository: ExaminationRepository,
        patient_repository: PatientRepository,
        doctor_repository: DoctorRepository,
    ):
        self._repository = examination_repository
        self._patient_repository = patient_repository
        self._doctor_repository = doctor_repository
    
    def schedule_examination(
        self,
        type: str,
        patient_id: str,
        responsible_doctor_id: str,
        date: str,
        result: str = "",
        location: str = "",
        id: Optional[str] = None,
    ) -> Examination:
        """
        Schedule an examination.
        
        Raises:
            InvalidInputError: If the type is blank or the date is invalid
            NotFoundError: If the patient or doctor does not exist
            ConflictError: If the id is already taken
        """
        if not type or not type.strip():
            raise InvalidInputError("Examination type is required")
        exam_date = parse_datetime(date)
        if exam_date is None:
            raise InvalidInputError("Invalid examination date")
        
        patient = self._patient_repository.find_by_id(patient_id)
        if not patient:
            raise NotFoundError("Patient not found")
        if not self._doctor_repository.exists(responsible_doctor_id):
            raise NotFoundError("Doctor not found")
        
        exam = Examination(
            id=id or uuid.uuid4().hex,
            type=type.strip(),
            patient_id=patient.id,
            responsible_doctor_id=responsible_doctor_id,
            date=exam_date,
            result=result,
            location=location,
        )
        self._repository.add(exam.id, exam)
        
        patient.add_examination(exam.id)
        self._patient_repository.update(patient.id, patient)
        logger.info("Examination %s (%s) added for patient %s", exam.id, exam.type, patient.id)
        return exam
    
    def find_exam_by_id(self, exam_id: str) -> Optional[Examination]:
        return self._repository.find_by_id(exam_id)
    
    def get_exam(self, exam_id: str) -> Examination:
        exam = self._repository.find_by_id(exam_id)
        if not exam:
            raise NotFoundError("Examination not found")
        return exam
    
    def list_exams(self) -> List[Examination]:
        return self._repository.find_all()
    
    def find_exams_by_patient_id(self, patient_id: str) -> List[Examination]:
        return self._repository.find_by_patient_id(patient_id)
    
    def find_exams_by_type(self, exam_type: str) -> List[Examination]:
        return self._repository.find_by_type(exam_type)
    
    def find_exams_by_date(self, exam_date: str) -> List[Examination]:
        parsed = parse_date(exam_date)
        if parsed is None:
            raise InvalidInputError("Invalid date")
        return self._repository.find_by_date(parsed)
    
    def update_exam(self, exam_id: str, changes: Dict[str, Any]) -> Examination:
        """Apply ``changes`` to an examination. Patient and doctor links never change."""
        exam = self.get_exam(exam_id)
        accepted = {}
        for name, value in changes.items():
            if name not in ExaminationFields.UPDATABLE:
                continue
            if name == ExaminationFields.DATE:
                value = parse_datetime(value)
                if value is None:
                    raise InvalidInputError("Invalid examination date")
            elif name == ExaminationFields.TYPE and (not value or not value.strip()):
                raise InvalidInputError("Examination type cannot be empty")
            elif value is None:
                value = ""
            accepted[name] = value
        
        for name, value in accepted.items():
            setattr(exam, name, value)
        return self._repository.update(exam.id, exam)
    
    def delete_exam(self, exam_id: str) -> Examination:
        exam = self.get_exam(exam_id)
        self._repository.delete(exam.id)
        return exam
