"""
Examination DTO
===============

Pydantic models for examination API requests and responses.
"""
from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from hospital.domain.models.examination import Examination


class ExaminationCreateRequest(BaseModel):
    """DTO for scheduling an examination."""
    id: Optional[str] = Field(None, description="Examination id; generated when omitted")
    type: str = Field(..., min_length=1, description="Kind of exam, e.g. 'Blood Test'")
    patient_id: str = Field(..., validation_alias=AliasChoices("patient_id", "patientId"))
    responsible_doctor_id: str = Field(
        ...,
        validation_alias=AliasChoices("responsible_doctor_id", "responsibleDoctorId"),
    )
    date: str = Field(..., description="ISO 8601 instant")
    result: str = ""
    location: str = Field("", validation_alias=AliasChoices("location", "local"))


class ExaminationUpdateRequest(BaseModel):
    """DTO for updating an examination. Only the fields sent are changed."""
    type: Optional[str] = None
    result: Optional[str] = None
    date: Optional[str] = None
    location: Optional[str] = Field(None, validation_alias=AliasChoices("location", "local"))
    
    def changes(self) -> dict:
        return {name: getattr(self, name) for name in self.model_fields_set}


class ExaminationResponse(BaseModel):
    """DTO for examination data."""
    id: str
    type: str
    patient_id: str
    responsible_doctor_id: str
    date: datetime
    result: str
    location: str
    
    @classmethod
    def from_domain(cls, exam: Examination) -> "ExaminationResponse":
        return cls(
            id=exam.id,
            type=exam.type,
            patient_id=exam.patient_id,
            responsible_doctor_id=exam.responsible_doctor_id,
            date=exam.date,
            result=exam.result,
            location=exam.location,
        )
