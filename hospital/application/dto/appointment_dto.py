"""
Appointment DTO
===============

Pydantic models for appointment API requests and responses.

A scheduling request may name the patient and doctor either flat
(``patient_id`` / ``doctor_id``) or nested (``{"patient": {"id": ...}}``).
"""
from datetime import datetime
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from hospital.domain.models.appointment import Appointment


class EntityReference(BaseModel):
    """Nested ``{"id": ...}`` reference to another aggregate."""
    id: Optional[str] = None
    
    model_config = ConfigDict(extra="ignore")


class AppointmentCreateRequest(BaseModel):
    """DTO for scheduling an appointment."""
    id: Optional[str] = Field(None, description="Appointment id; generated when omitted")
    # Kept raw so parse_datetime is the only place a date is interpreted
    date: Any = Field(None, description="ISO 8601 instant")
    patient_id: Optional[str] = Field(None, validation_alias=AliasChoices("patient_id", "patientId"))
    doctor_id: Optional[str] = Field(None, validation_alias=AliasChoices("doctor_id", "doctorId"))
    patient: Optional[EntityReference] = None
    doctor: Optional[EntityReference] = None
    reason: str = ""
    status: Optional[str] = None
    observations: str = ""
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "201",
                "date": "2024-07-01T10:00:00Z",
                "patient_id": "1",
                "doctor_id": "101",
                "reason": "Regular Checkup",
            }
        }
    )
    
    @property
    def resolved_patient_id(self) -> Optional[str]:
        if self.patient_id:
            return self.patient_id
        return self.patient.id if self.patient else None
    
    @property
    def resolved_doctor_id(self) -> Optional[str]:
        if self.doctor_id:
            return self.doctor_id
        return self.doctor.id if self.doctor else None


class AppointmentStatusRequest(BaseModel):
    status: str = Field(..., min_length=1)


class AppointmentResponse(BaseModel):
    """DTO for appointment data."""
    id: str
    date: datetime
    patient_id: str
    doctor_id: str
    reason: str
    status: str
    observations: str
    
    @classmethod
    def from_domain(cls, appointment: Appointment) -> "AppointmentResponse":
        return cls(
            id=appointment.id,
            date=appointment.date,
            patient_id=appointment.patient_id,
            doctor_id=appointment.doctor_id,
            reason=appointment.reason,
            status=appointment.status,
            observations=appointment.observations,
        )
