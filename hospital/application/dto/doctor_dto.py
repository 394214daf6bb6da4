"""
Doctor DTO
==========

Pydantic models for doctor API requests and responses.
"""
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from hospital.domain.models.doctor import Doctor
from hospital.domain.models.working_hours import WorkingHoursEntry


class DoctorCreateRequest(BaseModel):
    """DTO for registering a doctor."""
    id: str = Field(..., min_length=1, description="Unique doctor identifier")
    name: str = Field(..., min_length=1, description="Doctor's name")
    rcm: str = Field("", description="Medical license number")
    specialties: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("specialties", "specialty"),
    )
    phone_number: str = Field("", validation_alias=AliasChoices("phone_number", "phoneNumber"))
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "101",
                "rcm": "CRM12345",
                "name": "Smith",
                "specialties": ["Cardiology", "General Medicine"],
                "phone_number": "+1122334455",
            }
        }
    )


class DoctorUpdateRequest(BaseModel):
    """DTO for updating a doctor. Only the fields sent are changed."""
    name: Optional[str] = None
    rcm: Optional[str] = None
    specialties: Optional[List[str]] = None
    phone_number: Optional[str] = Field(None, validation_alias=AliasChoices("phone_number", "phoneNumber"))


class WorkingHoursRequest(BaseModel):
    """DTO for adding or removing a working-hours window."""
    day: str = Field(..., description="Weekday name, e.g. 'Monday'")
    time_slot: str = Field(
        ...,
        validation_alias=AliasChoices("time_slot", "timeSlot"),
        description="Range such as '09:00 AM - 05:00 PM'",
    )
    
    model_config = ConfigDict(
        json_schema_extra={"example": {"day": "Monday", "time_slot": "09:00 AM - 05:00 PM"}}
    )


class WorkingHoursResponse(BaseModel):
    """DTO for a working-hours window."""
    day: str
    time_slot: str
    start_minute: int
    end_minute: int
    
    @classmethod
    def from_entry(cls, entry: WorkingHoursEntry) -> "WorkingHoursResponse":
        return cls(
            day=entry.day.value,
            time_slot=entry.time_slot.label,
            start_minute=entry.time_slot.start_minute,
            end_minute=entry.time_slot.end_minute,
        )


class SpecialtyRequest(BaseModel):
    """DTO for adding or removing a specialty."""
    specialty: str = Field(..., validation_alias=AliasChoices("specialty", "specialties"))


class AvailabilityRequest(BaseModel):
    """DTO for checking a doctor's availability."""
    date: Optional[str] = Field(None, description="ISO 8601 instant, e.g. '2024-07-01T10:00:00'")


class AvailabilityResponse(BaseModel):
    available: bool


class DoctorResponse(BaseModel):
    """DTO for doctor data."""
    id: str
    rcm: str
    name: str
    specialties: List[str]
    phone_number: str
    working_hours: List[WorkingHoursResponse]
    
    @classmethod
    def from_domain(cls, doctor: Doctor) -> "DoctorResponse":
        return cls(
            id=doctor.id,
            rcm=doctor.rcm,
            name=doctor.name,
            specialties=list(doctor.specialties),
            phone_number=doctor.phone_number,
            working_hours=[
                WorkingHoursResponse.from_entry(entry)
                for entry in doctor.working_hours.list_hours()
            ],
        )
