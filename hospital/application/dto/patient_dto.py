"""
Patient DTO
===========

Pydantic models for patient API requests and responses.
"""
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from hospital.domain.models.contact import Address, EmergencyContact
from hospital.domain.models.medical_record import MedicalRecord
from hospital.domain.models.patient import Patient


class AddressSchema(BaseModel):
    street: str = ""
    number: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = Field("", validation_alias=AliasChoices("zip_code", "zipCode"))
    
    def to_domain(self) -> Address:
        return Address(
            street=self.street,
            number=self.number,
            city=self.city,
            state=self.state,
            zip_code=self.zip_code,
        )
    
    @classmethod
    def from_domain(cls, address: Optional[Address]) -> Optional["AddressSchema"]:
        if address is None:
            return None
        return cls(
            street=address.street,
            number=address.number,
            city=address.city,
            state=address.state,
            zip_code=address.zip_code,
        )


class EmergencyContactSchema(BaseModel):
    name: str = ""
    phone: str = ""
    relationship: str = ""
    
    def to_domain(self) -> EmergencyContact:
        return EmergencyContact(name=self.name, phone=self.phone, relationship=self.relationship)
    
    @classmethod
    def from_domain(cls, contact: Optional[EmergencyContact]) -> Optional["EmergencyContactSchema"]:
        if contact is None:
            return None
        return cls(name=contact.name, phone=contact.phone, relationship=contact.relationship)


class PatientCreateRequest(BaseModel):
    """DTO for registering a patient."""
    id: str = Field(..., min_length=1, description="Unique patient identifier")
    name: str = Field(..., min_length=1)
    identification_document: str = Field(
        "",
        validation_alias=AliasChoices("identification_document", "identificationDocument"),
    )
    date_of_birth: Optional[str] = Field(None, validation_alias=AliasChoices("date_of_birth", "dateOfBirth"))
    gender: Optional[str] = None
    blood_type: Optional[str] = Field(None, validation_alias=AliasChoices("blood_type", "bloodType"))
    address: Optional[AddressSchema] = None
    phone_number: Optional[str] = Field(None, validation_alias=AliasChoices("phone_number", "phoneNumber"))
    email: Optional[str] = None
    emergency_contact: Optional[EmergencyContactSchema] = Field(
        None,
        validation_alias=AliasChoices("emergency_contact", "emergencyContact"),
    )
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "1",
                "identification_document": "123.123.123-12",
                "name": "John Doe",
                "date_of_birth": "1990-01-01",
                "gender": "Male",
                "blood_type": "O+",
                "address": {
                    "street": "Main Street",
                    "number": "123",
                    "city": "Mesopotamia",
                    "state": "Lost State",
                    "zip_code": "11234",
                },
                "phone_number": "+1234567890",
                "email": "john.doe@example.com",
                "emergency_contact": {"name": "Jane Doe", "phone": "+0987654321"},
            }
        }
    )


class PatientUpdateRequest(BaseModel):
    """DTO for updating a patient. Only the fields sent are changed."""
    name: Optional[str] = None
    identification_document: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("identification_document", "identificationDocument"),
    )
    date_of_birth: Optional[str] = Field(None, validation_alias=AliasChoices("date_of_birth", "dateOfBirth"))
    gender: Optional[str] = None
    blood_type: Optional[str] = Field(None, validation_alias=AliasChoices("blood_type", "bloodType"))
    address: Optional[AddressSchema] = None
    phone_number: Optional[str] = Field(None, validation_alias=AliasChoices("phone_number", "phoneNumber"))
    email: Optional[str] = None
    emergency_contact: Optional[EmergencyContactSchema] = Field(
        None,
        validation_alias=AliasChoices("emergency_contact", "emergencyContact"),
    )
    
    def changes(self) -> dict:
        """Fields explicitly sent by the client, converted to domain values."""
        changes = {name: getattr(self, name) for name in self.model_fields_set}
        if self.address is not None and "address" in changes:
            changes["address"] = self.address.to_domain()
        if self.emergency_contact is not None and "emergency_contact" in changes:
            changes["emergency_contact"] = self.emergency_contact.to_domain()
        return changes


class AllergyRequest(BaseModel):
    type: str = Field(..., min_length=1, description="Allergen, e.g. 'Peanuts'")


class DiagnosisRequest(BaseModel):
    description: str = Field(..., min_length=1)


class TreatmentRequest(BaseModel):
    description: str = Field(..., min_length=1)


class MedicationRequest(BaseModel):
    name: str = Field(..., min_length=1)
    dosage: str = ""


class MedicationSchema(BaseModel):
    name: str
    dosage: str


class MedicalRecordResponse(BaseModel):
    """DTO for a patient's medical record."""
    diagnoses: List[str]
    treatments: List[str]
    medications: List[MedicationSchema]
    
    @classmethod
    def from_domain(cls, record: MedicalRecord) -> "MedicalRecordResponse":
        return cls(
            diagnoses=[diagnosis.description for diagnosis in record.diagnoses],
            treatments=[treatment.description for treatment in record.treatments],
            medications=[
                MedicationSchema(name=medication.name, dosage=medication.dosage)
                for medication in record.medications
            ],
        )


class PatientResponse(BaseModel):
    """DTO for patient data."""
    id: str
    identification_document: str
    name: str
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    blood_type: Optional[str] = None
    address: Optional[AddressSchema] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    emergency_contact: Optional[EmergencyContactSchema] = None
    allergies: List[str]
    appointment_ids: List[str]
    examination_ids: List[str]
    medical_record: MedicalRecordResponse
    
    @classmethod
    def from_domain(cls, patient: Patient) -> "PatientResponse":
        return cls(
            id=patient.id,
            identification_document=patient.identification_document,
            name=patient.name,
            date_of_birth=patient.date_of_birth,
            gender=patient.gender,
            blood_type=patient.blood_type,
            address=AddressSchema.from_domain(patient.address),
            phone_number=patient.phone_number,
            email=patient.email,
            emergency_contact=EmergencyContactSchema.from_domain(patient.emergency_contact),
            allergies=[allergy.type for allergy in patient.allergies],
            appointment_ids=list(patient.appointment_ids),
            examination_ids=list(patient.examination_ids),
            medical_record=MedicalRecordResponse.from_domain(patient.medical_record),
        )
