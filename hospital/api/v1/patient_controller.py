"""
Patient Controller
==================

FastAPI controller for patients, their allergies and medical record.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from hospital.api.v1.dependencies import get_patient_service
from hospital.application.dto.patient_dto import (
    AllergyRequest,
    DiagnosisRequest,
    MedicalRecordResponse,
    MedicationRequest,
    PatientCreateRequest,
    PatientResponse,
    PatientUpdateRequest,
    TreatmentRequest,
)
from hospital.application.services.patient_service import PatientService
from hospital.domain.models.medical_record import Allergy, Diagnosis, Medication, Treatment

router = APIRouter(tags=["patients"])


@router.post(
    "",
    response_model=PatientResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a patient",
)
def create_patient(
    request: PatientCreateRequest,
    service: PatientService = Depends(get_patient_service),
) -> PatientResponse:
    patient = service.add_patient(
        id=request.id,
        name=request.name,
        identification_document=request.identification_document,
        date_of_birth=request.date_of_birth,
        gender=request.gender,
        blood_type=request.blood_type,
        address=request.address.to_domain() if request.address else None,
        phone_number=request.phone_number,
        email=request.email,
        emergency_contact=request.emergency_contact.to_domain() if request.emergency_contact else None,
    )
    return PatientResponse.from_domain(patient)


@router.get("", response_model=List[PatientResponse], summary="List patients")
def list_patients(
    service: PatientService = Depends(get_patient_service),
) -> List[PatientResponse]:
    return [PatientResponse.from_domain(patient) for patient in service.list_patients()]


@router.get(
    "/search/name/{name}",
    response_model=List[PatientResponse],
    summary="Find patients by name",
)
def search_patients_by_name(
    name: str,
    service: PatientService = Depends(get_patient_service),
) -> List[PatientResponse]:
    return [PatientResponse.from_domain(patient) for patient in service.find_patients_by_name(name)]


@router.get(
    "/search/bloodType/{blood_type}",
    response_model=List[PatientResponse],
    summary="Find patients by blood type",
)
def search_patients_by_blood_type(
    blood_type: str,
    service: PatientService = Depends(get_patient_service),
) -> List[PatientResponse]:
    return [
        PatientResponse.from_domain(patient)
        for patient in service.find_patients_by_blood_type(blood_type)
    ]


@router.get("/{patient_id}", response_model=PatientResponse, summary="Get patient by ID")
def get_patient(
    patient_id: str,
    service: PatientService = Depends(get_patient_service),
) -> PatientResponse:
    return PatientResponse.from_domain(service.get_patient(patient_id))


@router.put("/{patient_id}", response_model=PatientResponse, summary="Update a patient")
def update_patient(
    patient_id: str,
    request: PatientUpdateRequest,
    service: PatientService = Depends(get_patient_service),
) -> PatientResponse:
    return PatientResponse.from_domain(service.update_patient(patient_id, request.changes()))


@router.delete("/{patient_id}", response_model=PatientResponse, summary="Remove a patient")
def delete_patient(
    patient_id: str,
    service: PatientService = Depends(get_patient_service),
) -> PatientResponse:
    return PatientResponse.from_domain(service.delete_patient(patient_id))


@router.post(
    "/{patient_id}/allergies",
    response_model=PatientResponse,
    summary="Record an allergy",
    description="An allergy already on file is accepted and left unchanged.",
)
def add_allergy(
    patient_id: str,
    request: AllergyRequest,
    service: PatientService = Depends(get_patient_service),
) -> PatientResponse:
    return PatientResponse.from_domain(service.add_allergy(patient_id, Allergy(type=request.type)))


@router.get(
    "/{patient_id}/medical-record",
    response_model=MedicalRecordResponse,
    summary="Get medical record",
)
def get_medical_record(
    patient_id: str,
    service: PatientService = Depends(get_patient_service),
) -> MedicalRecordResponse:
    return MedicalRecordResponse.from_domain(service.get_medical_record(patient_id))


@router.post(
    "/{patient_id}/medical-record/diagnoses",
    response_model=MedicalRecordResponse,
    summary="Add a diagnosis",
)
def add_diagnosis(
    patient_id: str,
    request: DiagnosisRequest,
    service: PatientService = Depends(get_patient_service),
) -> MedicalRecordResponse:
    patient = service.add_diagnosis(patient_id, Diagnosis(description=request.description))
    return MedicalRecordResponse.from_domain(patient.medical_record)


@router.post(
    "/{patient_id}/medical-record/treatments",
    response_model=MedicalRecordResponse,
    summary="Add a treatment",
)
def add_treatment(
    patient_id: str,
    request: TreatmentRequest,
    service: PatientService = Depends(get_patient_service),
) -> MedicalRecordResponse:
    patient = service.add_treatment(patient_id, Treatment(description=request.description))
    return MedicalRecordResponse.from_domain(patient.medical_record)


@router.post(
    "/{patient_id}/medical-record/medications",
    response_model=MedicalRecordResponse,
    summary="Add a medication",
)
def add_medication(
    patient_id: str,
    request: MedicationRequest,
    service: PatientService = Depends(get_patient_service),
) -> MedicalRecordResponse:
    patient = service.add_medication(
        patient_id,
        Medication(name=request.name, dosage=request.dosage),
    )
    return MedicalRecordResponse.from_domain(patient.medical_record)
