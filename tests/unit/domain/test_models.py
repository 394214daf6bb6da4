"""
Unit tests for entities and value objects.
"""
from datetime import datetime, timezone

import pytest

from hospital.core.exceptions import InvalidInputError
from hospital.domain.models.appointment import Appointment
from hospital.domain.models.contact import Address, EmergencyContact
from hospital.domain.models.doctor import Doctor
from hospital.domain.models.medical_record import (
    Allergy,
    Diagnosis,
    MedicalRecord,
    Medication,
    Treatment,
)
from hospital.domain.models.patient import Patient


@pytest.mark.unit
class TestValueObjects:

    def test_address_equality_is_by_value(self):
        address1 = Address("123 Main St", "100", "Anytown", "CA", "12345")
        address2 = Address("123 Main St", "100", "Anytown", "CA", "12345")
        address3 = Address("456 Oak Ave", "200", "Othertown", "NY", "54321")

        assert address1 == address2
        assert address1 != address3

    def test_emergency_contact_equality_is_by_value(self):
        assert EmergencyContact("Jane Doe", "+9876543210") == EmergencyContact("Jane Doe", "+9876543210")
        assert EmergencyContact("Jane Doe", "+9876543210") != EmergencyContact("John Smith", "+1234567890")

    def test_allergy_equality_is_by_value(self):
        assert Allergy("Peanuts") == Allergy("Peanuts")
        assert Allergy("Peanuts") != Allergy("Shellfish")


@pytest.mark.unit
class TestMedicalRecord:

    def test_records_entries_in_order(self):
        record = MedicalRecord()

        record.add_diagnosis(Diagnosis("Hypertension"))
        record.add_treatment(Treatment("Low-sodium diet"))
        record.add_medication(Medication("Lisinopril", "10mg once daily"))
        record.add_diagnosis(Diagnosis("Type 2 diabetes"))

        assert [d.description for d in record.diagnoses] == ["Hypertension", "Type 2 diabetes"]
        assert record.treatments == [Treatment("Low-sodium diet")]
        assert record.medications[0].name == "Lisinopril"

    def test_equality_compares_entries(self):
        first = MedicalRecord()
        second = MedicalRecord()
        first.add_diagnosis(Diagnosis("Flu"))
        second.add_diagnosis(Diagnosis("Flu"))

        assert first == second

        second.add_medication(Medication("Oseltamivir"))
        assert first != second


@pytest.mark.unit
class TestPatient:

    def test_new_patient_has_empty_collections(self):
        patient = Patient(id="1", name="John Doe", identification_document="123.456.789-00")

        assert patient.allergies == []
        assert patient.appointment_ids == []
        assert patient.examination_ids == []
        assert patient.medical_record == MedicalRecord()

    def test_add_allergy_ignores_duplicates(self):
        patient = Patient(id="1", name="John Doe")

        assert patient.add_allergy(Allergy("Peanuts")) is True
        assert patient.add_allergy(Allergy("Peanuts")) is False
        assert patient.allergies == [Allergy("Peanuts")]


@pytest.mark.unit
class TestDoctor:

    def test_specialties(self):
        doctor = Doctor(id="101", name="Smith", specialties=["Cardiology"])

        doctor.add_specialty("General Medicine")
        doctor.remove_specialty("Cardiology")

        assert doctor.specialties == ["General Medicine"]
        assert doctor.has_specialty("General Medicine")
        assert doctor.working_hours.list_hours() == []


@pytest.mark.unit
class TestAppointment:

    def test_defaults_to_scheduled(self):
        appointment = Appointment(
            id="201",
            date=datetime(2024, 7, 1, 10, tzinfo=timezone.utc),
            patient_id="1",
            doctor_id="101",
            reason="Regular Checkup",
        )

        assert appointment.status == "scheduled"
        assert appointment.observations == ""

    def test_status_accepts_any_non_empty_text(self):
        appointment = Appointment(
            id="201",
            date=datetime(2024, 7, 1, 10, tzinfo=timezone.utc),
            patient_id="1",
            doctor_id="101",
        )

        appointment.update_status("completed")
        assert appointment.status == "completed"

        with pytest.raises(InvalidInputError):
            appointment.update_status("  ")
