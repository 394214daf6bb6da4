"""
Tests for AppointmentService listing and status updates.
"""
import pytest

from hospital.core.exceptions import InvalidInputError, NotFoundError


@pytest.fixture
def booked(appointment_service, patient_service, patient, doctor, notification_spy):
    patient_service.add_patient(id="2", name="Mary Major", email="mary@example.com")
    return [
        appointment_service.schedule_appointment(
            {"id": "201", "date": "2024-07-01T10:00:00Z", "patient_id": "1", "doctor_id": "101"}
        ),
        appointment_service.schedule_appointment(
            {"id": "202", "date": "2024-07-01T11:00:00Z", "patient_id": "2", "doctor_id": "101", "status": "confirmed"}
        ),
    ]


@pytest.mark.unit
class TestAppointmentService:

    def test_list_all(self, appointment_service, booked):
        assert [a.id for a in appointment_service.list_appointments()] == ["201", "202"]

    def test_list_filters_combine(self, appointment_service, booked):
        assert [a.id for a in appointment_service.list_appointments(patient_id="2")] == ["202"]
        assert [a.id for a in appointment_service.list_appointments(status="scheduled")] == ["201"]
        assert [a.id for a in appointment_service.list_appointments(doctor_id="101", patient_id="1")] == ["201"]
        assert appointment_service.list_appointments(doctor_id="101", status="cancelled") == []

    def test_get_missing(self, appointment_service):
        assert appointment_service.find_appointment_by_id("missing") is None
        with pytest.raises(NotFoundError, match="Appointment not found"):
            appointment_service.get_appointment("missing")

    def test_update_status(self, appointment_service, booked):
        updated = appointment_service.update_status("201", "completed")

        assert updated.status == "completed"
        assert appointment_service.get_appointment("201").status == "completed"

    def test_update_status_rejects_blank(self, appointment_service, booked):
        with pytest.raises(InvalidInputError):
            appointment_service.update_status("201", "  ")
