"""
Tests for DoctorService.
"""
import pytest

from hospital.core.exceptions import ConflictError, InvalidInputError, NotFoundError


@pytest.mark.unit
class TestDoctorService:

    def test_registered_doctor_has_no_working_hours(self, doctor_service):
        doctor = doctor_service.add_doctor(id="102", name="Jones")

        assert doctor_service.find_doctor_by_id("102") is doctor
        assert doctor.working_hours.list_hours() == []

    def test_find_missing_returns_none(self, doctor_service):
        assert doctor_service.find_doctor_by_id("missing") is None

    def test_duplicate_id(self, doctor_service, doctor):
        with pytest.raises(ConflictError, match="Doctor with id 101 already exists"):
            doctor_service.add_doctor(id="101", name="Other")

    def test_blank_id_rejected(self, doctor_service):
        with pytest.raises(InvalidInputError, match="Doctor ID is required"):
            doctor_service.add_doctor(id=" ", name="Jones")

    def test_search(self, doctor_service, doctor):
        doctor_service.add_doctor(id="102", name="Jones", specialties=["Dermatology"])

        assert [d.id for d in doctor_service.find_doctors_by_name("Smith")] == ["101"]
        assert [d.id for d in doctor_service.find_doctors_by_specialization("Dermatology")] == ["102"]
        assert doctor_service.find_doctors_by_specialization("Oncology") == []

    def test_update_keeps_working_hours(self, doctor_service, doctor):
        updated = doctor_service.update_doctor("101", {"rcm": "CRM999", "working_hours": None})

        assert updated.rcm == "CRM999"
        assert len(updated.working_hours.list_hours()) == 1

    def test_delete(self, doctor_service, doctor):
        doctor_service.delete_doctor("101")

        assert doctor_service.list_doctors() == []
        with pytest.raises(NotFoundError, match="Doctor not found"):
            doctor_service.get_doctor("101")

    def test_update_with_null_strings_stores_empty_values(self, doctor_service, doctor):
        updated = doctor_service.update_doctor("101", {"phone_number": None, "rcm": None, "specialties": None})

        assert (updated.phone_number, updated.rcm, updated.specialties) == ("", "", [])

    def test_rejected_update_changes_nothing(self, doctor_service, doctor):
        with pytest.raises(InvalidInputError):
            doctor_service.update_doctor("101", {"rcm": "CRM999", "name": None})

        assert doctor_service.get_doctor("101").rcm == "CRM12345"
