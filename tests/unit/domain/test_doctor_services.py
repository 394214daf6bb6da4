"""
Unit tests for DoctorWorkingHoursService and DoctorSpecialtyService.
"""
import pytest

from hospital.core.exceptions import ConflictError, InvalidInputError, NotFoundError
from hospital.domain.services.doctor_specialty_service import DoctorSpecialtyService


@pytest.fixture
def specialty_service(container):
    return container.get(DoctorSpecialtyService)


@pytest.mark.unit
class TestDoctorWorkingHoursService:

    def test_add_persists_window(self, working_hours_service, doctor_repository, doctor):
        working_hours_service.add_working_hours(doctor.id, "Tuesday", "01:00 PM - 06:00 PM")

        stored = doctor_repository.find_by_id(doctor.id)
        assert len(stored.working_hours.list_hours()) == 2

    @pytest.mark.parametrize("time_slot", ["09:00 AM - 05:00 PM", "9:00 AM - 5:00 PM"])
    def test_duplicate_is_rejected_and_list_unchanged(self, working_hours_service, doctor, time_slot):
        before = len(working_hours_service.list_working_hours(doctor.id))

        with pytest.raises(ConflictError, match="Working hours already exists for this doctor"):
            working_hours_service.add_working_hours(doctor.id, "Monday", time_slot)

        assert len(working_hours_service.list_working_hours(doctor.id)) == before

    def test_same_slot_on_another_day_is_allowed(self, working_hours_service, doctor):
        working_hours_service.add_working_hours(doctor.id, "Wednesday", "09:00 AM - 05:00 PM")

        assert len(working_hours_service.list_working_hours(doctor.id)) == 2

    def test_overlapping_but_different_slot_is_allowed(self, working_hours_service, doctor):
        working_hours_service.add_working_hours(doctor.id, "Monday", "08:00 AM - 10:00 AM")

        assert len(working_hours_service.list_working_hours(doctor.id)) == 2

    def test_malformed_slot_is_rejected(self, working_hours_service, doctor):
        with pytest.raises(InvalidInputError):
            working_hours_service.add_working_hours(doctor.id, "Monday", "whenever")

    def test_remove(self, working_hours_service, doctor):
        working_hours_service.add_working_hours(doctor.id, "Tuesday", "09:00 AM - 05:00 PM")

        working_hours_service.remove_working_hours(doctor.id, "Monday", "09:00 AM - 05:00 PM")

        remaining = working_hours_service.list_working_hours(doctor.id)
        assert [entry.day.value for entry in remaining] == ["Tuesday"]

    def test_unknown_doctor(self, working_hours_service):
        with pytest.raises(NotFoundError, match="Doctor not found"):
            working_hours_service.list_working_hours("missing")


@pytest.mark.unit
class TestDoctorSpecialtyService:

    def test_add_and_list(self, specialty_service, doctor):
        specialty_service.add_specialty(doctor.id, "Neurology")

        assert specialty_service.list_specialties(doctor.id) == [
            "Cardiology",
            "General Medicine",
            "Neurology",
        ]

    def test_duplicate_is_rejected(self, specialty_service, doctor):
        with pytest.raises(ConflictError, match="Specialty already exists"):
            specialty_service.add_specialty(doctor.id, "Cardiology")

    def test_remove(self, specialty_service, doctor):
        specialty_service.remove_specialty(doctor.id, "Cardiology")

        assert specialty_service.list_specialties(doctor.id) == ["General Medicine"]

    def test_unknown_doctor(self, specialty_service):
        with pytest.raises(NotFoundError):
            specialty_service.add_specialty("missing", "Neurology")
