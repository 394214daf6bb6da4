"""
Unit tests for LoggingNotificationService.
"""
import logging
from datetime import datetime, timezone

import pytest

from hospital.domain.models.appointment import Appointment
from hospital.domain.models.doctor import Doctor
from hospital.domain.models.patient import Patient
from hospital.infrastructure.notification.logging_notification_service import LoggingNotificationService


@pytest.mark.unit
def test_appointment_notification_is_logged(caplog):
    service = LoggingNotificationService()
    appointment = Appointment(
        id="201",
        date=datetime(2024, 7, 1, 10, tzinfo=timezone.utc),
        patient_id="1",
        doctor_id="101",
    )
    patient = Patient(id="1", name="John Doe", email="john.doe@example.com")
    doctor = Doctor(id="101", name="Smith")

    with caplog.at_level(logging.INFO, logger="hospital.infrastructure.notification"):
        service.notify_appointment_scheduled(appointment, patient, doctor)

    assert "Sending email to john.doe@example.com" in caplog.text
    assert (
        "Your appointment with Dr. Smith is scheduled for Monday, July 1, 2024 at 10:00 AM."
        in caplog.text
    )
