"""
Unit tests for the working-hours value objects.
"""
import pytest

from hospital.core.exceptions import InvalidInputError
from hospital.domain.models.working_hours import DayOfWeek, TimeSlot, WorkingHours


@pytest.mark.unit
class TestTimeSlot:
    """Parsing and containment of clock ranges."""

    def test_parses_twelve_hour_range(self):
        slot = TimeSlot.parse("09:00 AM - 05:00 PM")

        assert slot.start_minute == 9 * 60
        assert slot.end_minute == 17 * 60

    def test_single_digit_hours_equal_padded_hours(self):
        assert TimeSlot.parse("9:00 AM - 5:00 PM") == TimeSlot.parse("09:00 AM - 05:00 PM")

    def test_twelve_am_is_midnight_and_twelve_pm_is_noon(self):
        slot = TimeSlot.parse("12:00 AM - 12:30 PM")

        assert slot.start_minute == 0
        assert slot.end_minute == 12 * 60 + 30

    def test_accepts_twenty_four_hour_range(self):
        slot = TimeSlot.parse("06:00 - 22:00")

        assert slot == TimeSlot.parse("06:00 AM - 10:00 PM")

    def test_boundaries_are_inclusive(self):
        slot = TimeSlot.parse("09:00 AM - 05:00 PM")

        assert slot.contains(9 * 60)
        assert slot.contains(17 * 60)
        assert slot.contains(10 * 60)
        assert not slot.contains(8 * 60 + 59)
        assert not slot.contains(17 * 60 + 1)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "nine to five",
            "09:00 AM to 05:00 PM",
            "13:00 PM - 05:00 PM",
            "09:75 AM - 05:00 PM",
            "05:00 PM - 09:00 AM",
            "25:00 - 26:00",
        ],
    )
    def test_rejects_malformed_text_at_creation(self, text):
        with pytest.raises(InvalidInputError):
            TimeSlot.parse(text)

    def test_label_is_normalised(self):
        assert TimeSlot.parse("9:00 am - 5:30 pm").label == "09:00 AM - 05:30 PM"


@pytest.mark.unit
class TestDayOfWeek:

    def test_parses_case_insensitively(self):
        assert DayOfWeek.parse("monday") is DayOfWeek.MONDAY
        assert DayOfWeek.parse(" FRIDAY ") is DayOfWeek.FRIDAY

    def test_rejects_unknown_day(self):
        with pytest.raises(InvalidInputError):
            DayOfWeek.parse("Funday")


@pytest.mark.unit
class TestWorkingHours:

    def test_add_hours_appends_without_checking_duplicates(self):
        hours = WorkingHours()

        hours.add_hours("Monday", "09:00 AM - 05:00 PM")
        hours.add_hours("Monday", "09:00 AM - 05:00 PM")

        assert len(hours.list_hours()) == 2

    def test_remove_hours_requires_both_day_and_slot_to_match(self):
        hours = WorkingHours()
        hours.add_hours("Monday", "09:00 AM - 05:00 PM")
        hours.add_hours("Monday", "06:00 PM - 08:00 PM")
        hours.add_hours("Tuesday", "09:00 AM - 05:00 PM")

        hours.remove_hours("Monday", "09:00 AM - 05:00 PM")

        remaining = [(entry.day, entry.time_slot.label) for entry in hours.list_hours()]
        assert remaining == [
            (DayOfWeek.MONDAY, "06:00 PM - 08:00 PM"),
            (DayOfWeek.TUESDAY, "09:00 AM - 05:00 PM"),
        ]

    def test_hours_for_filters_by_day(self):
        hours = WorkingHours()
        hours.add_hours("Monday", "09:00 AM - 12:00 PM")
        hours.add_hours("Wednesday", "09:00 AM - 12:00 PM")
        hours.add_hours("Monday", "02:00 PM - 06:00 PM")

        assert len(hours.hours_for("Monday")) == 2
        assert hours.hours_for("Sunday") == []

    def test_has_hours_compares_parsed_slots(self):
        hours = WorkingHours()
        hours.add_hours("Monday", "09:00 AM - 05:00 PM")

        assert hours.has_hours("monday", "9:00 AM - 5:00 PM")
        assert not hours.has_hours("Monday", "09:00 AM - 04:00 PM")
