"""
Working Hours
=============

Value objects describing when a doctor can be booked.

A time slot is parsed once, when it is created, from text such as
``"09:00 AM - 05:00 PM"`` into minutes since midnight. Malformed text is
rejected at construction.
"""
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union

from hospital.core.exceptions import InvalidInputError

_CLOCK = r"(\d{1,2}):(\d{2})\s*([AaPp][Mm])?"
_SLOT_PATTERN = re.compile(rf"^\s*{_CLOCK}\s*-\s*{_CLOCK}\s*$")


class DayOfWeek(str, Enum):
    """Days of the week, valued by their English names."""
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"
    
    @classmethod
    def parse(cls, value: Union[str, "DayOfWeek"]) -> "DayOfWeek":
        """Parse a day name case-insensitively."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for day in cls:
                if day.value.lower() == value.strip().lower():
                    return day
        raise InvalidInputError(f"Invalid day of week: {value}")


def _to_minutes(hours: str, minutes: str, meridiem: str, text: str) -> int:
    hour = int(hours)
    minute = int(minutes)
    if minute > 59:
        raise InvalidInputError(f"Invalid time slot: {text}")
    
    if meridiem:
        if not 1 <= hour <= 12:
            raise InvalidInputError(f"Invalid time slot: {text}")
        # 12 AM is midnight, 12 PM is noon
        if meridiem.upper() == "PM" and hour != 12:
            hour += 12
        elif meridiem.upper() == "AM" and hour == 12:
            hour = 0
    elif hour > 23:
        raise InvalidInputError(f"Invalid time slot: {text}")
    
    return hour * 60 + minute


def _format_minutes(total: int) -> str:
    hour, minute = divmod(total, 60)
    meridiem = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12:02d}:{minute:02d} {meridiem}"


@dataclass(frozen=True)
class TimeSlot:
    """
    Inclusive clock range within a single day.
    
    Attributes:
        start_minute: minutes since midnight at which the slot opens
        end_minute: minutes since midnight at which the slot closes
    """
    start_minute: int
    end_minute: int
    
    def __post_init__(self) -> None:
        if not 0 <= self.start_minute < 24 * 60 or not 0 <= self.end_minute < 24 * 60:
            raise InvalidInputError("Time slot boundaries must fall within a single day")
        if self.start_minute > self.end_minute:
            raise InvalidInputError(f"Invalid time slot: {self.label} ends before it starts")
    
    @classmethod
    def parse(cls, text: Union[str, "TimeSlot"]) -> "TimeSlot":
        """
        Parse ``"h:mm AM - h:mm PM"`` (24-hour ``"09:00 - 17:00"`` is also accepted).
        
        Raises:
            InvalidInputError: If the text is not a well-formed range
        """
        if isinstance(text, cls):
            return text
        if not isinstance(text, str):
            raise InvalidInputError(f"Invalid time slot: {text}")
        
        match = _SLOT_PATTERN.match(text)
        if not match:
            raise InvalidInputError(f"Invalid time slot: {text}")
        
        start = _to_minutes(match.group(1), match.group(2), match.group(3), text)
        end = _to_minutes(match.group(4), match.group(5), match.group(6), text)
        if start > end:
            raise InvalidInputError(f"Invalid time slot: {text}")
        return cls(start_minute=start, end_minute=end)
    
    def contains(self, minute: int) -> bool:
        """Both boundaries are bookable."""
        return self.start_minute <= minute <= self.end_minute
    
    @property
    def label(self) -> str:
        return f"{_format_minutes(self.start_minute)} - {_format_minutes(self.end_minute)}"
    
    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class WorkingHoursEntry:
    """A day plus the time slot the doctor works on that day."""
    day: DayOfWeek
    time_slot: TimeSlot
    
    @classmethod
    def create(cls, day: Union[str, DayOfWeek], time_slot: Union[str, TimeSlot]) -> "WorkingHoursEntry":
        return cls(day=DayOfWeek.parse(day), time_slot=TimeSlot.parse(time_slot))


@dataclass
class WorkingHours:
    """
    Ordered collection of a doctor's working-hour windows.
    
    This object never rejects entries; duplicate detection belongs to
    DoctorWorkingHoursService.
    """
    hours: List[WorkingHoursEntry] = field(default_factory=list)
    
    def add_hours(self, day: Union[str, DayOfWeek], time_slot: Union[str, TimeSlot]) -> WorkingHoursEntry:
        """Append a window unconditionally."""
        entry = WorkingHoursEntry.create(day, time_slot)
        self.hours.append(entry)
        return entry
    
    def remove_hours(self, day: Union[str, DayOfWeek], time_slot: Union[str, TimeSlot]) -> None:
        """Remove every window matching both the day and the slot."""
        target = WorkingHoursEntry.create(day, time_slot)
        self.hours = [entry for entry in self.hours if entry != target]
    
    def list_hours(self) -> List[WorkingHoursEntry]:
        return self.hours
    
    def has_hours(self, day: Union[str, DayOfWeek], time_slot: Union[str, TimeSlot]) -> bool:
        return WorkingHoursEntry.create(day, time_slot) in self.hours
    
    def hours_for(self, day: Union[str, DayOfWeek]) -> List[WorkingHoursEntry]:
        wanted = DayOfWeek.parse(day)
        return [entry for entry in self.hours if entry.day == wanted]
