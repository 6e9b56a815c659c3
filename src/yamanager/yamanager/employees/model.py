from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Tuple, Union

from ..core.enums import ProfileStatus, UserRole, VacationType


@dataclass(frozen=True)
class CalendarEntry:
    """One vacation or sick day taken from an employee's calendar.

    ``date`` is kept exactly as received; it is parsed when the grid is built.
    """

    date: Union[date, str]
    type: VacationType


@dataclass(frozen=True)
class EmployeeBasicInfo:
    id: int
    first_name: str
    last_name: str
    photo: Optional[str] = None
    calendar: Tuple[CalendarEntry, ...] = field(default_factory=tuple)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class DayInfo:
    date: date
    type: VacationType = VacationType.NONE

    def to_dict(self) -> dict:
        return {"date": self.date.isoformat(), "type": self.type.value}


@dataclass(frozen=True)
class EmployeeRow:
    """Read-model: one dashboard row (an employee and one cell per window day)."""

    id: int
    name: str
    photo: Optional[str]
    days: Tuple[DayInfo, ...]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "photo": self.photo,
            "days": [d.to_dict() for d in self.days],
        }


@dataclass(frozen=True)
class UserProfile:
    """Full profile of one employee, used to seed the edit dialog."""

    id: int
    first_name: str
    last_name: str
    photo: Optional[str]
    role: Optional[UserRole]
    sick_day_count: Optional[int]
    vacation_count: Optional[float]
    status: Optional[ProfileStatus] = None
    notification: Optional[datetime] = None
