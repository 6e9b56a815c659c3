from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from ..core.enums import UserRole


@dataclass(frozen=True)
class DefaultSettings:
    """Company-wide defaults (sick days per year and the notification moment)."""

    sick_day_count: Optional[int]
    notification: Optional[datetime]


@dataclass(frozen=True)
class UserSettings:
    """Per-employee write-back produced by the edit dialog, kept as entered."""

    id: Any
    role: Union[UserRole, str]
    sick_day_count: Any
    vacation_count: Any


@dataclass(frozen=True)
class DefaultSettingsForm:
    """Snapshot the default settings dialog opens with."""

    sick_day_count: Optional[int]
    notification_date: Optional[date]
    notification_time: Optional[str]

    def to_dict(self) -> dict:
        return {
            "sick_day_count": self.sick_day_count,
            "notification_date": self.notification_date.isoformat() if self.notification_date else None,
            "notification_time": self.notification_time,
        }


@dataclass(frozen=True)
class UserSettingsForm:
    """Snapshot the employee edit dialog opens with."""

    id: int
    role: Optional[UserRole]
    sick_day_count: Optional[int]
    vacation_count: float = 0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "role": self.role.value if self.role else None,
            "sick_day_count": self.sick_day_count,
            "vacation_count": self.vacation_count,
        }


@dataclass(frozen=True)
class DialogResult:
    """What a settings dialog hands back: confirm or cancel, plus its fields."""

    is_confirmed: bool
    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @classmethod
    def cancelled(cls) -> "DialogResult":
        return cls(is_confirmed=False)

    @classmethod
    def confirmed(cls, **values: Any) -> "DialogResult":
        return cls(is_confirmed=True, values=values)
