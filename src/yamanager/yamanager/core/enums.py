from __future__ import annotations

from enum import Enum


class VacationType(str, Enum):
    """Day classification shown in a dashboard cell."""

    NONE = "NONE"
    VACATION = "VACATION"
    SICK_DAY = "SICK_DAY"


class ProfileStatus(str, Enum):
    """Authorization state of an employee profile."""

    AUTHORIZED = "AUTHORIZED"
    PENDING = "PENDING"
    REJECTED = "REJECTED"


class Language(str, Enum):
    CZ = "CZ"
    EN = "EN"


class UserRole(str, Enum):
    EMPLOYER = "EMPLOYER"
    EMPLOYEE = "EMPLOYEE"
