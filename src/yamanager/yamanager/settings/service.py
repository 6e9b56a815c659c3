from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Union

from ..common.date_formatter import DateFormatter
from ..common.datetime_utils import parse_iso_date
from ..common.logging import get_logger
from ..common.validators import require_fields
from ..core.enums import Language
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeSource
from .model import DefaultSettingsForm, DialogResult, UserSettings, UserSettingsForm
from .repository import SettingsSource

logger = get_logger(__name__)

DEFAULT_SETTINGS_FIELDS = ("sick_day_count", "notification_date", "notification_time")
USER_SETTINGS_FIELDS = ("id", "role", "sick_day_count", "vacation_count")


class SettingsService:
    """Use case: settings dialogs (open a snapshot, confirm, write back).

    The service never invents default values; it only forwards what a
    confirmed dialog hands back.
    """

    def __init__(
        self,
        settings: SettingsSource,
        employees: EmployeeSource,
        *,
        formatter: Optional[DateFormatter] = None,
        default_language: Optional[Language] = None,
    ):
        self._settings = settings
        self._employees = employees
        self._formatter = formatter or DateFormatter()
        self._default_language = default_language

    @staticmethod
    def _parse_date(value: Union[date, str]) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return parse_iso_date(str(value))
        except ValueError:
            raise ValidationError("Notification date must be YYYY-MM-DD")

    @staticmethod
    def _parse_time(value: Union[time, str]) -> time:
        if isinstance(value, time):
            return value
        try:
            return datetime.strptime(str(value).strip(), "%H:%M").time()
        except ValueError:
            raise ValidationError("Notification time must be HH:MM")

    async def open_default_settings(self, language: Optional[Language] = None) -> DefaultSettingsForm:
        settings = await self._settings.fetch_default_settings(language or self._default_language)
        n = settings.notification
        return DefaultSettingsForm(
            sick_day_count=settings.sick_day_count,
            notification_date=n.date() if n else None,
            notification_time=f"{n.hour}:{n.minute}" if n else None,
        )

    def to_default_settings_payload(self, values) -> dict:
        require_fields(values, DEFAULT_SETTINGS_FIELDS)
        notification = datetime.combine(
            self._parse_date(values["notification_date"]),
            self._parse_time(values["notification_time"]),
        )
        return {
            "sickdayCount": values["sick_day_count"],
            "notification": self._formatter.format_datetime(notification),
        }

    async def confirm_default_settings(self, result: DialogResult, language: Optional[Language] = None) -> bool:
        """Post the defaults from a confirmed dialog.

        Returns False when the dialog was cancelled; raises MissingFieldError
        before anything is sent when a field is absent.
        """

        if not result.is_confirmed:
            return False

        payload = self.to_default_settings_payload(result.values)
        await self._settings.post_default_settings(payload, language or self._default_language)
        logger.info("Default settings saved", extra={"stage": "settings_write"})
        return True

    async def open_user_settings(self, employee_id: int, language: Optional[Language] = None) -> UserSettingsForm:
        profile = await self._employees.fetch_profile(employee_id, language or self._default_language)
        return UserSettingsForm(id=profile.id, role=profile.role, sick_day_count=profile.sick_day_count)

    def to_user_settings(self, values) -> UserSettings:
        require_fields(values, USER_SETTINGS_FIELDS)
        return UserSettings(
            id=values["id"],
            role=values["role"],
            sick_day_count=values["sick_day_count"],
            vacation_count=values["vacation_count"],
        )

    async def confirm_user_settings(self, result: DialogResult, language: Optional[Language] = None) -> bool:
        if not result.is_confirmed:
            return False

        settings = self.to_user_settings(result.values)
        await self._settings.put_user_settings(
            {
                "id": settings.id,
                "role": getattr(settings.role, "value", settings.role),
                "sickDayCount": settings.sick_day_count,
                "vacationCount": settings.vacation_count,
            },
            language or self._default_language,
        )
        logger.info("User settings saved", extra={"stage": "settings_write", "employee_id": settings.id})
        return True
