from __future__ import annotations

from typing import Optional, Protocol, Sequence, Union

from ..core.enums import Language, ProfileStatus
from .model import EmployeeBasicInfo, UserProfile


class EmployeeSource(Protocol):
    """Interface of the employee data collaborator.

    Note: services depend on this protocol, never on the HTTP client directly.
    """

    async def fetch_employees(
        self,
        status: Optional[ProfileStatus] = None,
        language: Optional[Language] = None,
    ) -> Sequence[EmployeeBasicInfo]:
        raise NotImplementedError

    async def fetch_profile(
        self,
        employee_id: Union[int, str],
        language: Optional[Language] = None,
    ) -> UserProfile:
        """Profile of one employee; ``"current"`` selects the signed-in user."""

        raise NotImplementedError
