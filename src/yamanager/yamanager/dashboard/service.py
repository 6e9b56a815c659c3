from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Dict, Optional, Sequence, Tuple

from ..calendar.grid import build_rows
from ..calendar.model import CalendarView
from ..calendar.window import build_view
from ..common.datetime_utils import now_local, to_date
from ..common.logging import get_logger
from ..core.enums import Language, ProfileStatus
from ..core.exceptions import DomainError
from ..employees.model import EmployeeRow
from ..employees.repository import EmployeeSource

logger = get_logger(__name__)

# (status, language, anchor) of one dashboard view
ViewKey = Tuple[Optional[ProfileStatus], Optional[Language], date]


@dataclass(frozen=True)
class DashboardGrid:
    """Everything the dashboard table needs for one refresh."""

    view: CalendarView
    rows: Tuple[EmployeeRow, ...]
    generation: int

    def to_dict(self) -> dict:
        out = self.view.to_dict()
        out["employees"] = [r.to_dict() for r in self.rows]
        return out


class DashboardService:
    """Use case: keep the employee calendar grid up to date.

    The window is built once per activation (or when the clock moves to another
    day); rows are rebuilt wholesale on every refresh. Refreshes are numbered
    per view (status filter, language and anchor day) and only the newest
    refresh of a view may replace that view's grid.
    """

    def __init__(
        self,
        employees: EmployeeSource,
        *,
        clock: Callable[[], datetime] = now_local,
        legacy_day_match: bool = False,
        default_language: Optional[Language] = None,
    ):
        self._employees = employees
        self._clock = clock
        self._legacy_day_match = bool(legacy_day_match)
        self._default_language = default_language
        self._view: Optional[CalendarView] = None
        self._grid: Optional[DashboardGrid] = None
        self._grids: Dict[ViewKey, DashboardGrid] = {}
        self._generations: Dict[ViewKey, int] = {}
        # Flask runs each async view on its own thread and event loop.
        self._lock = threading.Lock()

    @property
    def view(self) -> Optional[CalendarView]:
        return self._view

    @property
    def grid(self) -> Optional[DashboardGrid]:
        """The grid applied most recently, whatever its view."""
        return self._grid

    def activate(self, today: Optional[date | datetime] = None) -> CalendarView:
        """Build (or reuse) the window for ``today``, defaulting to the clock."""
        anchor = to_date(today if today is not None else self._clock())
        with self._lock:
            if self._view is None or self._view.anchor != anchor:
                self._view = build_view(anchor)
            return self._view

    def view_key(
        self,
        *,
        status: Optional[ProfileStatus] = ProfileStatus.AUTHORIZED,
        language: Optional[Language] = None,
        today: Optional[date | datetime] = None,
    ) -> ViewKey:
        anchor = to_date(today if today is not None else self._clock())
        return status, language or self._default_language, anchor

    def grid_for(
        self,
        *,
        status: Optional[ProfileStatus] = ProfileStatus.AUTHORIZED,
        language: Optional[Language] = None,
        today: Optional[date | datetime] = None,
    ) -> Optional[DashboardGrid]:
        """The last grid applied for this status, language and day, if any."""
        with self._lock:
            return self._grids.get(self.view_key(status=status, language=language, today=today))

    async def refresh(
        self,
        *,
        status: Optional[ProfileStatus] = ProfileStatus.AUTHORIZED,
        language: Optional[Language] = None,
        today: Optional[date | datetime] = None,
    ) -> Optional[DashboardGrid]:
        """Fetch employees and rebuild the grid of one view.

        Returns the new grid, or None when a newer refresh of the same view
        started while this one was waiting (its result or error is dropped).
        On any failure the previous grid stays in place and the error
        propagates.
        """

        key = self.view_key(status=status, language=language, today=today)
        _, language, anchor = key
        view = self.activate(anchor)
        with self._lock:
            generation = self._generations.get(key, 0) + 1
            self._generations[key] = generation
        started = time.monotonic()

        logger.info("Dashboard refresh started", extra={"stage": "refresh", "generation": generation})
        try:
            employees = await self._employees.fetch_employees(status, language)
        except DomainError:
            if self._is_stale(key, generation):
                return None
            logger.warning("Dashboard refresh failed", extra={"stage": "fetch", "generation": generation})
            raise

        try:
            rows = self.map_rows(employees, view)
        except DomainError:
            if self._is_stale(key, generation):
                return None
            logger.warning("Dashboard data rejected", extra={"stage": "map", "generation": generation})
            raise

        with self._lock:
            if self._generations[key] != generation:
                grid = None
            else:
                grid = DashboardGrid(view=view, rows=rows, generation=generation)
                self._grids[key] = grid
                self._grid = grid
        if grid is None:
            self._log_stale(key, generation)
            return None

        logger.info(
            "Dashboard refresh finished",
            extra={
                "stage": "refresh",
                "generation": generation,
                "employee_count": len(rows),
                "duration_ms": int((time.monotonic() - started) * 1000),
            },
        )
        return grid

    def _is_stale(self, key: ViewKey, generation: int) -> bool:
        with self._lock:
            if self._generations[key] == generation:
                return False
        self._log_stale(key, generation)
        return True

    def _log_stale(self, key: ViewKey, generation: int) -> None:
        logger.info(
            "Stale dashboard refresh discarded",
            extra={"stage": "refresh", "generation": generation, "latest": self._generations[key]},
        )

    def map_rows(self, employees: Sequence, view: CalendarView) -> Tuple[EmployeeRow, ...]:
        return tuple(build_rows(employees, view.window, legacy_day_match=self._legacy_day_match))
