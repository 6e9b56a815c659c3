from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterator, Tuple

from ..core.constants import DAYS_BEFORE_ANCHOR, WINDOW_LENGTH


@dataclass(frozen=True)
class CalendarWindow:
    """Contiguous run of dates centered on an anchor day."""

    dates: Tuple[date, ...]

    def __post_init__(self):
        if len(self.dates) != WINDOW_LENGTH:
            raise ValueError(f"window must hold {WINDOW_LENGTH} dates, got {len(self.dates)}")

    @property
    def anchor(self) -> date:
        return self.dates[DAYS_BEFORE_ANCHOR]

    @property
    def start(self) -> date:
        return self.dates[0]

    @property
    def end(self) -> date:
        return self.dates[-1]

    def __len__(self) -> int:
        return len(self.dates)

    def __iter__(self) -> Iterator[date]:
        return iter(self.dates)

    def __getitem__(self, index: int) -> date:
        return self.dates[index]


@dataclass(frozen=True)
class DayLabelRotation:
    """Weekday label keys rotated so that ``labels[0]`` sits above ``window[0]``.

    ``offset`` is the index into the canonical table the rotation starts at.
    """

    labels: Tuple[str, ...]
    offset: int

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def __getitem__(self, index: int) -> str:
        return self.labels[index]

    def label_for(self, column: int) -> str:
        """Label for any column of the window (the rotation repeats weekly)."""
        return self.labels[column % len(self.labels)]

    def header(self, columns: int = WINDOW_LENGTH) -> Tuple[str, ...]:
        return tuple(self.label_for(i) for i in range(columns))

    def canonical(self) -> Tuple[str, ...]:
        """Undo the rotation; always equals DAYS_OF_WEEK."""
        n = len(self.labels)
        return tuple(self.labels[(i - self.offset) % n] for i in range(n))


@dataclass(frozen=True)
class CalendarView:
    window: CalendarWindow
    days: DayLabelRotation

    @property
    def anchor(self) -> date:
        return self.window.anchor

    def to_dict(self) -> dict:
        return {
            "anchor": self.anchor.isoformat(),
            "dates": [d.isoformat() for d in self.window],
            "days": list(self.days.header(len(self.window))),
        }
