from __future__ import annotations

from datetime import datetime

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    # Friday
    return datetime(2024, 3, 15, 9, 30, 0)
