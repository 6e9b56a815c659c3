"""Example: use the service layer without Flask.

Controllers are only a thin layer; the dashboard logic lives in the services.
"""

import asyncio
import importlib

from config import get_settings_module

from yamanager.container import build_container
from yamanager.core.enums import VacationType

MARKS = {VacationType.NONE: ".", VacationType.VACATION: "V", VacationType.SICK_DAY: "S"}


async def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_config=settings.API_CONFIG)

    grid = await container.dashboard_service.refresh()
    header = " ".join(grid.view.days.header())
    print(f"{'':<24}{header}")
    for row in grid.rows:
        cells = " ".join(f"{MARKS[d.type]:<2}" for d in row.days)
        print(f"{row.name:<24}{cells}")


if __name__ == "__main__":
    asyncio.run(main())
