from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..core.exceptions import MissingFieldError


def require_fields(values: Mapping[str, Any], fields: Sequence[str]) -> None:
    """Raise MissingFieldError naming every field that is absent or None."""
    missing = [name for name in fields if values.get(name) is None]
    if missing:
        raise MissingFieldError(missing)

