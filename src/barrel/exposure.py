"""Publish selected action attributes to whatever renders the response."""

from __future__ import annotations

from typing import Any

PARAMS_EXPOSURE = "params"


def collect(action: Any, names: tuple[str, ...]) -> dict[str, Any]:
    """Map each exposed name to its current value on ``action``."""
    exposures = {PARAMS_EXPOSURE: getattr(action, PARAMS_EXPOSURE, None)}
    for name in names:
        exposures[name] = getattr(action, name, None)
    return exposures
