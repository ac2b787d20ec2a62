"""Shared numeric helpers for the calculator services."""

from __future__ import annotations

import math
from typing import Any

from calcsuite.core.exceptions import InvalidInputError


def ensure_finite(value: float, message: str, *, received: Any = None) -> float:
    """Return ``value`` unchanged, raising ``InvalidInputError`` for NaN or infinity."""

    if not math.isfinite(value):
        raise InvalidInputError(message, received=received)
    return value


def as_number(value: float) -> int | float:
    """Collapse integral floats to ``int`` for display."""

    if float(value).is_integer():
        return int(value)
    return value


def format_number(value: float) -> str:
    """Render ``value`` without a trailing ``.0`` for integral numbers."""

    return f"{as_number(value)}"


def normalize_code(code: str | None) -> str:
    return (code or "").strip().lower()
