"""hammersim.core.validation

Базовые проверки, чтобы ловить физически невозможные значения как можно раньше,
до любого производного расчёта.
"""

from __future__ import annotations

import math
from typing import Any


class InvalidInputError(ValueError):
    """Входной параметр отсутствует, не число, не конечен или нарушает физику."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        super().__init__(f"{field} {reason}, got {value!r}")
        self.field = field
        self.value = value
        self.reason = reason


def ensure_finite(value: float, name: str) -> None:
    try:
        ok = math.isfinite(value)
    except TypeError:
        ok = False
    if not ok:
        raise InvalidInputError(name, value, "must be a finite number")


def ensure_non_negative(value: float, name: str) -> None:
    ensure_finite(value, name)
    if value < 0:
        raise InvalidInputError(name, value, "must be >= 0")


def ensure_positive(value: float, name: str) -> None:
    ensure_finite(value, name)
    if value <= 0:
        raise InvalidInputError(name, value, "must be > 0")


def ensure_in_range(value: float, min_value: float, max_value: float, name: str) -> None:
    ensure_finite(value, name)
    if not (min_value <= value <= max_value):
        raise InvalidInputError(name, value, f"must be in [{min_value}, {max_value}]")
