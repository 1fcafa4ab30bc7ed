"""Форма ввода: сырые строки полей -> SimulationInputs.

Имена полей совпадают с формой: diameter, flowRate, pipeLength,
wallThickness, closureTime. Любая ошибка разбора поднимается как
InvalidInputError с именем поля, частичный результат не возвращается.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple
import math

from hammersim.core.types import SimulationInputs
from hammersim.core.validation import InvalidInputError


@dataclass(frozen=True)
class FormField:
    name: str
    attr: str
    label: str
    unit: str
    default: float
    allow_zero: bool = False


FORM_FIELDS: Tuple[FormField, ...] = (
    FormField("diameter", "diameter_in", "Pipe Diameter", "in", 4.0),
    FormField("flowRate", "flow_rate_gpm", "Flow Rate", "GPM", 100.0),
    FormField("pipeLength", "pipe_length_ft", "Pipe Length", "ft", 100.0, allow_zero=True),
    FormField("wallThickness", "wall_thickness_in", "Wall Thickness", "in", 0.25),
    FormField("closureTime", "closure_time_ms", "Valve Closure Time", "ms", 100.0),
)


def default_form() -> Dict[str, str]:
    return {f.name: f"{f.default:g}" for f in FORM_FIELDS}


def parse_field(field: FormField, raw: object) -> float:
    if raw is None:
        raise InvalidInputError(field.name, raw, "is required")

    text = str(raw).strip()
    if not text:
        raise InvalidInputError(field.name, raw, "is required")

    try:
        value = float(text)
    except ValueError as e:
        raise InvalidInputError(field.name, raw, "must be a number") from e

    if not math.isfinite(value):
        raise InvalidInputError(field.name, raw, "must be a finite number")
    if field.allow_zero:
        if value < 0.0:
            raise InvalidInputError(field.name, raw, "must be >= 0")
    elif value <= 0.0:
        raise InvalidInputError(field.name, raw, "must be > 0")
    return value


def parse_form(fields: Mapping[str, object]) -> SimulationInputs:
    """Разобрать все пять полей формы (ошибка по первому неверному полю)."""

    values = {f.attr: parse_field(f, fields.get(f.name)) for f in FORM_FIELDS}
    return SimulationInputs(**values)
