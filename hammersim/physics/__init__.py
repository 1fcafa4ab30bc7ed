"""Пакет физики: единицы -> скорость волны -> Joukowsky -> переходный процесс."""

from __future__ import annotations

from .conversion import to_si
from .joukowsky import effective_factor, joukowsky_pressure_pa
from .transient import TransientSeries, oscillation_frequency_hz
from .wave_speed import korteweg_wave_speed_m_s, pipe_area_m2

__all__ = [
    "to_si",
    "pipe_area_m2",
    "korteweg_wave_speed_m_s",
    "effective_factor",
    "joukowsky_pressure_pa",
    "oscillation_frequency_hz",
    "TransientSeries",
]
