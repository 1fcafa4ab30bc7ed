"""Скачок давления при закрытии задвижки.

Двухрежимная эвристика вместо полноценного расчёта по характеристикам:
- closure_time_s <= rapid_closure_s: «быстрое» закрытие, гасится вся скорость;
- иначе доля гасимой скорости = rapid_closure_s / closure_time_s.

Порог намеренно не связан с критическим временем 2L/c: ожидаемые
результаты завязаны именно на эту формулу.

Затем Joukowsky: dP = rho * c * dv.
"""

from __future__ import annotations

from hammersim.core.units import pa_to_psi
from hammersim.core.validation import ensure_positive


def effective_factor(closure_time_s: float, *, rapid_closure_s: float = 0.5) -> float:
    ensure_positive(closure_time_s, "closure_time_s")
    if closure_time_s <= rapid_closure_s:
        return 1.0
    return float(rapid_closure_s) / float(closure_time_s)


def effective_velocity_m_s(velocity_m_s: float, closure_time_s: float, *, rapid_closure_s: float = 0.5) -> float:
    return float(velocity_m_s) * effective_factor(closure_time_s, rapid_closure_s=rapid_closure_s)


def joukowsky_pressure_pa(rho: float, wave_speed_m_s: float, delta_v_m_s: float) -> float:
    return float(rho) * float(wave_speed_m_s) * float(delta_v_m_s)


def joukowsky_pressure_psi(rho: float, wave_speed_m_s: float, delta_v_m_s: float) -> float:
    return pa_to_psi(joukowsky_pressure_pa(rho, wave_speed_m_s, delta_v_m_s))
