"""Конфиги оценщика гидроудара.

Все значения по умолчанию фиксированы: пользователь через форму их не меняет.
Конфиги нужны, чтобы константы жили в одном месте и явно передавались в расчёт.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hammersim.core.units import GPA, PASCAL, SECOND
from hammersim.core.validation import ensure_in_range, ensure_positive


@dataclass(frozen=True)
class FluidConfig:
    rho: float = 1000.0                 # kg/m^3, вода
    bulk_modulus: float = 2.2e9 * PASCAL  # Pa

    def __post_init__(self) -> None:
        ensure_positive(self.rho, "rho")
        ensure_positive(self.bulk_modulus, "bulk_modulus")


@dataclass(frozen=True)
class PipeMaterialConfig:
    name: str = "steel"
    youngs_modulus: float = 200.0 * GPA  # Pa

    def __post_init__(self) -> None:
        ensure_positive(self.youngs_modulus, "youngs_modulus")


@dataclass(frozen=True)
class TransientConfig:
    """Окно моделирования и параметры затухающего колебания.

    rapid_closure_s:
        Порог «быстрого» закрытия. До него считаем, что гасится вся скорость;
        дальше эффективная доля = rapid_closure_s / closure_time_s.

    damping_per_s:
        Декремент затухания огибающей exp(-damping * t).
    """

    total_time_s: float = 2.0 * SECOND
    dt_s: float = 0.002 * SECOND
    damping_per_s: float = 3.0
    fallback_frequency_hz: float = 1.0
    rapid_closure_s: float = 0.5 * SECOND

    def __post_init__(self) -> None:
        ensure_positive(self.total_time_s, "total_time_s")
        ensure_positive(self.dt_s, "dt_s")
        ensure_in_range(self.dt_s, 0.0, self.total_time_s, "dt_s")
        ensure_positive(self.damping_per_s, "damping_per_s")
        ensure_positive(self.fallback_frequency_hz, "fallback_frequency_hz")
        ensure_positive(self.rapid_closure_s, "rapid_closure_s")


@dataclass(frozen=True)
class SystemConfig:
    fluid: FluidConfig = field(default_factory=FluidConfig)
    pipe: PipeMaterialConfig = field(default_factory=PipeMaterialConfig)
    transient: TransientConfig = field(default_factory=TransientConfig)


DEFAULT_SYSTEM_CONFIG = SystemConfig()
