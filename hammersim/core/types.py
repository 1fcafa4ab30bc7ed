"""hammersim.core.types

Плоские value-типы расчёта. Ничего не хранится между запусками:
каждый `simulate()` строит их заново.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

from hammersim.core.validation import ensure_non_negative, ensure_positive


@dataclass(frozen=True, slots=True)
class SimulationInputs:
    """Пять параметров формы в американских единицах.

    Длина трубы может быть 0 (тогда частота берётся резервная), остальное строго > 0.
    """

    diameter_in: float
    flow_rate_gpm: float
    pipe_length_ft: float
    wall_thickness_in: float
    closure_time_ms: float

    def __post_init__(self) -> None:
        ensure_positive(self.diameter_in, "diameter_in")
        ensure_positive(self.flow_rate_gpm, "flow_rate_gpm")
        ensure_non_negative(self.pipe_length_ft, "pipe_length_ft")
        ensure_positive(self.wall_thickness_in, "wall_thickness_in")
        ensure_positive(self.closure_time_ms, "closure_time_ms")


@dataclass(frozen=True, slots=True)
class SIInputs:
    diameter_m: float
    flow_rate_m3_s: float
    pipe_length_m: float
    wall_thickness_m: float
    closure_time_s: float


@dataclass(frozen=True, slots=True)
class DerivedQuantities:
    """Промежуточные величины (для диагностики и логов)."""

    area_m2: float
    velocity_m_s: float
    speed_of_sound_m_s: float
    effective_factor: float
    effective_velocity_m_s: float
    delta_p_pa: float
    delta_p_psi: float
    frequency_hz: float
    damping_per_s: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class TransientSample:
    time_s: float
    pressure_psi: float
