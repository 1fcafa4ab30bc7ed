"""Расчёт гидроудара целиком: один вызов — один результат.

Цепочка:
- перевод входов в SI;
- площадь, скорость потока, скорость волны (Korteweg);
- эффективное изменение скорости (двухрежимная эвристика закрытия);
- скачок давления (Joukowsky);
- затухающее колебание давления во времени.

Состояния между вызовами нет: повторный `simulate()` с теми же входами даёт
тот же результат.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from hammersim.config.models import DEFAULT_SYSTEM_CONFIG, SystemConfig
from hammersim.core.types import DerivedQuantities, SimulationInputs
from hammersim.core.units import pa_to_psi
from hammersim.physics.conversion import to_si
from hammersim.physics.joukowsky import effective_factor, joukowsky_pressure_pa
from hammersim.physics.transient import TransientSeries, oscillation_frequency_hz
from hammersim.physics.wave_speed import flow_velocity_m_s, korteweg_wave_speed_m_s, pipe_area_m2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    inputs: SimulationInputs
    derived: DerivedQuantities
    series: TransientSeries

    @property
    def peak_pressure_psi(self) -> float:
        return max(s.pressure_psi for s in self.series)

    @property
    def min_pressure_psi(self) -> float:
        return min(s.pressure_psi for s in self.series)


def derive_quantities(inputs: SimulationInputs, cfg: SystemConfig = DEFAULT_SYSTEM_CONFIG) -> DerivedQuantities:
    si = to_si(inputs)
    fluid = cfg.fluid
    tr = cfg.transient

    area = pipe_area_m2(si.diameter_m)
    velocity = flow_velocity_m_s(si.flow_rate_m3_s, area)
    c = korteweg_wave_speed_m_s(si.diameter_m, si.wall_thickness_m, fluid=fluid, pipe=cfg.pipe)

    factor = effective_factor(si.closure_time_s, rapid_closure_s=tr.rapid_closure_s)
    v_eff = velocity * factor

    dP_pa = joukowsky_pressure_pa(fluid.rho, c, v_eff)
    dP_psi = pa_to_psi(dP_pa)

    if si.pipe_length_m <= 0.0:
        logger.info(
            "Pipe length is zero, using fallback frequency %.3f Hz",
            tr.fallback_frequency_hz,
        )
    freq = oscillation_frequency_hz(c, si.pipe_length_m, fallback_hz=tr.fallback_frequency_hz)

    return DerivedQuantities(
        area_m2=area,
        velocity_m_s=velocity,
        speed_of_sound_m_s=c,
        effective_factor=factor,
        effective_velocity_m_s=v_eff,
        delta_p_pa=dP_pa,
        delta_p_psi=dP_psi,
        frequency_hz=freq,
        damping_per_s=float(tr.damping_per_s),
    )


def simulate(inputs: SimulationInputs, cfg: SystemConfig | None = None) -> SimulationResult:
    cfg = cfg or DEFAULT_SYSTEM_CONFIG
    derived = derive_quantities(inputs, cfg)

    logger.debug("Derived quantities: %s", derived.as_dict())
    logger.debug(
        "c=%.1f m/s, v=%.4f m/s (x%.3f), dP=%.2f psi, f=%.3f Hz",
        derived.speed_of_sound_m_s,
        derived.velocity_m_s,
        derived.effective_factor,
        derived.delta_p_psi,
        derived.frequency_hz,
    )

    series = TransientSeries(
        amplitude_psi=derived.delta_p_psi,
        frequency_hz=derived.frequency_hz,
        damping_per_s=derived.damping_per_s,
        total_time_s=cfg.transient.total_time_s,
        dt_s=cfg.transient.dt_s,
    )
    return SimulationResult(inputs=inputs, derived=derived, series=series)
