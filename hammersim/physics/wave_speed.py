"""Гидравлика трубы и скорость волны давления.

Единицы:
- Диаметр, толщина стенки: м
- Площадь: м²
- Расход: м³/с
- Скорость: м/с
- Модули упругости: Па

Скорость волны считается по формуле Кортевега (упругая тонкостенная труба):

    c = sqrt( K / (rho * (1 + K*D / (E*e))) )

При e -> inf она стремится к sqrt(K/rho) (жёсткая труба), при любом конечном e
строго меньше.
"""

from __future__ import annotations

import math

from hammersim.config.models import FluidConfig, PipeMaterialConfig
from hammersim.core.validation import ensure_positive


def pipe_area_m2(diameter_m: float) -> float:
    ensure_positive(diameter_m, "diameter_m")
    r = float(diameter_m) / 2.0
    return math.pi * r * r


def flow_velocity_m_s(flow_rate_m3_s: float, area_m2: float) -> float:
    ensure_positive(area_m2, "area_m2")
    return float(flow_rate_m3_s) / float(area_m2)


def rigid_pipe_wave_speed_m_s(fluid: FluidConfig) -> float:
    """Собственная скорость звука в жидкости sqrt(K/rho)."""

    return math.sqrt(float(fluid.bulk_modulus) / float(fluid.rho))


def korteweg_wave_speed_m_s(
    diameter_m: float,
    wall_thickness_m: float,
    *,
    fluid: FluidConfig,
    pipe: PipeMaterialConfig,
) -> float:
    ensure_positive(diameter_m, "diameter_m")
    # e = 0 дало бы деление на ноль
    ensure_positive(wall_thickness_m, "wall_thickness_m")

    K = float(fluid.bulk_modulus)
    rho = float(fluid.rho)
    E = float(pipe.youngs_modulus)

    elasticity = 1.0 + (K * float(diameter_m)) / (E * float(wall_thickness_m))
    return math.sqrt(K / (rho * elasticity))
