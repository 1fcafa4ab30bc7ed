"""Перевод входов формы в SI."""

from __future__ import annotations

from hammersim.core.types import SIInputs, SimulationInputs
from hammersim.core.units import FOOT, GPM, INCH, MS_PER_SECOND
from hammersim.core.validation import ensure_finite


def to_si(inputs: SimulationInputs) -> SIInputs:
    for name in (
        "diameter_in",
        "flow_rate_gpm",
        "pipe_length_ft",
        "wall_thickness_in",
        "closure_time_ms",
    ):
        ensure_finite(getattr(inputs, name), name)

    return SIInputs(
        diameter_m=float(inputs.diameter_in) * INCH,
        flow_rate_m3_s=float(inputs.flow_rate_gpm) * GPM,
        pipe_length_m=float(inputs.pipe_length_ft) * FOOT,
        wall_thickness_m=float(inputs.wall_thickness_in) * INCH,
        closure_time_s=float(inputs.closure_time_ms) / MS_PER_SECOND,
    )
