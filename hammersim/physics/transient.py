"""Затухающее колебание давления после скачка.

Модель (не решение волнового уравнения, а аппроксимация огибающей):

    p(t) = dP_psi * exp(-damping * t) * cos(2*pi*f * t),  t = i * dt

Частота — основная гармоника трубы f = c / (2L). Для L = 0 берётся резервная
частота (по умолчанию 1 Гц), чтобы не делить на ноль.

`TransientSeries` ленивый: отсчёты вычисляются при обходе/индексации, каждый
новый `iter()` начинает с t = 0. Случайности нет, одинаковые входы дают
побитово одинаковые ряды.
"""

from __future__ import annotations

import math
from typing import Iterator, Tuple, overload

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from hammersim.core.types import TransientSample
from hammersim.core.validation import ensure_finite, ensure_non_negative, ensure_positive


def oscillation_frequency_hz(wave_speed_m_s: float, pipe_length_m: float, *, fallback_hz: float = 1.0) -> float:
    ensure_non_negative(pipe_length_m, "pipe_length_m")
    if pipe_length_m > 0.0:
        return float(wave_speed_m_s) / (2.0 * float(pipe_length_m))
    return float(fallback_hz)


def sample_count(total_time_s: float, dt_s: float) -> int:
    ensure_positive(total_time_s, "total_time_s")
    ensure_positive(dt_s, "dt_s")
    # включая t = 0
    return int(math.floor(total_time_s / dt_s)) + 1


class TransientSeries:
    """Ряд (время, давление) фиксированной длины."""

    def __init__(
        self,
        *,
        amplitude_psi: float,
        frequency_hz: float,
        damping_per_s: float,
        total_time_s: float = 2.0,
        dt_s: float = 0.002,
    ) -> None:
        ensure_finite(amplitude_psi, "amplitude_psi")
        ensure_positive(frequency_hz, "frequency_hz")
        ensure_non_negative(damping_per_s, "damping_per_s")

        self.amplitude_psi = float(amplitude_psi)
        self.frequency_hz = float(frequency_hz)
        self.damping_per_s = float(damping_per_s)
        self.dt_s = float(dt_s)
        self._n = sample_count(total_time_s, dt_s)

    def pressure_at(self, t: float) -> float:
        envelope = self.amplitude_psi * math.exp(-self.damping_per_s * t)
        return envelope * math.cos(2.0 * math.pi * self.frequency_hz * t)

    def _sample(self, i: int) -> TransientSample:
        t = i * self.dt_s
        return TransientSample(time_s=t, pressure_psi=self.pressure_at(t))

    def __len__(self) -> int:
        return self._n

    def __iter__(self) -> Iterator[TransientSample]:
        for i in range(self._n):
            yield self._sample(i)

    @overload
    def __getitem__(self, index: int) -> TransientSample: ...

    @overload
    def __getitem__(self, index: slice) -> list[TransientSample]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self._sample(i) for i in range(*index.indices(self._n))]
        i = int(index)
        if i < 0:
            i += self._n
        if not (0 <= i < self._n):
            raise IndexError(f"sample index out of range: {index}")
        return self._sample(i)

    def to_arrays(self) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """(time_s, pressure_psi) как numpy-массивы; значения те же, что при обходе."""

        time = np.empty((self._n,), dtype=np.float64)
        pressure = np.empty((self._n,), dtype=np.float64)
        for i, s in enumerate(self):
            time[i] = s.time_s
            pressure[i] = s.pressure_psi
        return time, pressure

    def to_frame(self) -> pd.DataFrame:
        time, pressure = self.to_arrays()
        return pd.DataFrame({"time_s": time, "pressure_psi": pressure})

    def __repr__(self) -> str:
        return (
            f"TransientSeries(n={self._n}, dP={self.amplitude_psi:.3f} psi, "
            f"f={self.frequency_hz:.3f} Hz, damping={self.damping_per_s} 1/s)"
        )
