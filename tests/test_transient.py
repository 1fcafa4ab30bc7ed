import math

import numpy as np
import pytest

from hammersim.core.validation import InvalidInputError
from hammersim.physics.transient import TransientSeries, oscillation_frequency_hz, sample_count


@pytest.fixture()
def series() -> TransientSeries:
    return TransientSeries(amplitude_psi=150.0, frequency_hz=22.4, damping_per_s=3.0)


class TestFrequency:
    def test_half_wave_period(self) -> None:
        assert oscillation_frequency_hz(1200.0, 30.0) == pytest.approx(20.0)

    def test_zero_length_fallback(self) -> None:
        assert oscillation_frequency_hz(1200.0, 0.0) == 1.0
        assert oscillation_frequency_hz(1200.0, 0.0, fallback_hz=2.5) == 2.5

    def test_negative_length_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            oscillation_frequency_hz(1200.0, -1.0)


class TestTransientSeries:
    def test_sample_count(self, series: TransientSeries) -> None:
        assert sample_count(2.0, 0.002) == 1001
        assert len(series) == 1001
        assert len(list(series)) == 1001

    def test_first_sample_is_spike(self, series: TransientSeries) -> None:
        s0 = series[0]
        assert s0.time_s == 0.0
        assert s0.pressure_psi == 150.0

    def test_last_sample_time(self, series: TransientSeries) -> None:
        assert series[1000].time_s == pytest.approx(2.0)
        assert series[-1] == series[1000]

    def test_index_out_of_range(self, series: TransientSeries) -> None:
        with pytest.raises(IndexError):
            series[1001]

    def test_slice(self, series: TransientSeries) -> None:
        head = series[:3]
        assert [s.time_s for s in head] == [0.0, 0.002, 0.004]

    def test_formula(self, series: TransientSeries) -> None:
        s = series[37]
        t = 37 * 0.002
        expected = 150.0 * math.exp(-3.0 * t) * math.cos(2.0 * math.pi * 22.4 * t)
        assert s.pressure_psi == pytest.approx(expected)

    def test_envelope(self, series: TransientSeries) -> None:
        for s in series:
            assert abs(s.pressure_psi) <= 150.0 * math.exp(-3.0 * s.time_s) + 1e-12

    def test_restartable(self, series: TransientSeries) -> None:
        first = list(series)
        second = list(series)
        assert first == second

    def test_iteration_matches_indexing(self, series: TransientSeries) -> None:
        for i, s in enumerate(series):
            if i % 97 == 0:
                assert series[i] == s

    def test_to_arrays(self, series: TransientSeries) -> None:
        t, p = series.to_arrays()
        assert t.shape == (1001,)
        assert p.shape == (1001,)
        assert p[0] == 150.0
        assert np.all(np.isfinite(p))
        assert np.all(np.diff(t) > 0)

    def test_to_frame(self, series: TransientSeries) -> None:
        df = series.to_frame()
        assert list(df.columns) == ["time_s", "pressure_psi"]
        assert len(df) == 1001
        assert df["pressure_psi"].iloc[0] == 150.0

    def test_invalid_frequency(self) -> None:
        with pytest.raises(InvalidInputError):
            TransientSeries(amplitude_psi=1.0, frequency_hz=0.0, damping_per_s=3.0)
