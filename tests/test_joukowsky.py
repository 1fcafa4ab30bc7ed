import pytest

from hammersim.core.validation import InvalidInputError
from hammersim.physics.joukowsky import (
    effective_factor,
    effective_velocity_m_s,
    joukowsky_pressure_pa,
    joukowsky_pressure_psi,
)


class TestEffectiveFactor:
    @pytest.mark.parametrize("t", [1e-6, 0.1, 0.25, 0.5])
    def test_rapid_closure(self, t: float) -> None:
        assert effective_factor(t) == 1.0

    @pytest.mark.parametrize("t", [0.6, 1.0, 2.0, 10.0])
    def test_slow_closure(self, t: float) -> None:
        assert effective_factor(t) == pytest.approx(0.5 / t)

    def test_continuous_at_threshold(self) -> None:
        assert effective_factor(0.5) == pytest.approx(0.5 / 0.5)
        assert effective_factor(0.5 + 1e-12) == pytest.approx(1.0)

    def test_rejects_non_positive(self) -> None:
        with pytest.raises(InvalidInputError):
            effective_factor(0.0)

    def test_effective_velocity(self) -> None:
        assert effective_velocity_m_s(2.0, 0.1) == pytest.approx(2.0)
        assert effective_velocity_m_s(2.0, 1.0) == pytest.approx(1.0)


class TestJoukowsky:
    def test_formula(self) -> None:
        assert joukowsky_pressure_pa(1000.0, 1200.0, 1.5) == pytest.approx(1.8e6)

    def test_psi(self) -> None:
        assert joukowsky_pressure_psi(1000.0, 1200.0, 1.5) == pytest.approx(1.8e6 / 6894.76)
