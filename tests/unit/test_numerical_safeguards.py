"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Проверку конечности набора компонент
2. Epsilon-сравнения
3. Отклонение некорректных толерантностей
"""

import math

import pytest

from complexplane.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    all_finite,
    is_close,
)


class TestAllFinite:
    """Тесты для all_finite"""

    def test_finite_components(self) -> None:
        assert all_finite(0.0, -1e308, 5e-324)

    def test_empty_is_finite(self) -> None:
        assert all_finite()

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_any_non_finite_component(self, bad: float) -> None:
        assert not all_finite(1.0, bad)
        assert not all_finite(bad, 1.0)


class TestIsClose:
    """Тесты для is_close"""

    def test_default_tolerances(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_within_relative_tolerance(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(1e10, 1e10 + 1.0)

    def test_outside_tolerance(self) -> None:
        assert not is_close(1.0, 1.1)

    def test_near_zero_uses_absolute_tolerance(self) -> None:
        assert is_close(0.0, 1e-13)
        assert not is_close(0.0, 1e-11)

    def test_custom_tolerances(self) -> None:
        assert is_close(1.0, 1.05, rel_tol=0.1)
        assert is_close(0.0, 0.01, abs_tol=0.1)

    def test_zero_tolerances_mean_exact(self) -> None:
        assert is_close(2.5, 2.5, rel_tol=0.0, abs_tol=0.0)
        assert not is_close(2.5, 2.5 + 1e-15, rel_tol=0.0, abs_tol=0.0)

    def test_nan_never_close(self) -> None:
        assert not is_close(math.nan, math.nan)

    @pytest.mark.parametrize("tol", [-1e-9, math.nan, math.inf])
    def test_invalid_rel_tol_rejected(self, tol: float) -> None:
        with pytest.raises(ValueError, match="rel_tol"):
            is_close(1.0, 1.0, rel_tol=tol)

    @pytest.mark.parametrize("tol", [-1e-12, math.nan, math.inf])
    def test_invalid_abs_tol_rejected(self, tol: float) -> None:
        with pytest.raises(ValueError, match="abs_tol"):
            is_close(1.0, 1.0, abs_tol=tol)
