"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. IEEE-деление (включая деление на ±0.0)
2. IEEE-арккосинус (NaN вне области определения)
3. Отсутствие исключений на граничных входах
"""

import math

import pytest

from src.core.math.numerical_safeguards import ieee_acos, ieee_divide

# =============================================================================
# ТЕСТЫ IEEE ДЕЛЕНИЯ
# =============================================================================


class TestIeeeDivide:
    """Тесты для ieee_divide"""

    def test_regular_division(self) -> None:
        """Обычное деление совпадает с /"""
        assert ieee_divide(10.0, 4.0) == 2.5
        assert ieee_divide(-3.0, 2.0) == -1.5

    def test_positive_over_zero(self) -> None:
        """x / +0.0 → +inf"""
        assert ieee_divide(1.0, 0.0) == math.inf

    def test_negative_over_zero(self) -> None:
        """-x / +0.0 → -inf"""
        assert ieee_divide(-1.0, 0.0) == -math.inf

    def test_positive_over_negative_zero(self) -> None:
        """x / -0.0 → -inf"""
        assert ieee_divide(1.0, -0.0) == -math.inf

    def test_negative_over_negative_zero(self) -> None:
        """-x / -0.0 → +inf"""
        assert ieee_divide(-1.0, -0.0) == math.inf

    def test_zero_over_zero(self) -> None:
        """0 / 0 → NaN"""
        assert math.isnan(ieee_divide(0.0, 0.0))

    def test_nan_over_zero(self) -> None:
        """NaN / 0 → NaN"""
        assert math.isnan(ieee_divide(math.nan, 0.0))

    def test_infinity_over_infinity(self) -> None:
        """inf / inf → NaN"""
        assert math.isnan(ieee_divide(math.inf, math.inf))

    def test_infinity_over_zero(self) -> None:
        assert ieee_divide(math.inf, 0.0) == math.inf


# =============================================================================
# ТЕСТЫ IEEE АРККОСИНУСА
# =============================================================================


class TestIeeeAcos:
    """Тесты для ieee_acos"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1.0, 0.0),
            (0.0, math.pi / 2),
            (-1.0, math.pi),
        ],
    )
    def test_domain_values(self, value: float, expected: float) -> None:
        """Значения в [-1, 1] совпадают с math.acos"""
        assert ieee_acos(value) == expected

    def test_slightly_above_one(self) -> None:
        """Округление за пределы [-1, 1] → NaN, без clamp"""
        assert math.isnan(ieee_acos(1.0000000000000002))

    def test_slightly_below_minus_one(self) -> None:
        assert math.isnan(ieee_acos(-1.0000000000000002))

    def test_nan(self) -> None:
        assert math.isnan(ieee_acos(math.nan))

    def test_infinity(self) -> None:
        assert math.isnan(ieee_acos(math.inf))
        assert math.isnan(ieee_acos(-math.inf))
