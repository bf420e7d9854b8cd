"""
Numerical Safeguards — IEEE-754 примитивы

Python отступает от IEEE-754 в двух местах, важных для векторной алгебры:
- Деление на 0.0 бросает ZeroDivisionError вместо ±inf/NaN
- math.acos бросает ValueError вне [-1, 1] вместо NaN

Модуль возвращает IEEE-поведение для этих операций.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf НЕ санитизируются: они пропагируют по правилам IEEE-754
2. Ни одна функция модуля не бросает исключений на float входах
3. Все операции детерминированы и воспроизводимы
"""

import math


# =============================================================================
# IEEE ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754.

    Для ненулевого знаменателя совпадает с обычным `/`.
    Для знаменателя ±0.0:
    - 0/0 и NaN/0 → NaN
    - x/±0 → ±inf (знак = произведение знаков)

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        Результат деления (может быть NaN или ±inf)

    Examples:
        >>> ieee_divide(1.0, 4.0)
        0.25
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return math.nan

    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


# =============================================================================
# IEEE ОБРАТНЫЕ ТРИГОНОМЕТРИЧЕСКИЕ
# =============================================================================


def ieee_acos(value: float) -> float:
    """
    Арккосинус с семантикой IEEE-754 (C acos).

    Вне области определения [-1, 1] и для NaN возвращает NaN
    вместо ValueError.

    Args:
        value: Косинус угла

    Returns:
        Угол в радианах в [0, π] или NaN

    Examples:
        >>> ieee_acos(1.0)
        0.0
        >>> ieee_acos(1.0000000000000002)
        nan
    """
    if math.isnan(value) or value < -1.0 or value > 1.0:
        return math.nan
    return math.acos(value)
