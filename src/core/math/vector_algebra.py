"""
Vector Algebra — Операции над векторами конечной размерности

Модуль реализует алгебру над src.core.domain.Vector:
- Construction: create, unit
- Query: dim, is_zero, length
- Algebraic: scale, inv, addv, dot_prod
- Geometric: angle

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. create/unit требуют размерность >= MIN_DIMENSION (иначе DimensionError)
2. addv/dot_prod проверяют совпадение размерностей ДО начала вычислений
   (никогда не возвращается частичный или укороченный результат)
3. angle не определён для вектора нулевой длины (DimensionError)
4. NaN/Inf НЕ являются ошибками: пропагируют по правилам IEEE-754
5. Входные векторы никогда не изменяются, результат всегда новый Vector

ПОРЯДОК АККУМУЛЯЦИИ:
    addv, dot_prod и length сворачивают элементы строго слева направо,
    начиная с 0.0 (не pairwise и не tree reduction). Float сложение не
    ассоциативно, поэтому порядок фиксирует последовательность округлений.

    Алгебраические законы доказываются индукцией по длине вектора именно
    для этой рекурсивной структуры (голова + хвост):
        u + v = v + u                  (коммутативность поэлементного +)
        u + (v + w) = (u + v) + w      (поэлементно, без переноса между позициями)
        v + 0 = v,   1 * v = v,   0 * v = 0,   v + (-v) = 0
        b * (c * v) = (b * c) * v
        (b + c) * v = b * v + c * v,   b * (u + v) = b * u + b * v
    Базовый случай: пустой вектор. Шаг: закон для головы следует из
    закона для скаляров, для хвоста — из гипотезы индукции.
"""

import logging
import math
from typing import Final

from src.core.domain.vector import Vector
from src.core.math.numerical_safeguards import ieee_acos, ieee_divide

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Минимальная размерность для create/unit
MIN_DIMENSION: Final[int] = 1

# Индексы unit-векторов 1-based: j ∈ [UNIT_INDEX_BASE, n]
UNIT_INDEX_BASE: Final[int] = 1

# Значения компонент базисного вектора и стартовое значение аккумулятора
ZERO: Final[float] = 0.0
ONE: Final[float] = 1.0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DimensionError(Exception):
    """
    Нарушение предусловия по размерности.

    Единственный тип ошибки модуля. Возникает при:
    1. Запрошенной размерности < MIN_DIMENSION (create, unit)
    2. Индексе unit-вектора вне [1, n]
    3. Несовпадении размерностей операндов (addv, dot_prod, angle)
    4. Операнде нулевой длины в angle

    Ошибка детерминирована и исправляется вызывающим кодом:
    retry бессмыслен.
    """
    pass


def _dimension_error(message: str) -> DimensionError:
    logger.debug("DimensionError: %s", message)
    return DimensionError(message)


def _require_dimension(n: int) -> None:
    if n < MIN_DIMENSION:
        raise _dimension_error(
            f"Dimension must be at least {MIN_DIMENSION}, got {n}"
        )


def _require_same_dimension(v1: Vector, v2: Vector) -> None:
    d1 = dim(v1)
    d2 = dim(v2)
    if d1 != d2:
        raise _dimension_error(
            f"Vectors must have the same dimension: {d1} != {d2}"
        )


# =============================================================================
# CONSTRUCTION
# =============================================================================


def create(n: int, x: float) -> Vector:
    """
    Вектор размерности n, все компоненты равны x.

    Верхняя граница n не проверяется (ограничена только памятью).

    Args:
        n: Размерность (>= 1)
        x: Значение всех компонент (NaN/Inf допустимы)

    Returns:
        Новый Vector из n компонент x

    Raises:
        DimensionError: если n < 1

    Examples:
        >>> create(3, 2.0).components
        (2.0, 2.0, 2.0)
    """
    _require_dimension(n)
    return Vector(components=(x,) * n)


def unit(n: int, j: int) -> Vector:
    """
    Стандартный базисный вектор e_j размерности n.

    Индекс j 1-based: компонента j равна 1.0, остальные 0.0.
    Нарушение любого из предусловий (n < 1, j вне [1, n]) — DimensionError.

    Args:
        n: Размерность (>= 1)
        j: Позиция единицы, 1 <= j <= n

    Returns:
        Новый базисный Vector

    Raises:
        DimensionError: если n < 1 или j вне [1, n]

    Examples:
        >>> unit(3, 2).components
        (0.0, 1.0, 0.0)
    """
    _require_dimension(n)

    if j < UNIT_INDEX_BASE or j > n:
        raise _dimension_error(f"Invalid index for unit vector: j={j}, n={n}")

    return Vector(
        components=tuple(
            ONE if i == j else ZERO
            for i in range(UNIT_INDEX_BASE, n + UNIT_INDEX_BASE)
        )
    )


# =============================================================================
# QUERY
# =============================================================================


def dim(v: Vector) -> int:
    """Количество компонент вектора (0 для пустого)."""
    return len(v.components)


def is_zero(v: Vector) -> bool:
    """
    Проверка, что все компоненты равны 0.0 по IEEE-754 равенству.

    - -0.0 == 0.0, поэтому -0.0 считается нулём
    - NaN != 0.0, поэтому вектор с NaN никогда не нулевой
    - Пустой вектор нулевой (vacuous truth)

    Args:
        v: Проверяемый вектор

    Returns:
        True если все компоненты == 0.0
    """
    for x in v.components:
        if x != ZERO:
            return False
    return True


def length(v: Vector) -> float:
    """
    Евклидова норма: sqrt(Σ x_i²), сумма слева направо.

    Args:
        v: Вектор

    Returns:
        Норма >= 0.0; 0.0 для пустого вектора;
        NaN если есть NaN компонента; inf если есть inf (и нет NaN)

    Examples:
        >>> length(Vector.of(3.0, 4.0))
        5.0
    """
    acc = ZERO
    for x in v.components:
        acc = acc + x * x
    return math.sqrt(acc)


# =============================================================================
# ALGEBRAIC
# =============================================================================


def scale(c: float, v: Vector) -> Vector:
    """
    Умножение вектора на скаляр: (c * x_1, ..., c * x_n).

    Тотальная функция; спецзначения по правилам IEEE (0.0 * inf = NaN).

    Args:
        c: Скаляр
        v: Вектор

    Returns:
        Новый Vector той же размерности
    """
    return Vector(components=tuple(c * x for x in v.components))


def inv(v: Vector) -> Vector:
    """Аддитивная обратная: scale(-1.0, v)."""
    return scale(-ONE, v)


def addv(v1: Vector, v2: Vector) -> Vector:
    """
    Поэлементная сумма двух векторов одной размерности.

    Размерности проверяются до вычисления первой суммы.

    Args:
        v1: Первое слагаемое
        v2: Второе слагаемое

    Returns:
        Новый Vector: (v1_i + v2_i) в порядке следования

    Raises:
        DimensionError: если dim(v1) != dim(v2)

    Examples:
        >>> addv(Vector.of(1.0, 2.0), Vector.of(1.0, 2.0)).components
        (2.0, 4.0)
    """
    _require_same_dimension(v1, v2)
    return Vector(
        components=tuple(a + b for a, b in zip(v1.components, v2.components))
    )


def dot_prod(v1: Vector, v2: Vector) -> float:
    """
    Скалярное произведение: Σ v1_i * v2_i.

    Левая свёртка, начиная с 0.0: ((0.0 + a_1*b_1) + a_2*b_2) + ...

    Args:
        v1: Первый вектор
        v2: Второй вектор

    Returns:
        Сумма попарных произведений (0.0 для двух пустых векторов)

    Raises:
        DimensionError: если dim(v1) != dim(v2)

    Examples:
        >>> dot_prod(Vector.of(1.0, 2.0, 3.0), Vector.of(1.0, 2.0, 3.0))
        14.0
    """
    _require_same_dimension(v1, v2)

    acc = ZERO
    for a, b in zip(v1.components, v2.components):
        acc = acc + a * b
    return acc


# =============================================================================
# GEOMETRIC
# =============================================================================


def angle(v1: Vector, v2: Vector) -> float:
    """
    Угол между векторами в радианах: acos(<v1, v2> / (|v1| * |v2|)).

    Порядок проверок:
    1. Длины обоих векторов; нулевая длина → DimensionError
    2. dot_prod проверяет совпадение размерностей → DimensionError

    Если из-за округления отношение выходит за [-1, 1], результат NaN
    (без clamp). NaN/Inf во входах также дают NaN.

    Args:
        v1: Первый вектор
        v2: Второй вектор

    Returns:
        Угол в [0, π] или NaN

    Raises:
        DimensionError: если длина одного из векторов 0.0
            или dim(v1) != dim(v2)

    Examples:
        >>> angle(Vector.of(1.0, 0.0), Vector.of(-1.0, 0.0))
        3.141592653589793
    """
    len1 = length(v1)
    len2 = length(v2)

    if len1 == ZERO or len2 == ZERO:
        raise _dimension_error(
            f"Angle is undefined for a zero-length vector: "
            f"len1={len1}, len2={len2}"
        )

    ratio = ieee_divide(dot_prod(v1, v2), len1 * len2)
    return ieee_acos(ratio)
