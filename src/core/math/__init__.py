"""
Core math modules для векторной алгебры

Операции над Vector и IEEE-754 примитивы, на которых они построены.
"""

# Numerical Safeguards (IEEE-754 семантика)
from src.core.math.numerical_safeguards import (
    ieee_acos,
    ieee_divide,
)

# Vector Algebra
from src.core.math.vector_algebra import (
    MIN_DIMENSION,
    ONE,
    UNIT_INDEX_BASE,
    ZERO,
    DimensionError,
    addv,
    angle,
    create,
    dim,
    dot_prod,
    inv,
    is_zero,
    length,
    scale,
    unit,
)

__all__ = [
    # Numerical Safeguards — IEEE-754
    "ieee_acos",
    "ieee_divide",
    # Vector Algebra — Constants
    "MIN_DIMENSION",
    "ONE",
    "UNIT_INDEX_BASE",
    "ZERO",
    # Vector Algebra — Exceptions
    "DimensionError",
    # Vector Algebra — Construction
    "create",
    "unit",
    # Vector Algebra — Query
    "dim",
    "is_zero",
    "length",
    # Vector Algebra — Algebraic
    "addv",
    "dot_prod",
    "inv",
    "scale",
    # Vector Algebra — Geometric
    "angle",
]
