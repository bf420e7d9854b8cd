"""
Vector — Модель вектора конечной размерности

Immutable Pydantic модель, представляющая упорядоченную конечную
последовательность IEEE-754 double (float) значений.

Вектор — чистый value type:
- Нет идентичности кроме содержимого
- Нет мутаций после создания (frozen=True)
- Все операции (src.core.math.vector_algebra) создают новые экземпляры
- NaN и ±inf являются допустимыми компонентами
"""

from pydantic import BaseModel, Field


# =============================================================================
# VECTOR MODEL
# =============================================================================


class Vector(BaseModel):
    """
    Вектор над IEEE-754 float.

    Immutable модель (frozen=True): любые арифметические операции
    возвращают новый экземпляр, входные векторы никогда не изменяются.

    Размерность 0 допустима (пустой вектор), хотя ни одна операция
    конструирования её не создаёт.

    Examples:
        >>> Vector.of(1.0, 2.0, 3.0).components
        (1.0, 2.0, 3.0)
        >>> Vector(components=[1, 2]).components
        (1.0, 2.0)
    """

    components: tuple[float, ...] = Field(
        default=(), description="Компоненты вектора в порядке следования"
    )

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def of(cls, *values: float) -> "Vector":
        """Создание вектора из позиционных значений: Vector.of(1.0, 2.0)"""
        return cls(components=values)
