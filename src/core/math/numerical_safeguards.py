"""
Numerical Safeguards — Partial Ordering Primitives

Модуль обеспечивает тотальное (никогда не бросающее исключений) сравнение
значений, на котором построена алгебра интервалов:
- Сравнение с результатом -1/0/+1 или None для несравнимых значений
- NaN-детекция для float и Decimal
- Машинная смежность float (нет представимого числа между a и b)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. partial_cmp никогда не бросает исключение (TypeError → None)
2. NaN никогда не сравнивается (всегда None)
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
import sys
from decimal import Decimal
from typing import Any, Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Результаты сравнения
CMP_LESS: Final[int] = -1
CMP_EQUAL: Final[int] = 0
CMP_GREATER: Final[int] = 1

# Машинный epsilon для Python float (IEEE 754 double)
# Расстояние между 1.0 и следующим представимым float
FLOAT_EPSILON: Final[float] = sys.float_info.epsilon


# =============================================================================
# NaN ДЕТЕКЦИЯ
# =============================================================================


def is_nan(value: Any) -> bool:
    """
    Проверка, является ли значение NaN.

    Работает для float и Decimal, для всех остальных типов возвращает False.

    Examples:
        >>> is_nan(float("nan"))
        True
        >>> is_nan(Decimal("NaN"))
        True
        >>> is_nan(1)
        False
    """
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


# =============================================================================
# ЧАСТИЧНОЕ СРАВНЕНИЕ
# =============================================================================


def partial_cmp(a: Any, b: Any) -> int | None:
    """
    Частичное сравнение двух значений.

    Аналог partial order: значения могут быть несравнимы (NaN, смешанные
    naive/aware datetime, разнородные типы). В этом случае возвращается None,
    исключение никогда не пробрасывается.

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b
        None если значения несравнимы

    Examples:
        >>> partial_cmp(1, 2)
        -1
        >>> partial_cmp(2.0, 2)
        0
        >>> partial_cmp(1.0, float("nan")) is None
        True
        >>> partial_cmp(1, "a") is None
        True
    """
    # Decimal("sNaN") бросает InvalidOperation при сравнении
    if is_nan(a) or is_nan(b):
        return None

    try:
        if a < b:
            return CMP_LESS
        if b < a:
            return CMP_GREATER
        if a == b:
            return CMP_EQUAL
    except TypeError:
        return None

    # Ни <, ни >, ни == (например, частично упорядоченные множества)
    return None


def is_comparable(a: Any, b: Any) -> bool:
    """
    Проверка, что два значения сравнимы.

    Returns:
        True если partial_cmp(a, b) не None
    """
    return partial_cmp(a, b) is not None


# =============================================================================
# МАШИННАЯ СМЕЖНОСТЬ FLOAT
# =============================================================================


def float_successor(value: float) -> float:
    """
    Следующее представимое float значение после value.

    Examples:
        >>> float_successor(1.0) == 1.0 + FLOAT_EPSILON
        True
    """
    return math.nextafter(value, math.inf)


def floats_adjacent(a: float, b: float) -> bool:
    """
    Проверка, что между a и b нет ни одного представимого float.

    Предполагается a < b. В отличие от сравнения с epsilon, корректно
    работает на любом масштабе: для больших значений шаг между соседними
    float много больше FLOAT_EPSILON.

    Args:
        a: Меньшее значение
        b: Большее значение

    Returns:
        True если float_successor(a) >= b

    Examples:
        >>> floats_adjacent(1.0, 1.0 + FLOAT_EPSILON)
        True
        >>> floats_adjacent(1.0, 1.0 + 2 * FLOAT_EPSILON)
        False
        >>> floats_adjacent(1e16, 1e16 + 2.0)
        True
    """
    return float_successor(a) >= b
