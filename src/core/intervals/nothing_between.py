"""
NothingBetween — oracle смежности значений

Для типа точек T отвечает на вопрос: существует ли хотя бы одно
представимое значение T строго между a и b (при a < b).

Oracle определяет, какие пары границ интервала эквивалентны:
для целых (0, 4) и [1, 3] содержат одни и те же значения, потому что
между 0 и 1 (как и между 3 и 4) ничего нет. Для плотных типов
(datetime, Decimal, Fraction) такое схлопывание невозможно.

Диспетчеризация по типу первого аргумента (functools.singledispatch),
поэтому пользовательские типы подключаются через register_nothing_between()
либо через собственный метод nothing_between(other). Целое правило
(b - a <= 1) применяется только когда оба операнда целые: для пар вроде
(1, 1.5) или (1, Fraction(3, 2)) решает oracle нецелого операнда.

Для float используется машинная смежность: между 1.0 и 1.0 + EPSILON нет
ни одного представимого float, поэтому (1.0, 1.0 + EPSILON) пуст. Тип с
математической семантикой вещественных чисел должен объявить себя плотным
(nothing_between всегда False).
"""

import datetime
import logging
import numbers
from decimal import Decimal
from fractions import Fraction
from functools import singledispatch
from typing import Any, Callable

from src.core.errors import AdjacencyOracleMissing
from src.core.math.numerical_safeguards import floats_adjacent

logger = logging.getLogger(__name__)


@singledispatch
def nothing_between(a: Any, b: Any) -> bool:
    """
    True если между a и b нет ни одного значения их типа.

    Вызывается только при a < b.

    Raises:
        AdjacencyOracleMissing: если для типа a нет реализации
    """
    method = getattr(a, "nothing_between", None)
    if method is None:
        raise AdjacencyOracleMissing(type(a))
    return bool(method(b))


# =============================================================================
# ДИСКРЕТНЫЕ ТИПЫ
# =============================================================================


@nothing_between.register(numbers.Integral)
def _(a: numbers.Integral, b: Any) -> bool:
    if not isinstance(b, numbers.Integral):
        # int рядом с float / Fraction: правило задаёт нецелый операнд
        return nothing_between.dispatch(type(b))(a, b)
    return b - a <= 1


@nothing_between.register(datetime.date)
def _(a: datetime.date, b: datetime.date) -> bool:
    # Календарные дни
    return (b - a).days <= 1


@nothing_between.register(str)
def _(a: str, b: str) -> bool:
    # Лексикографически между a и a + "\0" ничего нет, а между "a" и "b"
    # лежит бесконечно много строк ("a\0", "aa", ...)
    return b == a + "\x00"


@nothing_between.register(bytes)
def _(a: bytes, b: bytes) -> bool:
    return b == a + b"\x00"


# =============================================================================
# FLOAT: МАШИННАЯ СМЕЖНОСТЬ
# =============================================================================


@nothing_between.register(float)
def _(a: float, b: float) -> bool:
    return floats_adjacent(a, float(b))


# =============================================================================
# ПЛОТНЫЕ ТИПЫ
# =============================================================================


def _dense(a: Any, b: Any) -> bool:
    return False


# datetime регистрируется явно: иначе он унаследует правило datetime.date
for _dense_type in (
    numbers.Real,
    Fraction,
    Decimal,
    datetime.datetime,
    datetime.time,
    datetime.timedelta,
):
    nothing_between.register(_dense_type, _dense)


# =============================================================================
# РЕГИСТРАЦИЯ ПОЛЬЗОВАТЕЛЬСКИХ ТИПОВ
# =============================================================================


def register_nothing_between(cls: type, func: Callable[[Any, Any], bool]) -> None:
    """
    Регистрация oracle смежности для пользовательского типа.

    Args:
        cls: Тип точек (диспетчеризация по первому аргументу)
        func: func(a, b) -> bool, вызывается только при a < b

    Examples:
        >>> class Day(int): pass
        >>> register_nothing_between(Day, lambda a, b: b - a <= 1)
    """
    logger.debug("Registering nothing_between oracle for %s", cls.__qualname__)
    nothing_between.register(cls, func)


def register_dense(cls: type) -> None:
    """
    Объявление типа плотным: между любыми двумя значениями есть третье.
    """
    register_nothing_between(cls, _dense)


def has_nothing_between(point_type: type) -> bool:
    """
    Проверка, что для типа доступен oracle смежности.

    Returns:
        True если тип зарегистрирован или имеет метод nothing_between
    """
    if nothing_between.dispatch(point_type) is not nothing_between.dispatch(object):
        return True
    return callable(getattr(point_type, "nothing_between", None))
