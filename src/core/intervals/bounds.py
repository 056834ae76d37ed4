"""
Bound — одна граница интервала

Граница — это "столбик забора" между значениями, а не само значение:
- LEFT_OF(p): столбик непосредственно перед p. Используется как закрытая
  нижняя граница ([p, ...) или открытая верхняя (..., p)
- RIGHT_OF(p): столбик непосредственно после p. Используется как открытая
  нижняя граница (p, ...) или закрытая верхняя (..., p]
- LEFT_UNBOUNDED / RIGHT_UNBOUNDED: -infinity / +infinity

Благодаря такой двойственности одна функция сравнения упорядочивает нижние
границы с верхними, открытые с закрытыми, конечные с бесконечными.

ПОРЯДОК (для точек p, q):
    LEFT_UNBOUNDED < всё остальное, RIGHT_UNBOUNDED > всё остальное
    LEFT_OF(p)  vs LEFT_OF(q)  : как p vs q
    RIGHT_OF(p) vs RIGHT_OF(q) : как p vs q
    LEFT_OF(p)  vs RIGHT_OF(q) : Less если p <= q, иначе Equal если между
                                 q и p ничего нет, иначе Greater
    RIGHT_OF(p) vs LEFT_OF(q)  : Greater если p >= q, иначе Equal если между
                                 p и q ничего нет, иначе Less

Для целых RIGHT_OF(3) == LEFT_OF(4): ни одно значение их не различает.
Несравнимые точки (NaN) дают None: все сравнения False.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from src.core.intervals.nothing_between import nothing_between
from src.core.math.numerical_safeguards import (
    CMP_EQUAL,
    CMP_GREATER,
    CMP_LESS,
    partial_cmp,
)

T = TypeVar("T")


# =============================================================================
# ENUMS
# =============================================================================


class BoundKind(str, Enum):
    """Вид границы"""

    LEFT_UNBOUNDED = "left_unbounded"
    LEFT_OF = "left_of"
    RIGHT_OF = "right_of"
    RIGHT_UNBOUNDED = "right_unbounded"


_UNBOUNDED = (BoundKind.LEFT_UNBOUNDED, BoundKind.RIGHT_UNBOUNDED)


# =============================================================================
# BOUND
# =============================================================================


@dataclass(frozen=True, eq=False)
class Bound(Generic[T]):
    """
    Граница интервала.

    Immutable (frozen=True). Равенство — отношение эквивалентности по порядку
    (учитывает смежность), а не структурное, поэтому Bound не хешируется.
    """

    kind: BoundKind
    point: Optional[T] = None

    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def left_unbounded(cls) -> "Bound[T]":
        """-infinity"""
        return cls(BoundKind.LEFT_UNBOUNDED)

    @classmethod
    def right_unbounded(cls) -> "Bound[T]":
        """+infinity"""
        return cls(BoundKind.RIGHT_UNBOUNDED)

    @classmethod
    def new_left_of(cls, point: T) -> "Bound[T]":
        """Столбик перед point (закрытая нижняя / открытая верхняя граница)"""
        return cls(BoundKind.LEFT_OF, point)

    @classmethod
    def new_right_of(cls, point: T) -> "Bound[T]":
        """Столбик после point (открытая нижняя / закрытая верхняя граница)"""
        return cls(BoundKind.RIGHT_OF, point)

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    def value(self) -> Optional[T]:
        """
        Точка границы (входит она в интервал или нет).

        Returns:
            None для бесконечной границы
        """
        if self.kind in _UNBOUNDED:
            return None
        return self.point

    @property
    def is_unbounded(self) -> bool:
        return self.kind in _UNBOUNDED

    # -------------------------------------------------------------------------
    # Положение значения относительно границы
    # -------------------------------------------------------------------------

    def left_of(self, value: T) -> bool:
        """
        True если value лежит справа от границы.

        LEFT_OF(p) включает p, RIGHT_OF(p) — нет.
        """
        if self.kind is BoundKind.LEFT_UNBOUNDED:
            return True
        if self.kind is BoundKind.RIGHT_UNBOUNDED:
            return False
        cmp = partial_cmp(self.point, value)
        if self.kind is BoundKind.LEFT_OF:
            return cmp in (CMP_LESS, CMP_EQUAL)
        return cmp == CMP_LESS

    def right_of(self, value: T) -> bool:
        """
        True если value лежит слева от границы.

        RIGHT_OF(p) включает p, LEFT_OF(p) — нет.
        """
        if self.kind is BoundKind.LEFT_UNBOUNDED:
            return False
        if self.kind is BoundKind.RIGHT_UNBOUNDED:
            return True
        cmp = partial_cmp(value, self.point)
        if self.kind is BoundKind.RIGHT_OF:
            return cmp in (CMP_LESS, CMP_EQUAL)
        return cmp == CMP_LESS

    # -------------------------------------------------------------------------
    # Порядок
    # -------------------------------------------------------------------------

    def compare(self, other: "Bound[T]") -> int | None:
        """
        Сравнение двух границ.

        Returns:
            -1 / 0 / +1, или None если точки несравнимы
        """
        sk, ok = self.kind, other.kind

        if sk is ok and sk in _UNBOUNDED:
            return CMP_EQUAL
        if sk is BoundKind.LEFT_UNBOUNDED or ok is BoundKind.RIGHT_UNBOUNDED:
            return CMP_LESS
        if sk is BoundKind.RIGHT_UNBOUNDED or ok is BoundKind.LEFT_UNBOUNDED:
            return CMP_GREATER

        cmp = partial_cmp(self.point, other.point)
        if cmp is None or sk is ok:
            return cmp

        if sk is BoundKind.LEFT_OF:
            # LEFT_OF(p) vs RIGHT_OF(q)
            if cmp != CMP_GREATER:
                return CMP_LESS
            return CMP_EQUAL if nothing_between(other.point, self.point) else CMP_GREATER

        # RIGHT_OF(p) vs LEFT_OF(q)
        if cmp != CMP_LESS:
            return CMP_GREATER
        return CMP_EQUAL if nothing_between(self.point, other.point) else CMP_LESS

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Bound):
            return NotImplemented
        return self.compare(other) == CMP_EQUAL

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, Bound):
            return NotImplemented
        return self.compare(other) != CMP_EQUAL

    def __lt__(self, other: "Bound[T]") -> bool:
        if not isinstance(other, Bound):
            return NotImplemented
        return self.compare(other) == CMP_LESS

    def __le__(self, other: "Bound[T]") -> bool:
        if not isinstance(other, Bound):
            return NotImplemented
        return self.compare(other) in (CMP_LESS, CMP_EQUAL)

    def __gt__(self, other: "Bound[T]") -> bool:
        if not isinstance(other, Bound):
            return NotImplemented
        return self.compare(other) == CMP_GREATER

    def __ge__(self, other: "Bound[T]") -> bool:
        if not isinstance(other, Bound):
            return NotImplemented
        return self.compare(other) in (CMP_GREATER, CMP_EQUAL)

    def min(self, other: "Bound[T]") -> "Bound[T]":
        """Меньшая из двух границ (other, если границы несравнимы)"""
        return self if self < other else other

    def max(self, other: "Bound[T]") -> "Bound[T]":
        """Большая из двух границ (other, если границы несравнимы)"""
        return self if self > other else other

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        if self.kind is BoundKind.LEFT_UNBOUNDED:
            return "-infinity"
        if self.kind is BoundKind.RIGHT_UNBOUNDED:
            return "+infinity"
        if self.kind is BoundKind.LEFT_OF:
            return f"LeftOf({self.point!r})"
        return f"RightOf({self.point!r})"
