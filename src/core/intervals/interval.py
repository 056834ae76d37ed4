"""
Interval — выпуклый интервал значений

Интервал — пара границ (lower, upper), см. bounds.py. Поддерживаются все
виды интервалов:

    | Интервал | Конструктор              | Описание
    |----------|--------------------------|------------------------------
    | [A,B]    | new_closed_closed        | left-closed, right-closed
    | [A,B)    | new_closed_open          | left-closed, right-open
    | (A,B)    | new_open_open            | left-open, right-open
    | (A,B]    | new_open_closed          | left-open, right-closed
    | (,B]     | new_unbounded_closed     | left-unbounded, right-closed
    | (,B)     | new_unbounded_open       | left-unbounded, right-open
    | [A,)     | new_closed_unbounded     | left-closed, right-unbounded
    | (A,)     | new_open_unbounded       | left-open, right-unbounded
    | (,)      | doubly_unbounded         | doubly unbounded
    | empty    | empty / Interval()       | empty

Конструирование никогда не отвергает lower > upper: такой интервал просто
пуст. Пустота — производный предикат, а не хранимый флаг.

Операции над двумя интервалами:

           [------ A ------]
                  [----- B -------]

           [----------------------]     convex_hull
           [------)                     difference (A - B)
                           (------]     difference (B - A)
           [------)        (------]     symmetric_difference (A ^ B)
                  [--------]            intersection (A & B)
                                        between: empty
           [----------------------]     union

         [---A---]   [----B----]

         [---------------------]        convex_hull
         [-------]                      difference (A - B)
                     [---------]        difference (B - A)
         [-------]   [---------]        symmetric_difference (A ^ B)
                                        intersection: empty
                 (---)                  between
                                        union: None (not contiguous)

Интервалы над float требуют аккуратности: [1.0, 100.0) и
[1.0, 100.0 - EPSILON) не эквивалентны, потому что машина считает верхние
точки равными, но одна граница открыта, а другая закрыта.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from src.core.errors import AdjacencyOracleMissing
from src.core.intervals.bounds import Bound, BoundKind
from src.core.intervals.multi_interval import MultiInterval, One
from src.core.math.numerical_safeguards import CMP_GREATER

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class Interval(Generic[T]):
    """
    Выпуклый интервал значений типа T.

    Immutable (frozen=True): все операции возвращают новые интервалы.
    Interval() — канонический пустой интервал.

    Равенство (==) — эквивалентность: два интервала равны, если содержат
    одни и те же значения, даже если записаны разными границами
    ([1, 4) == [1, 3] для целых). Поэтому Interval не хешируется.
    """

    lower_bound: Bound[T] = field(default_factory=Bound.right_unbounded)
    upper_bound: Bound[T] = field(default_factory=Bound.left_unbounded)

    __hash__ = None  # type: ignore[assignment]

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def new_closed_open(cls, lower: T, upper: T) -> "Interval[T]":
        """[lower, upper)"""
        return cls(Bound.new_left_of(lower), Bound.new_left_of(upper))

    @classmethod
    def new_closed_closed(cls, lower: T, upper: T) -> "Interval[T]":
        """[lower, upper]"""
        return cls(Bound.new_left_of(lower), Bound.new_right_of(upper))

    @classmethod
    def new_open_open(cls, lower: T, upper: T) -> "Interval[T]":
        """(lower, upper)"""
        return cls(Bound.new_right_of(lower), Bound.new_left_of(upper))

    @classmethod
    def new_open_closed(cls, lower: T, upper: T) -> "Interval[T]":
        """(lower, upper]"""
        return cls(Bound.new_right_of(lower), Bound.new_right_of(upper))

    @classmethod
    def new_unbounded_closed(cls, upper: T) -> "Interval[T]":
        """(, upper]"""
        return cls(Bound.left_unbounded(), Bound.new_right_of(upper))

    @classmethod
    def new_unbounded_open(cls, upper: T) -> "Interval[T]":
        """(, upper)"""
        return cls(Bound.left_unbounded(), Bound.new_left_of(upper))

    @classmethod
    def new_closed_unbounded(cls, lower: T) -> "Interval[T]":
        """[lower,)"""
        return cls(Bound.new_left_of(lower), Bound.right_unbounded())

    @classmethod
    def new_open_unbounded(cls, lower: T) -> "Interval[T]":
        """(lower,)"""
        return cls(Bound.new_right_of(lower), Bound.right_unbounded())

    @classmethod
    def doubly_unbounded(cls) -> "Interval[T]":
        """(,) — содержит все значения"""
        return cls(Bound.left_unbounded(), Bound.right_unbounded())

    @classmethod
    def empty(cls) -> "Interval[T]":
        """
        Пустой интервал.

        У пустого интервала много представлений, все они эквивалентны.
        """
        return cls()

    @classmethod
    def new_single(cls, value: T) -> "Interval[T]":
        """[value, value]"""
        return cls.new_closed_closed(value, value)

    # =========================================================================
    # ДОСТУП К ГРАНИЦАМ
    # =========================================================================

    @property
    def lower(self) -> Optional[T]:
        """
        Нижняя точка. None если интервал не ограничен снизу.

        Для пустого интервала возвращается то, из чего он был построен
        (None для Interval.empty()), значение не имеет смысла.
        """
        return self.lower_bound.value()

    @property
    def upper(self) -> Optional[T]:
        """Верхняя точка. None если интервал не ограничен сверху."""
        return self.upper_bound.value()

    @property
    def lower_inclusive(self) -> bool:
        return self.lower_bound.kind is BoundKind.LEFT_OF

    @property
    def upper_inclusive(self) -> bool:
        return self.upper_bound.kind is BoundKind.RIGHT_OF

    @property
    def lower_unbounded(self) -> bool:
        return self.lower_bound.kind is BoundKind.LEFT_UNBOUNDED

    @property
    def upper_unbounded(self) -> bool:
        return self.upper_bound.kind is BoundKind.RIGHT_UNBOUNDED

    # =========================================================================
    # ЗАПРОСЫ
    # =========================================================================

    def is_empty(self) -> bool:
        """
        True если интервал не содержит ни одного значения.

        Зависит от oracle смежности: для целых (0, 1) пуст, для float
        (1.0, 1.0 + EPSILON) пуст (нет представимого float между точками),
        для плотного типа тот же интервал не пуст.

        Интервал с несравнимыми точками (NaN) всегда пуст.
        """
        return self.upper_bound.compare(self.lower_bound) != CMP_GREATER

    def contains(self, value: T) -> bool:
        """Содержит ли интервал value"""
        return self.lower_bound.left_of(value) and self.upper_bound.right_of(value)

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def contains_interval(self, other: "Interval[T]") -> bool:
        """Содержит ли self все значения other (и, возможно, больше)"""
        return other.is_empty() or (
            self.lower_bound <= other.lower_bound and other.upper_bound <= self.upper_bound
        )

    def is_single(self) -> bool:
        """
        True если интервал имеет вид [A, A].

        Структурная проверка: (0, 2) для целых содержит ровно одно значение,
        но is_single() для него False.
        """
        return (
            self.lower_bound.kind is BoundKind.LEFT_OF
            and self.upper_bound.kind is BoundKind.RIGHT_OF
            and bool(self.lower_bound.point == self.upper_bound.point)
        )

    def equivalent(self, other: "Interval[T]") -> bool:
        """Содержат ли два интервала одни и те же значения"""
        if self.is_empty():
            return other.is_empty()
        if other.is_empty():
            return False
        return self.lower_bound == other.lower_bound and self.upper_bound == other.upper_bound

    def strictly_left_of(self, value: T) -> bool:
        """
        Все значения self строго меньше value (True для пустого).

            [------] .
                     X
        """
        return self.is_empty() or self.upper_bound.left_of(value)

    def left_of(self, value: T) -> bool:
        """
        Все значения self меньше или равны value (True для пустого).

            [------]
                   X
        """
        return self.is_empty() or self.upper_bound <= Bound.new_right_of(value)

    def strictly_right_of(self, value: T) -> bool:
        """
        value строго меньше всех значений self (True для пустого).

            . [------]
            X
        """
        return self.is_empty() or self.lower_bound.right_of(value)

    def right_of(self, value: T) -> bool:
        """
        value меньше или равно всем значениям self (True для пустого).

              [------]
              X
        """
        return self.is_empty() or self.lower_bound >= Bound.new_left_of(value)

    def strictly_left_of_interval(self, other: "Interval[T]") -> bool:
        """
        Все значения self строго меньше всех значений other.

        True если хотя бы один из интервалов пуст.
        """
        return self.is_empty() or other.is_empty() or self.upper_bound <= other.lower_bound

    # =========================================================================
    # АЛГЕБРА МНОЖЕСТВ
    # =========================================================================

    def convex_hull(self, other: "Interval[T]") -> "Interval[T]":
        """Наименьший интервал, содержащий оба интервала"""
        if self.is_empty():
            return other
        if other.is_empty():
            return self
        return Interval(
            self.lower_bound.min(other.lower_bound),
            self.upper_bound.max(other.upper_bound),
        )

    def intersection(self, other: "Interval[T]") -> "Interval[T]":
        """Значения, принадлежащие обоим интервалам (может быть пустым)"""
        return Interval(
            self.lower_bound.max(other.lower_bound),
            self.upper_bound.min(other.upper_bound),
        )

    def intersects(self, other: "Interval[T]") -> bool:
        """Есть ли у интервалов хотя бы одно общее значение"""
        return (
            not self.is_empty()
            and not other.is_empty()
            and self.lower_bound < other.upper_bound
            and other.lower_bound < self.upper_bound
        )

    def contiguous(self, other: "Interval[T]") -> bool:
        """
        Нет ли значений между интервалами (касаются или перекрываются).

        True если хотя бы один из интервалов пуст.
        """
        if self.is_empty() or other.is_empty():
            return True
        return self.lower_bound <= other.upper_bound and other.lower_bound <= self.upper_bound

    def union(self, other: "Interval[T]") -> Optional["Interval[T]"]:
        """
        Объединение, если оно выражается одним интервалом.

        Returns:
            convex_hull если интервалы contiguous, иначе None
        """
        if self.contiguous(other):
            return self.convex_hull(other)
        return None

    def between(self, other: "Interval[T]") -> "Interval[T]":
        """
        Наибольший интервал внутри convex_hull, не пересекающийся ни с одним
        из интервалов: все значения строго между ними.

        Пуст, если хотя бы один из интервалов пуст или они касаются.
        """
        if self.is_empty() or other.is_empty():
            return Interval.empty()
        return Interval(
            self.upper_bound.min(other.upper_bound),
            self.lower_bound.max(other.lower_bound),
        )

    def difference(self, other: "Interval[T]") -> MultiInterval[T]:
        """Значения self, не принадлежащие other"""
        if self.is_empty() or other.is_empty():
            return One(self)
        return MultiInterval.from_two(
            Interval(self.lower_bound, other.lower_bound.min(self.upper_bound)),
            Interval(other.upper_bound.max(self.lower_bound), self.upper_bound),
        )

    def symmetric_difference(self, other: "Interval[T]") -> MultiInterval[T]:
        """
        Значения, принадлежащие ровно одному из интервалов.

        Совпадает с difference(self, other) ∪ difference(other, self):
        левый фрагмент идёт от меньшей нижней границы до начала пересечения,
        правый — от конца пересечения до большей верхней границы.
        """
        if self.is_empty() or other.is_empty():
            return MultiInterval.from_two(self, other)

        lo, hi = self.lower_bound, self.upper_bound
        other_lo, other_hi = other.lower_bound, other.upper_bound
        return MultiInterval.from_two(
            Interval(
                lo.min(other_lo),
                lo.max(other_lo).min(hi.min(other_hi)),
            ),
            Interval(
                hi.min(other_hi).max(lo.max(other_lo)),
                hi.max(other_hi),
            ),
        )

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __and__(self, other: Any) -> "Interval[T]":
        if not isinstance(other, Interval):
            return NotImplemented
        return self.intersection(other)

    def __xor__(self, other: Any) -> MultiInterval[T]:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.symmetric_difference(other)

    def __sub__(self, other: Any) -> MultiInterval[T]:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.difference(other)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.equivalent(other)

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return not self.equivalent(other)

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def __str__(self) -> str:
        """
        Bracket-нотация: [1, 4), (, 1], [1,), (,), empty.
        """
        if self.is_empty():
            return "empty"

        lower, upper = self.lower_bound, self.upper_bound

        if lower.kind is BoundKind.LEFT_UNBOUNDED:
            text = "("
        elif lower.kind is BoundKind.LEFT_OF:
            text = f"[{lower.point}"
        else:
            text = f"({lower.point}"

        if upper.kind is BoundKind.RIGHT_UNBOUNDED:
            return text + ",)"
        if upper.kind is BoundKind.LEFT_OF:
            return text + f", {upper.point})"
        return text + f", {upper.point}]"

    def __repr__(self) -> str:
        """
        Отладочное представление с видами границ: (LeftOf(1),RightOf(4)).
        """
        try:
            if self.is_empty():
                return "empty"
        except AdjacencyOracleMissing:
            # Тип точек без oracle: показываем границы как есть
            pass
        return f"({self.lower_bound!r},{self.upper_bound!r})"
