"""
MultiInterval — результат разности двух интервалов

Разность (и симметрическая разность) двух выпуклых интервалов может
разрезать интервал на два непересекающихся фрагмента. Больше двух
фрагментов не бывает, потому что оба операнда выпуклые.

Варианты:
- One(first)           — один фрагмент (возможно, пустой)
- Two(first, second)   — два непустых фрагмента, first всегда левее

Равенство структурное: One(a) != Two(b, c), даже если объединение b и c
равно a. Фрагменты сравниваются эквивалентностью интервалов.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Iterator, TypeVar

if TYPE_CHECKING:
    from src.core.intervals.interval import Interval

T = TypeVar("T")


class MultiInterval(ABC, Generic[T]):
    """
    Объединение одного или двух непересекающихся интервалов.

    Терминальный тип результата: потребители перебирают фрагменты.
    """

    __slots__ = ()

    @staticmethod
    def from_two(first: "Interval[T]", second: "Interval[T]") -> "MultiInterval[T]":
        """
        Построение из двух кандидатов-фрагментов.

        Пустые фрагменты отбрасываются: Two возвращается только если оба
        фрагмента непусты.
        """
        if first.is_empty():
            return One(second)
        if second.is_empty():
            return One(first)
        return Two(first, second)

    @property
    @abstractmethod
    def fragments(self) -> "tuple[Interval[T], ...]":
        """Фрагменты слева направо"""

    def __iter__(self) -> "Iterator[Interval[T]]":
        return iter(self.fragments)

    def __len__(self) -> int:
        return len(self.fragments)


@dataclass(frozen=True)
class One(MultiInterval[T]):
    """Один фрагмент"""

    first: "Interval[T]"

    __hash__ = None  # type: ignore[assignment]

    @property
    def fragments(self) -> "tuple[Interval[T], ...]":
        return (self.first,)

    def __str__(self) -> str:
        return str(self.first)

    def __repr__(self) -> str:
        return repr(self.first)


@dataclass(frozen=True)
class Two(MultiInterval[T]):
    """Два непересекающихся фрагмента, first левее second"""

    first: "Interval[T]"
    second: "Interval[T]"

    __hash__ = None  # type: ignore[assignment]

    @property
    def fragments(self) -> "tuple[Interval[T], ...]":
        return (self.first, self.second)

    def __str__(self) -> str:
        return f"{self.first} + {self.second}"

    def __repr__(self) -> str:
        return f"({self.first!r} + {self.second!r})"
