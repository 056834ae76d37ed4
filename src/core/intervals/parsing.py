"""
Разбор bracket-нотации интервалов

Обратная операция к str(Interval):

    "[1, 4)"   → Interval.new_closed_open(1, 4)
    "(, 10]"   → Interval.new_unbounded_closed(10)
    "[1,)"     → Interval.new_closed_unbounded(1)
    "(,)"      → Interval.doubly_unbounded()
    "empty"    → Interval.empty()

Используется для хранения диапазонов в конфигурации и в тестах.
"""

import re
from typing import Callable, Final, TypeVar

from src.core.errors import IntervalParseError
from src.core.intervals.interval import Interval

T = TypeVar("T")

EMPTY_TOKEN: Final[str] = "empty"

_INTERVAL_RE: Final[re.Pattern] = re.compile(
    r"^\s*(?P<open>[\[(])(?P<lower>[^,\[\]()]*),(?P<upper>[^,\[\]()]*)(?P<close>[\])])\s*$"
)


def parse_interval(text: str, convert: Callable[[str], T] = int) -> Interval[T]:
    """
    Разбор интервала из bracket-нотации.

    Args:
        text: Текст интервала, например "[1, 4)"
        convert: Преобразование текста точки в значение (default: int)

    Returns:
        Interval

    Raises:
        IntervalParseError: Если текст некорректен или convert не смог
            преобразовать точку

    Examples:
        >>> str(parse_interval("[1, 4)"))
        '[1, 4)'
        >>> parse_interval("(, 2.5]", float).upper
        2.5
    """
    if text.strip() == EMPTY_TOKEN:
        return Interval.empty()

    match = _INTERVAL_RE.match(text)
    if match is None:
        raise IntervalParseError(text, "expected '[a, b)', '(, b]', '[a,)', '(,)' or 'empty'")

    opening, closing = match.group("open"), match.group("close")
    lower_text = match.group("lower").strip()
    upper_text = match.group("upper").strip()

    if not lower_text and opening != "(":
        raise IntervalParseError(text, "unbounded lower side must use '('")
    if not upper_text and closing != ")":
        raise IntervalParseError(text, "unbounded upper side must use ')'")

    lower = _convert_point(text, lower_text, convert) if lower_text else None
    upper = _convert_point(text, upper_text, convert) if upper_text else None

    if lower_text and upper_text:
        if opening == "[":
            if closing == "]":
                return Interval.new_closed_closed(lower, upper)
            return Interval.new_closed_open(lower, upper)
        if closing == "]":
            return Interval.new_open_closed(lower, upper)
        return Interval.new_open_open(lower, upper)

    if lower_text:
        if opening == "[":
            return Interval.new_closed_unbounded(lower)
        return Interval.new_open_unbounded(lower)

    if upper_text:
        if closing == "]":
            return Interval.new_unbounded_closed(upper)
        return Interval.new_unbounded_open(upper)

    return Interval.doubly_unbounded()


def _convert_point(text: str, point_text: str, convert: Callable[[str], T]) -> T:
    try:
        return convert(point_text)
    except (TypeError, ValueError, ArithmeticError) as e:
        # decimal.InvalidOperation является ArithmeticError, а не ValueError
        raise IntervalParseError(text, f"cannot convert {point_text!r}: {e}") from e
