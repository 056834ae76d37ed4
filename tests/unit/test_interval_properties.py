"""
Property-based тесты алгебры интервалов (hypothesis)

Для целых интервалов с точками в [-10, 10] каждая операция сверяется с
теми же операциями над множествами значений из [-15, 15]: пределы домена
шире точек, поэтому бесконечные границы тоже различимы.
"""

from hypothesis import given
from hypothesis import strategies as st

from src.core.intervals import Bound, Interval, Two

DOMAIN = range(-15, 16)

points = st.integers(-10, 10)

lower_bounds = st.one_of(
    st.just(Bound.left_unbounded()),
    points.map(Bound.new_left_of),
    points.map(Bound.new_right_of),
)

upper_bounds = st.one_of(
    st.just(Bound.right_unbounded()),
    points.map(Bound.new_left_of),
    points.map(Bound.new_right_of),
)

intervals = st.builds(Interval, lower_bounds, upper_bounds)


def members(intv: Interval[int]) -> frozenset:
    return frozenset(x for x in DOMAIN if intv.contains(x))


class TestQueryProperties:
    """Запросы согласованы с множеством значений"""

    @given(intervals)
    def test_empty_iff_no_members(self, a) -> None:
        assert a.is_empty() == (not members(a))

    @given(intervals, intervals)
    def test_equivalent_iff_same_members(self, a, b) -> None:
        assert a.equivalent(b) == (members(a) == members(b))
        assert (a == b) == a.equivalent(b)

    @given(intervals, intervals)
    def test_contains_interval_is_subset(self, a, b) -> None:
        assert a.contains_interval(b) == (members(b) <= members(a))

    @given(intervals, intervals)
    def test_intersects(self, a, b) -> None:
        assert a.intersects(b) == bool(members(a) & members(b))

    @given(points, points)
    def test_closed_closed_contains_endpoints(self, a, b) -> None:
        intv = Interval.new_closed_closed(a, b)
        assert intv.is_empty() == (a > b)
        if a <= b:
            assert intv.contains(a)
            assert intv.contains(b)


class TestAlgebraProperties:
    """Алгебра множеств согласована с операциями над множествами"""

    @given(intervals, intervals)
    def test_intersection(self, a, b) -> None:
        assert members(a & b) == members(a) & members(b)

    @given(intervals)
    def test_intersection_idempotent(self, a) -> None:
        assert a.intersection(a) == a

    @given(intervals, intervals)
    def test_convex_hull(self, a, b) -> None:
        hull = a.convex_hull(b)
        assert hull.contains_interval(a)
        assert hull.contains_interval(b)
        assert hull == b.convex_hull(a)

    @given(intervals, intervals)
    def test_union(self, a, b) -> None:
        union = a.union(b)
        if union is None:
            assert members(a.between(b))
        else:
            assert members(union) == members(a) | members(b)

    @given(intervals, intervals)
    def test_difference(self, a, b) -> None:
        result = a - b
        covered = frozenset().union(*(members(fragment) for fragment in result))
        assert covered == members(a) - members(b)

    @given(intervals, intervals)
    def test_symmetric_difference(self, a, b) -> None:
        result = a ^ b
        covered = frozenset().union(*(members(fragment) for fragment in result))
        assert covered == members(a) ^ members(b)
        assert result == b ^ a

    @given(intervals, intervals)
    def test_two_fragments_are_ordered(self, a, b) -> None:
        for result in (a - b, a ^ b):
            if isinstance(result, Two):
                assert not result.first.is_empty()
                assert not result.second.is_empty()
                assert result.first.strictly_left_of_interval(result.second)
                assert not result.first.intersects(result.second)
