"""Tests for memoizing large and complex Python objects — as return values and as keys."""

from dataclasses import dataclass

from memokit import memoize

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    label: str


class Opaque:
    """Object whose string form hides its state."""

    def __init__(self, value):
        self.value = value

    def __str__(self):
        return "<opaque>"


# ===========================================================================
# Complex return values
# ===========================================================================


class TestComplexValues:
    def test_nested_dict(self):
        call_count = 0

        @memoize
        def build_config(name):
            nonlocal call_count
            call_count += 1
            return {
                "name": name,
                "nested": {"a": [1, 2, 3], "b": {"c": True, "d": None}},
                "tags": ["alpha", "beta"],
                "count": 42,
            }

        result = build_config("test")
        assert result["nested"]["b"]["c"] is True
        assert build_config("test") is result
        assert call_count == 1

    def test_list_of_dataclasses(self):
        call_count = 0

        @memoize
        def get_points(n):
            nonlocal call_count
            call_count += 1
            return [Point(x=float(i), y=float(i * 2), label=f"p{i}") for i in range(n)]

        points = get_points(100)
        assert len(points) == 100
        assert points[50] == Point(x=50.0, y=100.0, label="p50")
        assert get_points(100) is points  # same object from cache
        assert call_count == 1

    def test_large_string(self):
        @memoize
        def build_text(n):
            return "abcdefghij" * n

        text = build_text(100_000)
        assert len(text) == 1_000_000
        assert build_text(100_000) is text


# ===========================================================================
# Complex keys (arguments)
# ===========================================================================


class TestComplexKeys:
    def test_tuple_of_tuples(self):
        call_count = 0

        @memoize
        def process(data):
            nonlocal call_count
            call_count += 1
            return sum(sum(row) for row in data)

        matrix = tuple(tuple(range(i, i + 10)) for i in range(100))
        assert process(matrix) == process(matrix)
        assert call_count == 1

    def test_dataclass_key_by_string_form(self):
        call_count = 0

        @memoize
        def describe(point):
            nonlocal call_count
            call_count += 1
            return f"{point.label}: ({point.x}, {point.y})"

        p = Point(x=1.5, y=2.5, label="origin")
        assert describe(p) == "origin: (1.5, 2.5)"

        # Different instance with the same values has the same string form
        p2 = Point(x=1.5, y=2.5, label="origin")
        assert describe(p2) == "origin: (1.5, 2.5)"
        assert call_count == 1

    def test_dict_argument(self):
        call_count = 0

        @memoize
        def size(d):
            nonlocal call_count
            call_count += 1
            return len(d)

        assert size({"a": 1, "b": 2}) == 2
        assert size({"a": 1, "b": 2}) == 2
        assert call_count == 1

    def test_opaque_objects_share_string_key(self):
        @memoize
        def unwrap(obj):
            return obj.value

        assert unwrap(Opaque(1)) == 1
        # same str() means same slot, whatever the state
        assert unwrap(Opaque(2)) == 1

    def test_opaque_objects_with_custom_key(self):
        @memoize(key=lambda obj: obj.value)
        def unwrap(obj):
            return obj.value

        assert unwrap(Opaque(1)) == 1
        assert unwrap(Opaque(2)) == 2
        assert unwrap.cache_info().current_size == 2
