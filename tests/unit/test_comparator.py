"""
Unit tests for value comparison and deep equality.
"""

import math
import re
from datetime import date, datetime, timedelta, timezone

import numpy as np
import pytest

from magicquery.query.comparator import (
    compare_values,
    deep_equals,
    is_between,
    is_greater_than,
    is_greater_than_or_equal,
    is_less_than,
    is_less_than_or_equal,
)
from magicquery.utils.guards import MISSING


class TestCompareValues:
    """Tests for the sorting comparator."""
    
    def test_numbers(self):
        assert compare_values(1, 2) < 0
        assert compare_values(2, 1) > 0
        assert compare_values(2, 2.0) == 0
    
    def test_nan_sorts_after_numbers(self):
        """Test NaN is greater than every number and equal to NaN."""
        nan = float("nan")
        assert compare_values(nan, 1e308) > 0
        assert compare_values(-1, nan) < 0
        assert compare_values(nan, float("nan")) == 0
    
    def test_strings(self):
        assert compare_values("apple", "banana") < 0
        assert compare_values("b", "a") > 0
    
    def test_booleans(self):
        assert compare_values(False, True) < 0
        assert compare_values(True, True) == 0
    
    def test_dates(self):
        earlier = datetime(2024, 1, 1)
        later = earlier + timedelta(seconds=1)
        assert compare_values(earlier, later) < 0
        assert compare_values(later, earlier) > 0
    
    def test_mixed_dates_by_instant(self):
        """Test naive datetimes and dates are read as UTC."""
        aware = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert compare_values(aware, datetime(2024, 1, 1)) == 0
        assert compare_values(date(2024, 1, 1), aware) == 0
        assert compare_values(np.datetime64("2024-01-02"), aware) > 0
    
    def test_mixed_types_fall_back_to_text(self):
        assert compare_values(10, "9") == compare_values("10", "9")
    
    def test_numpy_numbers(self):
        assert compare_values(np.int64(3), 2.5) > 0
        assert compare_values(np.float32(1.5), 2) < 0
    
    @pytest.mark.parametrize("low,high", [
        (np.uint8(1), np.uint8(2)),
        (np.uint8(0), np.uint8(255)),
        (np.int8(-100), np.int8(100)),
        (np.int64(-2**62), np.int64(2**62)),
    ])
    def test_fixed_width_integers_do_not_wrap(self, low, high):
        """Test fixed-width numpy integers order by value."""
        assert compare_values(low, high) < 0
        assert compare_values(high, low) > 0
        assert compare_values(low, type(low)(int(low))) == 0
    
    def test_huge_int_against_float(self):
        """Test ints beyond float range compare against floats."""
        assert compare_values(10**400, 1.5) > 0
        assert compare_values(1.5, 10**400) < 0
        assert compare_values(-10**400, 1.5) < 0
        assert compare_values(10**400, float("nan")) < 0


class TestRangeComparisons:
    """Tests for type-homogeneous range helpers."""
    
    def test_numbers(self):
        assert is_greater_than(5, 3)
        assert is_greater_than_or_equal(3, 3)
        assert is_less_than(1, 2)
        assert is_less_than_or_equal(2, 2)
    
    def test_strings_lexicographic(self):
        assert is_greater_than("b", "a")
        assert is_less_than("apple", "apricot")
    
    def test_dates(self):
        assert is_greater_than(datetime(2024, 5, 1), datetime(2024, 1, 1))
        assert is_less_than_or_equal(date(2024, 1, 1), datetime(2024, 1, 1))
    
    @pytest.mark.parametrize("a,b", [
        (5, "3"),
        ("5", 3),
        (True, 0),
        (1, False),
        (None, 0),
        (MISSING, 0),
        (datetime(2024, 1, 1), 0),
        ([1], [0]),
    ])
    def test_mismatched_types_are_false(self, a, b):
        """Test no range comparison holds across types."""
        assert not is_greater_than(a, b)
        assert not is_greater_than_or_equal(a, b)
        assert not is_less_than(a, b)
        assert not is_less_than_or_equal(a, b)
    
    def test_nan_never_in_range(self):
        nan = float("nan")
        assert not is_greater_than(nan, 0)
        assert not is_less_than(nan, 0)
        assert not is_between(nan, -math.inf, math.inf)
    
    def test_between(self):
        assert is_between(5, 1, 10)
        assert is_between(1, 1, 10)
        assert is_between(10, 1, 10)
        assert not is_between(11, 1, 10)
        assert is_between("m", "a", "z")
        assert is_between(datetime(2024, 6, 1), datetime(2024, 1, 1), datetime(2024, 12, 31))
    
    def test_between_type_mismatch(self):
        assert not is_between(5, "1", 10)
        assert not is_between(datetime(2024, 1, 1), 0, 10)


class TestDeepEquals:
    """Tests for deep_equals()."""
    
    def test_primitives(self):
        assert deep_equals(1, 1)
        assert deep_equals(42, 42.0)
        assert deep_equals("a", "a")
        assert not deep_equals("42", 42)
    
    def test_booleans_are_not_numbers(self):
        assert not deep_equals(True, 1)
        assert not deep_equals(0, False)
        assert deep_equals(np.bool_(True), True)
    
    def test_none_and_missing(self):
        assert deep_equals(None, None)
        assert deep_equals(MISSING, MISSING)
        assert not deep_equals(None, MISSING)
        assert not deep_equals(None, 0)
    
    def test_nan_equals_nan(self):
        assert deep_equals(float("nan"), float("nan"))
        assert not deep_equals(float("nan"), 0.0)
    
    def test_sequences_are_order_sensitive(self):
        assert deep_equals([1, 2, 3], [1, 2, 3])
        assert deep_equals([1, 2], (1, 2))
        assert not deep_equals([1, 2], [2, 1])
        assert not deep_equals([1, 2], [1, 2, 3])
    
    def test_mappings(self):
        assert deep_equals({"a": 1, "b": {"c": [1, 2]}}, {"b": {"c": [1, 2]}, "a": 1})
        assert not deep_equals({"a": 1}, {"a": 1, "b": 2})
        assert not deep_equals({"a": 1}, {"b": 1})
        assert not deep_equals({"a": None}, {})
    
    def test_dates_by_instant(self):
        assert deep_equals(datetime(2024, 1, 15), datetime(2024, 1, 15))
        assert deep_equals(date(2024, 1, 15), datetime(2024, 1, 15))
        assert not deep_equals(datetime(2024, 1, 15), "2024-01-15")
        assert not deep_equals(datetime(2024, 1, 15), datetime(2024, 1, 15).timestamp())
    
    def test_regex_patterns(self):
        assert deep_equals(re.compile(r"^\d+$"), re.compile(r"^\d+$"))
        assert not deep_equals(re.compile("a"), re.compile("a", re.I))
        assert not deep_equals(re.compile("a"), "a")
    
    def test_numpy_arrays(self):
        assert deep_equals(np.array([1, 2, 3]), [1, 2, 3])
        assert not deep_equals(np.array([1, 2]), [1, 3])
    
    def test_cyclic_structures_terminate(self):
        """Test self-referencing containers do not recurse forever."""
        a = {"name": "loop"}
        a["self"] = a
        b = {"name": "loop"}
        b["self"] = b
        
        assert deep_equals(a, b)
        
        c = {"name": "other"}
        c["self"] = c
        assert not deep_equals(a, c)
    
    def test_cyclic_lists(self):
        a = [1]
        a.append(a)
        b = [1]
        b.append(b)
        assert deep_equals(a, b)
    
    def test_custom_objects(self):
        class Point:
            def __init__(self, x):
                self.x = x
            
            def __str__(self):
                return f"Point({self.x})"
        
        assert deep_equals(Point(1), Point(1))
        assert not deep_equals(Point(1), Point(2))
        
        class Opaque:
            pass
        
        assert not deep_equals(Opaque(), Opaque())
