"""
Unit tests for type guards.
"""

import copy
import re
from datetime import date, datetime, timezone

import numpy as np
import pytest

from magicquery.utils.guards import (
    MISSING,
    is_array,
    is_boolean,
    is_date,
    is_missing,
    is_nan,
    is_null_or_missing,
    is_number,
    is_object,
    is_regex,
    is_string,
    to_instant,
)


class TestMissing:
    """Tests for the MISSING sentinel."""
    
    def test_is_falsy(self):
        """Test the sentinel is falsy."""
        assert not MISSING
    
    def test_is_singleton(self):
        """Test copies and deep copies keep identity."""
        assert copy.copy(MISSING) is MISSING
        assert copy.deepcopy(MISSING) is MISSING
    
    def test_distinct_from_none(self):
        """Test None is not missing but is null-or-missing."""
        assert not is_missing(None)
        assert is_missing(MISSING)
        assert is_null_or_missing(None)
        assert is_null_or_missing(MISSING)
        assert not is_null_or_missing(0)


class TestPredicates:
    """Tests for value kind predicates."""
    
    @pytest.mark.parametrize("value", [1, 2.5, -3, np.int32(4), np.float64(1.5), float("nan")])
    def test_numbers(self, value):
        """Test numeric values are numbers."""
        assert is_number(value)
    
    @pytest.mark.parametrize("value", [True, False, np.bool_(True), "1", None])
    def test_non_numbers(self, value):
        """Test booleans and strings are not numbers."""
        assert not is_number(value)
    
    def test_booleans(self):
        """Test Python and numpy booleans."""
        assert is_boolean(True)
        assert is_boolean(np.bool_(False))
        assert not is_boolean(1)
    
    def test_nan(self):
        """Test NaN detection."""
        assert is_nan(float("nan"))
        assert is_nan(np.float32("nan"))
        assert not is_nan(1.0)
        assert not is_nan("nan")
    
    def test_containers(self):
        """Test object and array guards."""
        assert is_object({"a": 1})
        assert not is_object([1])
        assert is_array([1])
        assert is_array((1, 2))
        assert is_array(np.arange(3))
        assert not is_array("abc")
    
    def test_strings_and_regex(self):
        """Test string and compiled pattern guards."""
        assert is_string("x")
        assert not is_string(b"x")
        assert is_regex(re.compile("a"))
        assert not is_regex("a")
    
    def test_dates(self):
        """Test date guards including numpy datetimes."""
        assert is_date(date(2024, 1, 1))
        assert is_date(datetime(2024, 1, 1, 12))
        assert is_date(np.datetime64("2024-01-01"))
        assert not is_date(np.datetime64("NaT"))
        assert not is_date("2024-01-01")


class TestToInstant:
    """Tests for to_instant()."""
    
    def test_naive_datetime_is_utc(self):
        """Test naive datetimes are read as UTC."""
        naive = datetime(2024, 1, 1)
        aware = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert to_instant(naive) == to_instant(aware)
    
    def test_date_and_numpy_agree(self):
        """Test plain dates and numpy datetimes share a timeline."""
        assert to_instant(date(2024, 3, 5)) == to_instant(np.datetime64("2024-03-05"))
    
    def test_epoch(self):
        """Test the epoch maps to zero."""
        assert to_instant(date(1970, 1, 1)) == 0.0
