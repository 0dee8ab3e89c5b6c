"""Tests for auto-increment counter tokens."""

from __future__ import annotations

import pytest

from hrc.core.levels import CounterKind
from hrc.engine.counters import advance_counter


class TestNumericCounter:
    """Tests for base-10 counters."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("1", "2"), ("9", "10"), ("99", "100"), ("0", "1")],
    )
    def test_advances_by_one(self, token, expected):
        """Test advances by one."""
        assert advance_counter(token, CounterKind.NUMERIC) == expected

    def test_drops_leading_zeros(self):
        """Test drops leading zeros."""
        assert advance_counter("007", CounterKind.NUMERIC) == "8"

    def test_unparsable_token_continues_from_one(self):
        """Test unparsable token continues from one."""
        assert advance_counter("abc", CounterKind.NUMERIC) == "2"

    def test_empty_token_continues_from_one(self):
        """Test empty token continues from one."""
        assert advance_counter("", CounterKind.NUMERIC) == "2"


class TestAlphaCounter:
    """Tests for letter odometer counters."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("a", "b"),
            ("x", "y"),
            ("z", "aa"),
            ("az", "ba"),
            ("zz", "aaa"),
            ("abz", "aca"),
        ],
    )
    def test_lowercase_carry(self, token, expected):
        """Test lowercase carry."""
        assert advance_counter(token, CounterKind.ALPHA_LOWER) == expected

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("A", "B"), ("Z", "AA"), ("AZ", "BA"), ("ZZZ", "AAAA")],
    )
    def test_uppercase_carry(self, token, expected):
        """Test uppercase carry."""
        assert advance_counter(token, CounterKind.ALPHA_UPPER) == expected

    def test_empty_token_starts_at_first_letter(self):
        """Test empty token starts at first letter."""
        assert advance_counter("", CounterKind.ALPHA_LOWER) == "a"
        assert advance_counter("", CounterKind.ALPHA_UPPER) == "A"

    def test_sequence_from_x(self):
        """Test sequence from x."""
        token = "x"
        seen = []
        for _ in range(3):
            token = advance_counter(token, CounterKind.ALPHA_LOWER)
            seen.append(token)
        assert seen == ["y", "z", "aa"]
