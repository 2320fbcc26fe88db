"""
Test suite for the radix name and prefix tables
"""

import pytest
import sys
import os

# Add grandparent directory to path for imports (to find periodicode package)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from periodicode.radix import (
    radix_of_prefix, radix_of_name, strip_radix_prefix, validate_radix,
    RADIX_NAMES, MIN_RADIX, MAX_RADIX,
)
from periodicode.errors import InvalidRadix, PeriodiCodeError, PeriodiCodeFatal


class TestRadixPrefixes:
    """Test literal prefix lookup"""

    def test_known_prefixes(self):
        assert radix_of_prefix('0v') == 20
        assert radix_of_prefix('0x') == 16
        assert radix_of_prefix('0z') == 12
        assert radix_of_prefix('0d') == 10
        assert radix_of_prefix('0o') == 8
        assert radix_of_prefix('0s') == 6
        assert radix_of_prefix('0qn') == 5
        assert radix_of_prefix('0qt') == 4
        assert radix_of_prefix('0t') == 3
        assert radix_of_prefix('0b') == 2

    def test_unknown_prefix(self):
        assert radix_of_prefix('0q') is None
        assert radix_of_prefix('0y') is None
        assert radix_of_prefix('') is None

    def test_strip_three_letter_prefix(self):
        assert strip_radix_prefix('0qn12') == ('12', 5)
        assert strip_radix_prefix('0qt12') == ('12', 4)

    def test_strip_two_letter_prefix(self):
        assert strip_radix_prefix('0x1f;') == ('1f;', 16)

    def test_strip_without_prefix(self):
        assert strip_radix_prefix('12.5') == ('12.5', None)
        assert strip_radix_prefix('0.5') == ('0.5', None)

    def test_bare_q_is_not_a_prefix(self):
        assert strip_radix_prefix('0q1') == ('0q1', None)


class TestRadixNames:
    """Test radix name lookup"""

    def test_aliases(self):
        assert radix_of_name('binary') == 2
        assert radix_of_name('trinary') == radix_of_name('ternary') == 3
        assert radix_of_name('quaternary') == 4
        assert radix_of_name('quinary') == radix_of_name('pental') == 5
        assert radix_of_name('senary') == radix_of_name('seximal') == radix_of_name('heximal') == 6
        assert radix_of_name('octal') == radix_of_name('oct') == 8
        assert radix_of_name('dozenal') == radix_of_name('duodecimal') == 12
        assert radix_of_name('hex') == radix_of_name('hexadecimal') == 16
        assert radix_of_name('vigesimal') == 20

    def test_decimal_aliases(self):
        for name in ('decimal', 'denary', 'decanary', 'dec'):
            assert radix_of_name(name) == 10

    def test_case_sensitive(self):
        assert radix_of_name('Hex') is None
        assert radix_of_name('DECIMAL') is None

    def test_unknown_name(self):
        assert radix_of_name('septenary') is None

    def test_all_names_in_range(self):
        assert all(MIN_RADIX <= r <= MAX_RADIX for r in RADIX_NAMES.values())


class TestValidateRadix:
    """Test radix range validation"""

    def test_bounds_accepted(self):
        assert validate_radix(2) == 2
        assert validate_radix(25) == 25

    def test_too_small(self):
        with pytest.raises(InvalidRadix):
            validate_radix(1)

    def test_too_large(self):
        with pytest.raises(InvalidRadix) as exc_info:
            validate_radix(26)
        assert "greater than 25" in exc_info.value.message

    def test_non_integer(self):
        with pytest.raises(InvalidRadix):
            validate_radix(10.0)

    def test_invalid_radix_is_fatal(self):
        with pytest.raises(PeriodiCodeFatal) as exc_info:
            validate_radix(0)
        assert not isinstance(exc_info.value, PeriodiCodeError)
