"""
Test suite for the continued-fraction and digit-expansion engine
"""

from fractions import Fraction

import pytest
import sys
import os

# Add grandparent directory to path for imports (to find periodicode package)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from periodicode.expansion import (
    to_radix_string, floor_rational, power,
    continued_fraction, fold_continued_fraction, digit_expansion,
)
from periodicode.numeric_literal import parse_literal
from periodicode.errors import PeriodiCodeError, InvalidRadix, E_DIVISION_BY_ZERO


class TestHelpers:
    """Test integer rendering, floor and power"""

    def test_to_radix_string(self):
        assert to_radix_string(255, 16) == 'ff'
        assert to_radix_string(0, 2) == '0'
        assert to_radix_string(-6, 2) == '-110'
        assert to_radix_string(24, 25) == 'o'
        assert to_radix_string(144, 12) == '100'

    def test_floor_rounds_toward_negative_infinity(self):
        assert floor_rational(Fraction(7, 2)) == 3
        assert floor_rational(Fraction(-1, 2)) == -1
        assert floor_rational(Fraction(-7, 2)) == -4
        assert floor_rational(Fraction(-4)) == -4

    def test_power(self):
        assert power(2, 10) == 1024
        assert power(2, -10) == Fraction(1, 1024)
        assert power(7, 0) == 1


class TestContinuedFraction:
    """Test continued-fraction expansion"""

    def test_one_seventh(self):
        assert list(continued_fraction(Fraction(1, 7))) == [0, 7]

    def test_three_sevenths(self):
        assert list(continued_fraction(Fraction(3, 7))) == [0, 2, 3]

    def test_longer_expansion(self):
        assert list(continued_fraction(Fraction(415, 93))) == [4, 2, 6, 7]

    def test_integer(self):
        assert list(continued_fraction(Fraction(5))) == [5]
        assert list(continued_fraction(Fraction(0))) == [0]

    def test_negative_value(self):
        assert list(continued_fraction(Fraction(-1, 2))) == [-1, 2]
        assert list(continued_fraction(Fraction(-7, 3))) == [-3, 1, 2]

    @pytest.mark.parametrize('value', [
        Fraction(1, 7), Fraction(-22, 7), Fraction(355, 113), Fraction(10 ** 20 + 1, 3 ** 30),
    ])
    def test_fold_reproduces_value(self, value):
        assert fold_continued_fraction(continued_fraction(value)) == value


class TestFoldContinuedFraction:
    """Test folding terms back into a rational"""

    def test_single_term(self):
        assert fold_continued_fraction([5]) == 5

    def test_three_terms(self):
        assert fold_continued_fraction([0, 2, 3]) == Fraction(3, 7)

    def test_rational_terms(self):
        assert fold_continued_fraction([1, Fraction(1, 2)]) == 3

    def test_empty(self):
        with pytest.raises(ValueError):
            fold_continued_fraction([])

    def test_zero_term_to_invert(self):
        with pytest.raises(PeriodiCodeError) as exc_info:
            fold_continued_fraction([1, 0])
        assert exc_info.value.code == E_DIVISION_BY_ZERO


class TestDigitExpansion:
    """Test positional expansion with repeating tails"""

    def test_pure_repetend(self):
        assert digit_expansion(Fraction(1, 7), 10) == '0.r142857'

    def test_mixed_repetend(self):
        assert digit_expansion(Fraction(1, 6), 10) == '0.1r6'
        assert digit_expansion(Fraction(73, 6), 10) == '12.1r6'

    def test_terminating(self):
        assert digit_expansion(Fraction(1, 4), 10) == '0.25'
        assert digit_expansion(Fraction(1, 2), 16) == '0.8'

    def test_integer(self):
        assert digit_expansion(Fraction(5), 10) == '5'
        assert digit_expansion(Fraction(255), 16) == 'ff'

    def test_negative(self):
        assert digit_expansion(Fraction(-5, 2), 10) == '-2.5'
        assert digit_expansion(Fraction(-1, 3), 10) == '-0.r3'

    def test_binary(self):
        assert digit_expansion(Fraction(1, 3), 2) == '0.r01'
        assert digit_expansion(Fraction(1, 10), 2) == '0.0r0011'

    def test_other_radices(self):
        assert digit_expansion(Fraction(1, 2), 3) == '0.r1'
        assert digit_expansion(Fraction(1, 11), 6) == '0.r0313452421'

    def test_invalid_radix(self):
        with pytest.raises(InvalidRadix):
            digit_expansion(Fraction(1, 3), 26)

    @pytest.mark.parametrize('radix', [2, 6, 10, 12, 15, 16, 25])
    def test_reparses_to_same_value(self, radix):
        for value in (Fraction(1, 7), Fraction(22, 7), Fraction(14, 15), Fraction(1, 360)):
            text = digit_expansion(value, radix)
            assert parse_literal(text, radix) == (value, '')
