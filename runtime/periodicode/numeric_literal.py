"""
Numeric Literal Grammar

Parses the longest numeric literal at the start of a string into an exact
rational. Surface syntax:

    [prefix] integral? ( '.' fractional? ( 'r' repeating? )? )? exponent?

    prefix    : 0v 0x 0z 0d 0o 0s 0qn 0qt 0t 0b   (literal's own radix)
    exponent  : ( 'e' | 'xp' | 'p' ) ('+'|'-')? digits

Examples (ambient radix 10):
    12.1r6     -> 73/6      (12.1666...)
    .r142857   -> 1/7
    0x1.p10    -> 1024      (p scales by powers of two)
    0.1r6e1    -> 5/3       (e / xp scale by powers of the literal's radix)

Two lexical classes are used depending on the literal's own radix:
- below 15, digits are 0-9 a-d and `e` is free to mark an exponent;
- from 15 upward, digits are 0-9 a-o (bases up to 25) and `e` is the
  digit fourteen, so only `xp` and `p` mark an exponent.

The digits after the exponent marker are read in the ambient radix, not
the literal's own: in a decimal context `0x1.p10` is 2**10.
"""

import re
from fractions import Fraction
from typing import Optional, Tuple

from .errors import LiteralError
from .expansion import DIGITS, power
from .radix import strip_radix_prefix


# ============================================================================
# Lexical Classes
# ============================================================================

LITERAL_ALLOWING_E = re.compile(
    r"(?P<integral>[0-9a-dA-D]*)"
    r"(?P<dot>\.(?P<before_rep>[0-9a-dA-D]*)(?P<rep_digits>r[0-9a-dA-D]*)?)?"
    r"(?P<exponent>(?:e|xp|p)[+-]?[0-9a-dA-D]+)?"
)

LITERAL_FORBIDDING_E = re.compile(
    r"(?P<integral>[0-9a-oA-O]*)"
    r"(?P<dot>\.(?P<before_rep>[0-9a-oA-O]*)(?P<rep_digits>r[0-9a-oA-O]*)?)?"
    r"(?P<exponent>(?:xp|p)[+-]?[0-9a-oA-O]+)?"
)

# First radix whose digit set includes `e`
E_AS_DIGIT_FROM = 15


def literal_pattern(radix: int):
    """Compiled literal pattern for a literal whose own radix is `radix`"""
    if radix < E_AS_DIGIT_FROM:
        return LITERAL_ALLOWING_E
    return LITERAL_FORBIDDING_E


def _int_in_radix(digits: str, radix: int) -> int:
    """Convert a digit run; an empty run counts as '0'"""
    value = 0
    for ch in digits:
        digit = DIGITS.find(ch.lower())
        if digit < 0 or digit >= radix:
            raise LiteralError(f"invalid digit `{ch}` found in `{digits}` for radix {radix}")
        value = value * radix + digit
    return value


def _exponent_scale(exponent: str, own_radix: int, external_radix: int) -> Fraction:
    if not exponent:
        return Fraction(1)
    if exponent.startswith('xp'):
        base, digits = own_radix, exponent[2:]
    elif exponent.startswith('e'):
        base, digits = own_radix, exponent[1:]
    else:
        base, digits = 2, exponent[1:]
    return power(base, _int_in_radix(digits, external_radix))


# ============================================================================
# Parsing
# ============================================================================

def parse_literal_with_both_contexts(
    text: str,
    external_radix: int,
    literal_own_radix: Optional[int] = None,
) -> Tuple[Fraction, str]:
    """
    Parse a literal whose radix prefix has already been removed.

    Args:
        text: Input starting at the literal's digits
        external_radix: Ambient radix (used for exponent digits, and for the
            literal itself when literal_own_radix is None)
        literal_own_radix: Radix declared by a stripped prefix, if any

    Returns:
        (value, unconsumed remainder of text)

    Raises:
        LiteralError: On an empty match, a standalone dot, or a digit out of range
    """
    own_radix = literal_own_radix if literal_own_radix is not None else external_radix
    match = literal_pattern(own_radix).match(text)

    whole = match.group(0)
    if not whole:
        raise LiteralError("No parse as a numeric literal")

    integral = match.group('integral')
    before_rep = match.group('before_rep') or ''
    rep_digits = match.group('rep_digits') or ''
    if match.group('dot') == '.' and not integral:
        raise LiteralError(
            "\"A standalone single dot `.`, optionally followed by exponent\" is forbidden"
        )

    value = Fraction(_int_in_radix(integral, own_radix))

    scaling = own_radix ** len(before_rep)
    value += Fraction(_int_in_radix(before_rep, own_radix), scaling)

    if rep_digits:
        repeating = rep_digits[1:]
        period = own_radix ** len(repeating) - 1
        # `r` with nothing after it repeats nothing
        if period:
            value += Fraction(_int_in_radix(repeating, own_radix), scaling * period)

    value *= _exponent_scale(match.group('exponent') or '', own_radix, external_radix)
    return value, text[match.end():]


def parse_literal(text: str, external_radix: int) -> Tuple[Fraction, str]:
    """
    Parse the numeric literal at the start of text.

    Args:
        text: Input starting at a literal (leading whitespace is not skipped)
        external_radix: Ambient radix context

    Returns:
        (value, unconsumed remainder of text)

    Raises:
        LiteralError: If text does not start with a well-formed literal

    Example:
        >>> parse_literal('12.1r6;', 10)
        (Fraction(73, 6), ';')
        >>> parse_literal('0x1.p10', 6)
        (Fraction(64, 1), '')
    """
    stripped, own_radix = strip_radix_prefix(text)
    return parse_literal_with_both_contexts(stripped, external_radix, own_radix)


__all__ = [
    'LITERAL_ALLOWING_E', 'LITERAL_FORBIDDING_E', 'E_AS_DIGIT_FROM',
    'literal_pattern', 'parse_literal', 'parse_literal_with_both_contexts',
]
