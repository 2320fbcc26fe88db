"""
Continued-Fraction and Digit-Expansion Engine

Pure functions converting exact rationals into the representations the
calculator prints, and back:

    continued_fraction(Fraction(1, 7))      -> 0, 7
    digit_expansion(Fraction(1, 7), 10)     -> '0.r142857'
    digit_expansion(Fraction(73, 6), 10)    -> '12.1r6'

Both expansions terminate for every rational input: the continued
fraction is the Euclidean algorithm on numerator/denominator, and the
positional expansion can visit at most `denominator` distinct
remainders before one repeats.
"""

from fractions import Fraction
from typing import Dict, Iterable, Iterator, List

from .errors import PeriodiCodeError, E_DIVISION_BY_ZERO
from .radix import validate_radix


# Digit symbols shared with the literal grammar (lowercase on output)
DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'


def to_radix_string(n: int, radix: int) -> str:
    """
    Render an integer in the given radix using lowercase digits.

    Example:
        >>> to_radix_string(255, 16)
        'ff'
        >>> to_radix_string(-6, 2)
        '-110'
    """
    if n < 0:
        return '-' + to_radix_string(-n, radix)
    if n == 0:
        return '0'
    digits = []
    while n:
        n, d = divmod(n, radix)
        digits.append(DIGITS[d])
    return ''.join(reversed(digits))


def floor_rational(x: Fraction) -> int:
    """Largest integer <= x (rounds toward negative infinity, not toward zero)"""
    return x.numerator // x.denominator


def power(radix: int, exponent: int) -> Fraction:
    """
    Exact radix ** exponent, producing a reciprocal for negative exponents.

    Example:
        >>> power(2, 10)
        Fraction(1024, 1)
        >>> power(2, -10)
        Fraction(1, 1024)
    """
    if exponent < 0:
        return Fraction(1, radix ** -exponent)
    return Fraction(radix ** exponent)


# ============================================================================
# Continued Fractions
# ============================================================================

def continued_fraction(x: Fraction) -> Iterator[int]:
    """
    Yield the simple continued-fraction terms of x.

    The first term is floor(x) and may be negative or zero; every later
    term is positive. The raw Euclidean output is yielded as-is.

    Args:
        x: Exact rational

    Yields:
        a0, a1, ..., an with x == a0 + 1/(a1 + 1/(... + 1/an))
    """
    x = Fraction(x)
    while True:
        n = floor_rational(x)
        yield n
        rest = x - n
        if rest == 0:
            return
        x = 1 / rest


def fold_continued_fraction(terms: Iterable) -> Fraction:
    """
    Collapse continued-fraction terms back into a single rational.

    Folds from the last term backward: acc = an, then acc = 1/acc + a(k-1).

    Args:
        terms: Non-empty sequence of rationals (integers in the simple form)

    Returns:
        a0 + 1/(a1 + 1/(... + 1/an))

    Raises:
        ValueError: If terms is empty
        PeriodiCodeError: If an intermediate value that must be inverted is zero
    """
    values = [Fraction(t) for t in terms]
    if not values:
        raise ValueError("a continued fraction needs at least one term")
    acc = values[-1]
    for term in reversed(values[:-1]):
        if acc == 0:
            raise PeriodiCodeError(
                E_DIVISION_BY_ZERO,
                "Division by zero inside a continued-fraction literal",
            )
        acc = 1 / acc + term
    return acc


# ============================================================================
# Positional Digit Expansion
# ============================================================================

def digit_expansion(x: Fraction, radix: int) -> str:
    """
    Exact positional expansion of x in the given radix.

    A repeating tail is introduced by `r`: everything after the `r`
    repeats forever. The result re-parses to x as a literal in the same
    radix (after a leading `-`, which the expression grammar reads as
    unary minus).

    Args:
        x: Exact rational
        radix: Output radix in [2, 25]

    Returns:
        Expansion string

    Example:
        >>> digit_expansion(Fraction(1, 7), 10)
        '0.r142857'
        >>> digit_expansion(Fraction(1, 6), 10)
        '0.1r6'
        >>> digit_expansion(Fraction(-5, 2), 10)
        '-2.5'
    """
    validate_radix(radix)
    x = Fraction(x)
    if x < 0:
        return '-' + digit_expansion(-x, radix)

    integral = floor_rational(x)
    head = to_radix_string(integral, radix)
    f = x - integral
    if f == 0:
        return head

    # remainder (before scaling) -> index of the digit it produced
    seen: Dict[Fraction, int] = {}
    digits: List[str] = []

    while True:
        seen[f] = len(digits)
        f *= radix
        d = floor_rational(f)
        digits.append(DIGITS[d])
        f -= d
        if f == 0:
            return f"{head}.{''.join(digits)}"
        if f in seen:
            pos = seen[f]
            return f"{head}.{''.join(digits[:pos])}r{''.join(digits[pos:])}"


__all__ = [
    'DIGITS', 'to_radix_string', 'floor_rational', 'power',
    'continued_fraction', 'fold_continued_fraction', 'digit_expansion',
]
